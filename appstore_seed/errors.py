"""
Seeder error types.
"""


class DuplicateEntityError(Exception):
    """
    Raised when the principal or a document with the same identifier
    already exists in the target database.

    Always raised from the underlying driver error.
    """

    def __init__(self, kind: str, key):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} {key!r} already exists")
