"""
appstore-seed - initial data loader for the appstore MongoDB database.
"""

__version__ = "0.1.0"
