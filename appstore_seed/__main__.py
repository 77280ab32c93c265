from appstore_seed.main import cli

cli()
