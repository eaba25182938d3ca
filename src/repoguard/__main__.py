from repoguard.cli import cli

cli()
