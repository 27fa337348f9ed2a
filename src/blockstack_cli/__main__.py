from blockstack_cli.cli.main import run

run()
