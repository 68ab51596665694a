import click


from cli.compile_wasm_fixtures import compile_wasm_fixtures
from cli.get_block_receipts import get_block_receipts
from cli.get_transaction_receipts import get_transaction_receipts
from cli.get_transaction_gas import get_transaction_gas
from cli.init_chain_schema import init_chain_schema


@click.group()
@click.version_option(version="0.3.0")
@click.pass_context
def cli(ctx):
    pass


# Compile AssemblyScript test sources into wasm fixtures
cli.add_command(compile_wasm_fixtures, "compile_wasm_fixtures")

# Receipt queries against the block store
cli.add_command(get_block_receipts, "get_block_receipts")
cli.add_command(get_transaction_receipts, "get_transaction_receipts")
cli.add_command(get_transaction_gas, "get_transaction_gas")

# Initialize block store schema
cli.add_command(init_chain_schema, "init_chain_schema")
