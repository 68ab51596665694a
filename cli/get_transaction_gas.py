import json
from typing import Tuple

import click

from cli.store_options import create_store_client, store_options
from storage.chain_store.exceptions import ChainStoreError
from utils.logger_utils import get_logger

logger = get_logger("Get Transaction Gas")


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-s", "--start-block", required=True, type=click.IntRange(min=0), help="First block of the range (inclusive).")
@click.option("-e", "--end-block", required=True, type=click.IntRange(min=0), help="Last block of the range (inclusive).")
@click.argument("transaction_hashes", nargs=-1, required=True)
@store_options
def get_transaction_gas(
    start_block: int,
    end_block: int,
    transaction_hashes: Tuple[str, ...],
    database_url: str,
    chain_schema: str,
):
    """Prints a JSON object mapping each transaction hash found in the block range to its gas."""
    if end_block < start_block:
        raise click.BadOptionUsage("--end-block", "End block must be greater than or equal to start block.")

    client = create_store_client(database_url, chain_schema)
    try:
        gas_by_hash = client.find_transaction_gas_in_block_range(transaction_hashes, start_block, end_block)
    except (ChainStoreError, ValueError) as e:
        logger.error(f"Failed to read transaction gas in blocks {start_block}..{end_block}: {e}")
        raise click.ClickException(str(e))
    finally:
        client.close()

    click.echo(json.dumps(gas_by_hash, sort_keys=True))
