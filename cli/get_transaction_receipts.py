import json

import click

from cli.store_options import create_store_client, hex_mode_option, store_options
from storage.chain_store.exceptions import ChainStoreError
from utils.logger_utils import get_logger

logger = get_logger("Get Transaction Receipts")


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("block_hash", type=str)
@store_options
@hex_mode_option
def get_transaction_receipts(block_hash: str, database_url: str, chain_schema: str, strict_hex: bool):
    """Prints the light transaction receipts of the block with BLOCK_HASH as JSON lines."""
    client = create_store_client(database_url, chain_schema, strict_hex)
    try:
        receipts = client.find_transaction_receipts_for_block(block_hash)
    except (ChainStoreError, ValueError) as e:
        logger.error(f"Failed to read receipts of block {block_hash}: {e}")
        raise click.ClickException(str(e))
    finally:
        client.close()

    for receipt in receipts:
        click.echo(json.dumps(receipt.model_dump(mode="json")))
