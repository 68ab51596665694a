import json

import click

from cli.store_options import create_store_client, hex_mode_option, store_options
from storage.chain_store.exceptions import ChainStoreError
from utils.formatter_utils import HexDecodingError, bytes_to_hex
from utils.logger_utils import get_logger

logger = get_logger("Get Block Receipts")


def _hex_or_none(raw):
    return bytes_to_hex(raw) if raw is not None else None


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("block_number", type=click.IntRange(min=0))
@store_options
@hex_mode_option
def get_block_receipts(block_number: int, database_url: str, chain_schema: str, strict_hex: bool):
    """
    Prints the decoded gas used and status of every receipt in a block, one JSON object per line.
    Prints nothing for an unknown block or a block without receipts.
    """
    client = create_store_client(database_url, chain_schema, strict_hex)
    try:
        receipts = client.find_receipt_gas_status_for_block(block_number)
    except (ChainStoreError, HexDecodingError) as e:
        logger.error(f"Failed to read receipts of block {block_number}: {e}")
        raise click.ClickException(str(e))
    finally:
        client.close()

    for receipt in receipts:
        click.echo(json.dumps({"gas_used": _hex_or_none(receipt.gas_used), "status": _hex_or_none(receipt.status)}))
