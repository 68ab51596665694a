import click

from cli.store_options import create_store_client, store_options
from utils.logger_utils import get_logger

logger = get_logger("Init Chain Schema")


@click.command()
@store_options
def init_chain_schema(database_url: str, chain_schema: str):
    """
    Creates the chain schema and its blocks table if they don't exist.
    """
    logger.info("Starting block store schema initialization...")

    client = create_store_client(database_url, chain_schema)
    try:
        client.create_schema()
        logger.info("Schema initialization completed successfully.")
    except Exception as e:
        logger.exception(f"Failed to initialize block store schema: {e}")
        raise e
    finally:
        client.close()
