import click

from config.settings import settings
from storage.chain_store.chain_store_client import ChainStoreClient


def store_options(func):
    """Adds the block store connection options shared by the store commands."""
    options = [
        click.option(
            "-d",
            "--database-url",
            default=settings.storage.database_url,
            show_default=True,
            type=str,
            help="SQLAlchemy URL of the database holding the chain schemas.",
        ),
        click.option(
            "-c",
            "--chain-schema",
            default=settings.storage.chain_schema,
            show_default=True,
            type=str,
            help="Schema of the chain's blocks table, e.g. chain3. Empty string uses the default schema.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def hex_mode_option(func):
    """Adds --strict-hex/--legacy-hex to the commands that decode receipt fields."""
    return click.option(
        "--strict-hex/--legacy-hex",
        default=not settings.storage.legacy_hex_normalization,
        show_default=True,
        help="Only accept 0x-prefixed hex instead of guessing a bare 'x' delimiter from the length parity.",
    )(func)


def create_store_client(database_url: str, chain_schema: str, strict_hex: bool = False) -> ChainStoreClient:
    return ChainStoreClient(url=database_url, chain_schema=chain_schema, legacy_hex=not strict_hex)
