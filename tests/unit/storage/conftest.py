import pytest
from sqlalchemy import insert

from storage.chain_store.chain_store_client import ChainStoreClient
from storage.chain_store.models import Block



@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'blocks.db'}"


@pytest.fixture
def store(database_url):
    client = ChainStoreClient(database_url, chain_schema=None)
    client.create_schema()
    yield client
    client.close()


@pytest.fixture
def strict_store(store, database_url):
    client = ChainStoreClient(database_url, chain_schema="", legacy_hex=False)
    yield client
    client.close()


@pytest.fixture
def add_block(store):
    def _add(number, data, block_hash=None):
        with store.engine.begin() as connection:
            connection.execute(
                insert(Block),
                [{"number": number, "hash": block_hash or f"0x{number:064x}", "data": data}],
            )
    return _add
