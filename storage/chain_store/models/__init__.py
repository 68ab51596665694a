from storage.chain_store.models.base import Base, metadata
from storage.chain_store.models.blocks import Block

# Map table names to their models for selective initialization
TABLE_METADATA = {
    'blocks': {
        'model': Block,
    },
}
