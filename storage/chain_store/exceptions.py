class ChainStoreError(Exception):
    """A query against the block store failed."""
