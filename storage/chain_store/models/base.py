from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base

# Tables carry no schema; ChainStoreClient maps them onto the chain schema at execution time.
metadata = MetaData()
Base = declarative_base(metadata=metadata)
