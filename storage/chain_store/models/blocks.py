from sqlalchemy import BigInteger, Column, JSON, String
from sqlalchemy.dialects.postgresql import JSONB

from storage.chain_store.models.base import Base


class Block(Base):
    __tablename__ = 'blocks'
    __table_args__ = (
        {'comment': 'Chain blocks stored as JSON documents'},
    )

    number = Column(BigInteger, primary_key=True)
    hash = Column(String, nullable=False, index=True)
    parent_hash = Column(String)

    # {"block": {..., "transactions": [...]}, "transaction_receipts": [...]}
    data = Column(JSON().with_variant(JSONB(), 'postgresql'))
