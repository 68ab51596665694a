from pydantic import BaseModel, ConfigDict


class ReceiptGasStatus(BaseModel):
    """Decoded gasUsed / status pair of one receipt, as raw big-endian bytes. Absent fields stay None."""
    model_config = ConfigDict(frozen=True)

    gas_used: bytes | None = None
    status: bytes | None = None


class LightTransactionReceipt(BaseModel):
    """Like a full transaction receipt, but with fewer fields."""
    model_config = ConfigDict(frozen=True)

    type: str = "receipt"
    transaction_hash: str
    transaction_index: int
    block_hash: str | None = None
    block_number: int | None = None
    gas_used: int | None = None
    status: int | None = None


class TransactionGas(BaseModel):
    model_config = ConfigDict(frozen=True)

    transaction_hash: str
    gas: int
