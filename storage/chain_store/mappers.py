from typing import Any, Dict, Optional

from storage.chain_store.entities import LightTransactionReceipt, ReceiptGasStatus, TransactionGas
from utils.formatter_utils import bytes_to_hex, bytes_to_int, hex_to_bytes

HASH_SIZE = 32
U64_SIZE = 8
U256_SIZE = 32


class ReceiptMapper(object):
    """Turns the JSON objects of a block document into receipt entities."""

    def __init__(self, legacy_hex: bool = True):
        self.legacy_hex = legacy_hex

    def json_dict_to_gas_status(self, json_dict: Any) -> ReceiptGasStatus:
        # A null receipt still yields a row, with both fields absent
        if not isinstance(json_dict, dict):
            return ReceiptGasStatus()
        return ReceiptGasStatus(
            gas_used=self._optional_bytes(json_dict, "gasUsed"),
            status=self._optional_bytes(json_dict, "status"),
        )

    def json_dict_to_light_receipt(self, json_dict: Any) -> LightTransactionReceipt:
        if not isinstance(json_dict, dict):
            raise ValueError(f"Expected a receipt object, got {type(json_dict).__name__}")
        return LightTransactionReceipt(
            transaction_hash=self._hash(json_dict, "transactionHash"),
            transaction_index=self._int(json_dict, "transactionIndex", U64_SIZE),
            block_hash=self._optional_hash(json_dict, "blockHash"),
            block_number=self._optional_int(json_dict, "blockNumber", U64_SIZE),
            gas_used=self._optional_int(json_dict, "gasUsed", U256_SIZE),
            status=self._optional_int(json_dict, "status", U64_SIZE),
        )

    @staticmethod
    def json_dict_to_transaction_gas(json_dict: Dict[str, Any]) -> TransactionGas:
        # Transactions come from the node verbatim and always use 0x prefixed hex
        raw_hash = hex_to_bytes(json_dict.get("hash"), legacy=False)
        if len(raw_hash) != HASH_SIZE:
            raise ValueError(f"hash is {len(raw_hash)} bytes wide, expected {HASH_SIZE}")
        return TransactionGas(
            transaction_hash=bytes_to_hex(raw_hash),
            gas=bytes_to_int(hex_to_bytes(json_dict.get("gas"), legacy=False), U256_SIZE, "gas"),
        )

    def _optional_bytes(self, json_dict: Dict[str, Any], key: str) -> Optional[bytes]:
        value = json_dict.get(key)
        if value is None:
            return None
        return hex_to_bytes(value, legacy=self.legacy_hex)

    def _hash(self, json_dict: Dict[str, Any], key: str) -> str:
        raw = hex_to_bytes(json_dict.get(key), legacy=self.legacy_hex)
        if len(raw) != HASH_SIZE:
            raise ValueError(f"{key} is {len(raw)} bytes wide, expected {HASH_SIZE}")
        return bytes_to_hex(raw)

    def _optional_hash(self, json_dict: Dict[str, Any], key: str) -> Optional[str]:
        if json_dict.get(key) is None:
            return None
        return self._hash(json_dict, key)

    def _int(self, json_dict: Dict[str, Any], key: str, max_size: int) -> int:
        return bytes_to_int(hex_to_bytes(json_dict.get(key), legacy=self.legacy_hex), max_size, key)

    def _optional_int(self, json_dict: Dict[str, Any], key: str, max_size: int) -> Optional[int]:
        if json_dict.get(key) is None:
            return None
        return self._int(json_dict, key, max_size)
