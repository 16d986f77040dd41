"""
Transaction Builder - Assemble and serialize unsigned legacy transactions.

Nothing here signs or sends.  Nonce, gas price and gas limit stay empty so
the wallet that signs the payload can fill them in; the chain id is bound
through the EIP-155 unsigned form `[..., chainId, 0, 0]`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Protocol

import rlp
from eth_utils import big_endian_to_int, decode_hex, encode_hex, to_canonical_address, to_checksum_address
from rlp.exceptions import DecodingError

from ..errors import TransactionDecodeError

LEGACY = "legacy"

# nonce, gasPrice, gas, to, value, data, v(chainId), r, s
_LEGACY_FIELD_COUNT = 9


@dataclass(frozen=True)
class UnsignedTransaction:
    to: str
    data: bytes
    chain_id: int
    type: str = LEGACY
    nonce: int = 0
    gas_price: int = 0
    gas: int = 0
    value: int = 0

    def to_dict(self) -> dict:
        return {
            "to": self.to,
            "data": encode_hex(self.data),
            "chainId": self.chain_id,
            "type": self.type,
        }


class TransactionSerializer(Protocol):
    format: str

    def serialize(self, tx: UnsignedTransaction) -> str:
        ...


class LegacyRlpSerializer:
    """EIP-155 unsigned legacy encoding, hex with 0x prefix."""

    format = "rlp"

    def serialize(self, tx: UnsignedTransaction) -> str:
        if tx.type != LEGACY:
            raise ValueError(f"Unsupported transaction type: {tx.type}")
        if tx.chain_id <= 0:
            raise ValueError("Legacy serialization requires a positive chain id")

        fields = [
            tx.nonce,
            tx.gas_price,
            tx.gas,
            to_canonical_address(tx.to),
            tx.value,
            tx.data,
            tx.chain_id,
            0,
            0,
        ]
        return encode_hex(rlp.encode(fields))


class JsonTransactionSerializer:
    """Compact JSON transport: the descriptor itself, hex-encoded calldata."""

    format = "json"

    def serialize(self, tx: UnsignedTransaction) -> str:
        return json.dumps(tx.to_dict(), separators=(",", ":"))


SERIALIZERS: dict[str, type] = {
    LegacyRlpSerializer.format: LegacyRlpSerializer,
    JsonTransactionSerializer.format: JsonTransactionSerializer,
}


def get_serializer(fmt: str) -> TransactionSerializer:
    try:
        return SERIALIZERS[fmt]()
    except KeyError:
        raise ValueError(
            f"Unknown transaction format {fmt!r} (expected one of: {', '.join(SERIALIZERS)})"
        ) from None


def decode_legacy_transaction(serialized: str) -> UnsignedTransaction:
    """
    Decode an unsigned legacy transaction produced by `LegacyRlpSerializer`.

    Raises:
        TransactionDecodeError: If the payload is not hex, not RLP, or not a
            9-field unsigned EIP-155 list.
    """
    try:
        raw = decode_hex(serialized)
        items = rlp.decode(raw)
    except (ValueError, DecodingError) as exc:
        raise TransactionDecodeError(f"Not a serialized transaction: {exc}") from exc

    if not isinstance(items, list) or len(items) != _LEGACY_FIELD_COUNT:
        raise TransactionDecodeError("Expected a 9-field legacy transaction list")
    if any(not isinstance(item, bytes) for item in items):
        raise TransactionDecodeError("Legacy transaction fields must be byte strings")

    nonce, gas_price, gas, to, value, data, v, r, s = items
    if r or s:
        raise TransactionDecodeError("Transaction is signed")
    if len(to) != 20:
        raise TransactionDecodeError("Contract creation payloads are not supported")

    return UnsignedTransaction(
        to=to_checksum_address(to),
        data=data,
        chain_id=big_endian_to_int(v),
        nonce=big_endian_to_int(nonce),
        gas_price=big_endian_to_int(gas_price),
        gas=big_endian_to_int(gas),
        value=big_endian_to_int(value),
    )
