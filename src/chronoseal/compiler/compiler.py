"""
Transaction Compiler - Turn an execution request into an unsigned transaction.

Pipeline: derive the timestamp from the message, ABI-encode
`storeMessage(message, timestamp)`, assemble a legacy transaction for the
configured contract and chain, and serialize it for transport.  The only
impure input is the clock, which is injectable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence

from loguru import logger

from ..errors import EncodingError, MissingParameterError
from ..logs import log_event
from ..pneuma.abi import encode_call, timestamped_message_abi
from ..pneuma.chains import Chain
from ..pneuma.tx import LegacyRlpSerializer, TransactionSerializer, UnsignedTransaction
from ..utils import unix_now
from .offset import derive_timestamp

STORE_MESSAGE = "storeMessage"

Encoder = Callable[[Sequence[dict[str, Any]], str, Sequence[Any]], bytes]


@dataclass(frozen=True)
class ExecutionRequest:
    message: Optional[str] = None
    # Declared in the manifest; not consumed by the compiler.
    amount: Optional[str] = None

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "ExecutionRequest":
        return cls(message=_first_value(params, "message"), amount=_first_value(params, "amount"))


def _first_value(params: Mapping[str, str], name: str) -> Optional[str]:
    # Repeated query keys resolve to the first occurrence.
    getlist = getattr(params, "getlist", None)
    if getlist is None:
        return params.get(name)
    values = getlist(name)
    return values[0] if values else None


@dataclass(frozen=True)
class ExecutionResponse:
    serialized_transaction: str
    chain_name: str

    def to_dict(self) -> dict[str, str]:
        return {
            "serializedTransaction": self.serialized_transaction,
            "chainId": self.chain_name,
        }


@dataclass(frozen=True)
class CompilerConfig:
    contract_address: str
    chain: Chain
    abi: Sequence[dict[str, Any]] = field(default_factory=timestamped_message_abi)
    function_name: str = STORE_MESSAGE


@dataclass(frozen=True)
class CompiledCall:
    """Intermediate result, exposed for the CLI and for inspection."""

    message: str
    timestamp: int
    offset: int
    transaction: UnsignedTransaction


class TransactionCompiler:
    def __init__(
        self,
        config: CompilerConfig,
        encoder: Encoder = encode_call,
        serializer: Optional[TransactionSerializer] = None,
        clock: Callable[[], int] = unix_now,
    ) -> None:
        self.config = config
        self.encoder = encoder
        self.serializer = serializer or LegacyRlpSerializer()
        self.clock = clock

    def build(self, request: ExecutionRequest) -> CompiledCall:
        """Validate the request and assemble the unsigned transaction."""
        message = request.message
        if not message:
            raise MissingParameterError("message")

        now = self.clock()
        timestamp = derive_timestamp(message, now)

        try:
            data = self.encoder(self.config.abi, self.config.function_name, [message, timestamp])
        except Exception as exc:
            raise EncodingError(f"Failed to encode {self.config.function_name}: {exc}") from exc

        tx = UnsignedTransaction(
            to=self.config.contract_address,
            data=data,
            chain_id=self.config.chain.id,
        )
        return CompiledCall(message=message, timestamp=timestamp, offset=timestamp - now, transaction=tx)

    def compile(self, request: ExecutionRequest) -> ExecutionResponse:
        """
        Compile an execution request into a serialized unsigned transaction.

        Raises:
            MissingParameterError: If `message` is absent or empty
            EncodingError: If call encoding or serialization fails
        """
        return self.serialize(self.build(request))

    def serialize(self, compiled: CompiledCall) -> ExecutionResponse:
        try:
            serialized = self.serializer.serialize(compiled.transaction)
        except Exception as exc:
            raise EncodingError(f"Failed to serialize transaction: {exc}") from exc

        logger.info(
            log_event(
                "tx.compiled",
                chain=self.config.chain.tag,
                offset=compiled.offset,
                calldata_bytes=len(compiled.transaction.data),
                format=self.serializer.format,
            )
        )
        return ExecutionResponse(serialized_transaction=serialized, chain_name=self.config.chain.name)
