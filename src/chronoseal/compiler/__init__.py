from .compiler import (
    CompiledCall,
    CompilerConfig,
    ExecutionRequest,
    ExecutionResponse,
    TransactionCompiler,
)
from .offset import MAX_OFFSET, derive_timestamp, message_offset

__all__ = [
    "CompiledCall",
    "CompilerConfig",
    "ExecutionRequest",
    "ExecutionResponse",
    "MAX_OFFSET",
    "TransactionCompiler",
    "derive_timestamp",
    "message_offset",
]
