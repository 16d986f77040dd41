__all__ = [
    # Compiler
    "CompilerConfig",
    "ExecutionRequest",
    "ExecutionResponse",
    "TransactionCompiler",
    "derive_timestamp",
    "message_offset",
    # Manifest
    "ActionDefinition",
    "ActionManifest",
    "ParameterSpec",
    "ValidatedManifest",
    "create_metadata",
    "describe",
    # Chain layer
    "Chain",
    "UnsignedTransaction",
    "LegacyRlpSerializer",
    "JsonTransactionSerializer",
    "decode_legacy_transaction",
    "encode_call",
    "get_chain",
    # Errors
    "ActionError",
    "ClientInputError",
    "EncodingError",
    "ManifestConstructionError",
    "MissingParameterError",
    "TransactionDecodeError",
    # Configuration
    "ConfigurationError",
    "Settings",
    # HTTP
    "create_app",
]

from .errors import (
    ActionError,
    ClientInputError,
    EncodingError,
    ManifestConstructionError,
    MissingParameterError,
    TransactionDecodeError,
)
from .pneuma.abi import encode_call
from .pneuma.chains import Chain, get_chain
from .pneuma.tx import (
    JsonTransactionSerializer,
    LegacyRlpSerializer,
    UnsignedTransaction,
    decode_legacy_transaction,
)
from .compiler import (
    CompilerConfig,
    ExecutionRequest,
    ExecutionResponse,
    TransactionCompiler,
    derive_timestamp,
    message_offset,
)
from .config import ConfigurationError, Settings
from .spec.manifest import ValidatedManifest, create_metadata, describe
from .spec.models import ActionDefinition, ActionManifest, ParameterSpec
from .api import create_app
