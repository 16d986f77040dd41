from .manifest import ValidatedManifest, build_manifest, create_metadata, describe
from .models import ActionDefinition, ActionManifest, ParameterSpec
from .schemas import SchemaRegistry, SchemaValidationError

__all__ = [
    "ActionDefinition",
    "ActionManifest",
    "ParameterSpec",
    "SchemaRegistry",
    "SchemaValidationError",
    "ValidatedManifest",
    "build_manifest",
    "create_metadata",
    "describe",
]
