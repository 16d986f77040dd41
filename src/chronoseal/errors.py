"""
Error taxonomy shared by the compiler, the manifest publisher, the HTTP
boundary and the CLI.

Each class carries the HTTP status and the message a caller is allowed to
see.  Internal detail stays on the exception (and in the logs).
"""

from __future__ import annotations


class ActionError(RuntimeError):
    status_code: int = 500
    exit_code: int = 1
    public_message: str = "Internal Server Error"


class ClientInputError(ActionError):
    status_code = 400
    exit_code = 2

    @property
    def public_message(self) -> str:  # type: ignore[override]
        return str(self)


class MissingParameterError(ClientInputError):
    def __init__(self, name: str) -> None:
        super().__init__(f"{name.capitalize()} parameter is required")
        self.name = name


class ManifestConstructionError(ActionError):
    exit_code = 3
    public_message = "Failed to create metadata"

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class EncodingError(ActionError):
    exit_code = 4


class TransactionDecodeError(ValueError):
    pass
