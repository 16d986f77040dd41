"""
Service configuration.

Values come from the environment, optionally seeded from a `.env` file.
Everything is read once into an immutable `Settings`; the compiler and the
HTTP app receive it by construction.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from eth_utils import is_hex_address, to_checksum_address

from .compiler import CompilerConfig
from .pneuma.chains import DEFAULT_CHAIN_TAG, Chain, UnknownChainError, get_chain
from .pneuma.tx import SERIALIZERS

DEFAULT_CONTRACT_ADDRESS = "0xA9Eaf8E76966b60e9aB63C74a42605E84adF9EcE"
DEFAULT_ACTION_PATH = "/api/my-app"
DEFAULT_SITE_URL = "https://sherry.social"
DEFAULT_ICON_URL = "https://drive.google.com/uc?export=view&id=1S-S6BzeV52cMsWuR6JAOTkKxHRlYuM9K"
DEFAULT_TX_FORMAT = "rlp"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"


class ConfigurationError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    contract_address: str = DEFAULT_CONTRACT_ADDRESS
    chain_tag: str = DEFAULT_CHAIN_TAG
    action_path: str = DEFAULT_ACTION_PATH
    site_url: str = DEFAULT_SITE_URL
    icon_url: str = DEFAULT_ICON_URL
    tx_format: str = DEFAULT_TX_FORMAT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if not is_hex_address(self.contract_address):
            raise ConfigurationError(f"Invalid contract address: {self.contract_address}")
        try:
            get_chain(self.chain_tag)
        except UnknownChainError as exc:
            raise ConfigurationError(str(exc)) from None
        if not self.action_path.startswith("/"):
            raise ConfigurationError(f"Action path must start with '/': {self.action_path}")
        if self.tx_format not in SERIALIZERS:
            raise ConfigurationError(f"Unknown transaction format: {self.tx_format}")
        # Normalize to EIP-55 so serialized payloads and logs agree.
        object.__setattr__(self, "contract_address", to_checksum_address(self.contract_address))

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Settings":
        """
        Build settings from CHRONOSEAL_* environment variables.

        Args:
            env_path: Optional .env file loaded first (existing variables win)

        Raises:
            ConfigurationError: If any value is invalid
        """
        dotenv_path = env_path or find_dotenv(usecwd=True)
        if dotenv_path:
            load_dotenv(dotenv_path, override=False)

        port_raw = os.environ.get("CHRONOSEAL_PORT", str(DEFAULT_PORT))
        try:
            port = int(port_raw)
        except ValueError:
            raise ConfigurationError(f"Invalid port: {port_raw}") from None

        return cls(
            contract_address=os.environ.get("CHRONOSEAL_CONTRACT_ADDRESS", DEFAULT_CONTRACT_ADDRESS),
            chain_tag=os.environ.get("CHRONOSEAL_CHAIN", DEFAULT_CHAIN_TAG),
            action_path=os.environ.get("CHRONOSEAL_ACTION_PATH", DEFAULT_ACTION_PATH),
            site_url=os.environ.get("CHRONOSEAL_SITE_URL", DEFAULT_SITE_URL),
            icon_url=os.environ.get("CHRONOSEAL_ICON_URL", DEFAULT_ICON_URL),
            tx_format=os.environ.get("CHRONOSEAL_TX_FORMAT", DEFAULT_TX_FORMAT).lower(),
            host=os.environ.get("CHRONOSEAL_HOST", DEFAULT_HOST),
            port=port,
            log_level=os.environ.get("CHRONOSEAL_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )

    @property
    def chain(self) -> Chain:
        return get_chain(self.chain_tag)

    def compiler_config(self) -> CompilerConfig:
        return CompilerConfig(contract_address=self.contract_address, chain=self.chain)
