"""
ABI Loader - Loads contract ABIs shipped as package data and encodes calls.

Single source of truth: pneuma/abis/*.json (compilation artifacts with an
"abi" key).  Call encoding is a 4-byte Keccak-256 selector followed by
eth-abi argument encoding, with no web3.py in the loop.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Sequence

from eth_abi import decode, encode
from eth_hash.auto import keccak

ABI_DIR = Path(__file__).resolve().parent / "abis"

TIMESTAMPED_MESSAGE = "TimestampedMessage"


@lru_cache(maxsize=16)
def load_abi(contract_name: str) -> list[dict[str, Any]]:
    """
    Load the ABI for a bundled contract.

    Args:
        contract_name: Contract name (e.g., "TimestampedMessage")

    Returns:
        ABI as a list of dicts

    Raises:
        FileNotFoundError: If no artifact exists for the contract
    """
    abi_path = ABI_DIR / f"{contract_name}.json"

    if not abi_path.exists():
        raise FileNotFoundError(f"ABI not found: {abi_path}")

    with abi_path.open("r", encoding="utf-8") as f:
        artifact = json.load(f)

    return artifact["abi"]


def timestamped_message_abi() -> list[dict[str, Any]]:
    """Load TimestampedMessage ABI."""
    return load_abi(TIMESTAMPED_MESSAGE)


def find_function(abi: Sequence[dict[str, Any]], function_name: str) -> dict[str, Any]:
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == function_name:
            return entry
    raise ValueError(f"Function {function_name} not found in ABI")


def _input_types(func: dict[str, Any]) -> list[str]:
    return [inp["type"] for inp in func.get("inputs", [])]


def function_selector(func: dict[str, Any]) -> bytes:
    sig = f"{func['name']}({','.join(_input_types(func))})"
    # NOTE: Keccak-256 != SHA3-256 (NIST). Never use hashlib.sha3_256 here.
    return keccak(sig.encode("utf-8"))[:4]


def encode_call(abi: Sequence[dict[str, Any]], function_name: str, args: Sequence[Any]) -> bytes:
    """
    ABI-encode a function call.

    Args:
        abi: Contract ABI
        function_name: Function to call
        args: Positional function arguments

    Returns:
        Calldata bytes (selector + encoded arguments)
    """
    func = find_function(abi, function_name)
    input_types = _input_types(func)

    if len(args) != len(input_types):
        raise ValueError(
            f"{function_name} expects {len(input_types)} arguments, got {len(args)}"
        )

    encoded_args = encode(input_types, list(args)) if input_types else b""
    return function_selector(func) + encoded_args


def decode_call(abi: Sequence[dict[str, Any]], calldata: bytes) -> tuple[str, tuple[Any, ...]]:
    """Reverse `encode_call`: return the function name and decoded arguments."""
    selector, payload = calldata[:4], calldata[4:]
    for entry in abi:
        if entry.get("type") != "function":
            continue
        if function_selector(entry) == selector:
            return entry["name"], tuple(decode(_input_types(entry), payload))
    raise ValueError(f"No function in ABI matches selector 0x{selector.hex()}")
