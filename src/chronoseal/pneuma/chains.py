"""
Chain Registry - Static identifiers for the chains an action can target.

Tags are the short names used in action manifests (`chains.source`);
ids are EIP-155 chain ids; names are the human-readable labels returned
to callers alongside a serialized transaction.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Chain:
    tag: str
    id: int
    name: str
    native_symbol: str


class UnknownChainError(KeyError):
    def __str__(self) -> str:
        return f"Unknown chain tag: {self.args[0]!r}"


CHAINS: dict[str, Chain] = {
    chain.tag: chain
    for chain in (
        Chain(tag="fuji", id=43113, name="Avalanche Fuji", native_symbol="AVAX"),
        Chain(tag="avalanche", id=43114, name="Avalanche", native_symbol="AVAX"),
        Chain(tag="alfajores", id=44787, name="Alfajores", native_symbol="CELO"),
        Chain(tag="celo", id=42220, name="Celo", native_symbol="CELO"),
        Chain(tag="monad-testnet", id=10143, name="Monad Testnet", native_symbol="MON"),
    )
}

DEFAULT_CHAIN_TAG = "fuji"


def get_chain(tag: str) -> Chain:
    """Look up a chain by its manifest tag."""
    try:
        return CHAINS[tag]
    except KeyError:
        raise UnknownChainError(tag) from None


def chain_by_id(chain_id: int) -> Chain:
    for chain in CHAINS.values():
        if chain.id == chain_id:
            return chain
    raise UnknownChainError(chain_id)
