"""
Pneuma - On-chain layer for Chronoseal.

Provides ABI management, call encoding, the chain registry and unsigned
transaction serialization for the timestamped-message contract.

Uses eth-abi + eth-utils + rlp instead of the heavyweight web3.py.
"""
