"""Raft message types, an in-process RPC endpoint and clerks for a sharded key/value service."""

__version__ = "0.1.0"
__all__ = ["__version__"]