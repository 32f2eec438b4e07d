"""Artifact loading utilities for compiled smart contracts."""
from .loader import get_abi, get_bytecode, list_available_contracts, load_artifact

__all__ = ["get_abi", "get_bytecode", "list_available_contracts", "load_artifact"]
