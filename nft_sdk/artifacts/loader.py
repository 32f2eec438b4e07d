"""
Artifact loader for compiled smart contracts.

This module provides functions to load the ABI and creation bytecode of
each contract template from the Hardhat-compiled contract artifacts.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

# Get the package root directory
PACKAGE_DIR = Path(__file__).parent.parent
# Artifacts are copied during package build to this location
ARTIFACTS_DIR = PACKAGE_DIR / "data" / "artifacts"

# Fallback to development path if artifacts not in package
if not ARTIFACTS_DIR.exists():
    PROJECT_ROOT = PACKAGE_DIR.parent
    ARTIFACTS_DIR = PROJECT_ROOT / "artifacts" / "contracts"

# Contract name mappings
CONTRACT_PATHS = {
    "ERC721Mintable": "ERC721Mintable.sol/ERC721Mintable.json",
    "ERC721UserMintable": "ERC721UserMintable.sol/ERC721UserMintable.json",
    "ERC1155Mintable": "ERC1155Mintable.sol/ERC1155Mintable.json",
}


@lru_cache(maxsize=None)
def _read_artifact(path: Path) -> Dict[str, Any]:
    with open(path, "r") as f:
        return json.load(f)


def load_artifact(contract_name: str) -> Dict[str, Any]:
    """
    Load the complete artifact JSON for a contract.

    Args:
        contract_name: Name of the contract (e.g., 'ERC721Mintable')

    Returns:
        Complete artifact dictionary including ABI and bytecode

    Raises:
        FileNotFoundError: If the artifact file doesn't exist
        ValueError: If the contract name is not recognized
    """
    if contract_name not in CONTRACT_PATHS:
        available = ", ".join(CONTRACT_PATHS.keys())
        raise ValueError(
            f"Unknown contract: {contract_name}. "
            f"Available contracts: {available}"
        )

    artifact_path = ARTIFACTS_DIR / CONTRACT_PATHS[contract_name]

    if not artifact_path.exists():
        raise FileNotFoundError(
            f"Artifact file not found: {artifact_path}\n"
            f"Make sure the contracts have been compiled with 'npm run compile'"
        )

    return _read_artifact(artifact_path)


def get_abi(contract_name: str) -> List[Dict[str, Any]]:
    """
    Get the ABI for a specific contract.

    Args:
        contract_name: Name of the contract

    Returns:
        Contract ABI as a list
    """
    artifact = load_artifact(contract_name)
    return artifact.get('abi', [])


def get_bytecode(contract_name: str) -> str:
    """
    Get the deployment bytecode for a specific contract.

    Args:
        contract_name: Name of the contract

    Returns:
        Bytecode as a hex string (with '0x' prefix)
    """
    artifact = load_artifact(contract_name)
    return artifact.get('bytecode', '0x')


def list_available_contracts() -> List[str]:
    """
    List all contract templates known to the package.

    Returns:
        List of contract names
    """
    return list(CONTRACT_PATHS.keys())
