#!/usr/bin/env python3
"""Check that every contract template has an ABI and creation bytecode"""

import sys
from pathlib import Path

# Add parent directory to path so we can import the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from nft_sdk.artifacts.loader import (  # noqa: E402
    ARTIFACTS_DIR,
    load_artifact,
    list_available_contracts,
)
from nft_sdk.contracts.base import Template  # noqa: E402


def validate() -> int:
    """Return 0 when every template artifact is deployable"""
    print(f"Validating artifacts in {ARTIFACTS_DIR}...")

    contracts = list_available_contracts()
    missing = sorted(t.value for t in Template if t.value not in contracts)
    all_valid = not missing
    for name in missing:
        print(f"  ❌ {name}: template has no artifact mapping")

    for name in contracts:
        try:
            artifact = load_artifact(name)
        except (FileNotFoundError, ValueError) as e:
            print(f"  ❌ {name}: {e}")
            all_valid = False
            continue

        abi = artifact.get("abi", [])
        bytecode = artifact.get("bytecode", "")
        if not abi:
            print(f"  ⚠️  {name}: No ABI found")
            all_valid = False
        elif not bytecode or bytecode == "0x":
            print(f"  ⚠️  {name}: No bytecode found")
            all_valid = False
        else:
            print(f"  ✅ {name}: {len(abi)} ABI items, {len(bytecode)} bytecode chars")

    print()
    if all_valid:
        print("✅ All templates deployable!")
        return 0
    print("❌ Some templates failed validation")
    return 1


if __name__ == "__main__":
    sys.exit(validate())
