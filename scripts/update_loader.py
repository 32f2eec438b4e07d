#!/usr/bin/env python3
"""
Auto-update loader.py CONTRACT_PATHS with the contract templates
"""
import re
from pathlib import Path


# Templates to expose, keyed by Template value
TEMPLATE_CONTRACTS = {
    # ERC721
    "ERC721Mintable": "ERC721Mintable.sol/ERC721Mintable.json",
    "ERC721UserMintable": "ERC721UserMintable.sol/ERC721UserMintable.json",

    # ERC1155
    "ERC1155Mintable": "ERC1155Mintable.sol/ERC1155Mintable.json",
}


def update_loader(loader_file: Path = Path("nft_sdk/artifacts/loader.py")) -> bool:
    """Rewrite CONTRACT_PATHS in loader.py"""
    if not loader_file.exists():
        print(f"❌ Error: {loader_file} not found")
        return False

    content = loader_file.read_text()

    paths_lines = ["CONTRACT_PATHS = {"]
    for name, path in TEMPLATE_CONTRACTS.items():
        paths_lines.append(f'    "{name}": "{path}",')
    paths_lines.append("}")

    pattern = r"CONTRACT_PATHS = \{[^}]*\}"
    updated_content = re.sub(pattern, "\n".join(paths_lines), content, flags=re.DOTALL)

    loader_file.write_text(updated_content)

    print(f"✅ Updated loader.py with {len(TEMPLATE_CONTRACTS)} templates:")
    for name in TEMPLATE_CONTRACTS:
        print(f"   - {name}")

    return True


if __name__ == "__main__":
    import sys
    success = update_loader()
    sys.exit(0 if success else 1)
