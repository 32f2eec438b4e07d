"""
Setup configuration for nft-sdk package.

This package provides Python access to NFT contract templates (ERC721 and
ERC1155) for deployment and interaction, plus a client for the NFT indexing
API and IPFS storage.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read version from package
version_file = Path(__file__).parent / "nft_sdk" / "__init__.py"
version = "1.0.0"  # Default version
if version_file.exists():
    with open(version_file) as f:
        for line in f:
            if line.startswith("__version__"):
                version = line.split("=")[1].strip().strip('"').strip("'")
                break

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = ""
if readme_file.exists():
    with open(readme_file, encoding="utf-8") as f:
        long_description = f.read()

setup(
    name="nft-sdk",
    version=version,
    description="Python SDK to deploy, load and query NFT smart contracts",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    include_package_data=True,
    package_data={
        "nft_sdk": [
            "data/artifacts/**/*.json",
        ],
    },
    install_requires=[
        "web3>=7.0.0",
        "httpx>=0.24.0",
        "eth-account>=0.13.0",
        "hexbytes>=1.0.0",
        "aiohttp>=3.8.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: System :: Distributed Computing",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    keywords="ethereum, blockchain, nft, erc721, erc1155, smart-contracts, web3, ipfs",
)

# Version History:
# 1.0.0 - ERC721Mintable, ERC721UserMintable and ERC1155Mintable templates
