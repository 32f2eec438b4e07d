"""
Role management for templates built on OpenZeppelin ``AccessControl``.

Minters may mint tokens; admins may grant and revoke roles. The contract
owner can renounce ownership, leaving the contract without an owner.
"""

from web3 import Web3

from ..messages import ErrorLocation, ErrorMessage
from ..provider import PendingWrite
from ..validators import validate_address
from .base import ContractBinding

MINTER_ROLE = Web3.keccak(text="MINTER_ROLE")
DEFAULT_ADMIN_ROLE = bytes(32)


class AccessControl:
    def __init__(self, binding: ContractBinding) -> None:
        self._binding = binding

    def _check(self, location: str, public_address: str) -> None:
        self._binding.require_bound(location)
        validate_address(
            public_address,
            location=location,
            message=ErrorMessage.INVALID_PUBLIC_ADDRESS,
            field="public_address",
        )

    async def add_minter(self, public_address: str) -> PendingWrite:
        location = ErrorLocation.ACCESS_CONTROL_ADD_MINTER
        self._check(location, public_address)
        return await self._binding.transact(location, "grantRole", MINTER_ROLE, public_address)

    async def remove_minter(self, public_address: str) -> PendingWrite:
        location = ErrorLocation.ACCESS_CONTROL_REMOVE_MINTER
        self._check(location, public_address)
        return await self._binding.transact(location, "revokeRole", MINTER_ROLE, public_address)

    async def renounce_minter(self, public_address: str) -> PendingWrite:
        """Give up the minter role; ``public_address`` must be the sender."""
        location = ErrorLocation.ACCESS_CONTROL_RENOUNCE_MINTER
        self._check(location, public_address)
        return await self._binding.transact(location, "renounceRole", MINTER_ROLE, public_address)

    async def is_minter(self, public_address: str) -> bool:
        location = ErrorLocation.ACCESS_CONTROL_IS_MINTER
        self._check(location, public_address)
        return await self._binding.call(location, "hasRole", MINTER_ROLE, public_address)

    async def add_admin(self, public_address: str) -> PendingWrite:
        location = ErrorLocation.ACCESS_CONTROL_ADD_ADMIN
        self._check(location, public_address)
        return await self._binding.transact(location, "grantRole", DEFAULT_ADMIN_ROLE, public_address)

    async def remove_admin(self, public_address: str) -> PendingWrite:
        location = ErrorLocation.ACCESS_CONTROL_REMOVE_ADMIN
        self._check(location, public_address)
        return await self._binding.transact(location, "revokeRole", DEFAULT_ADMIN_ROLE, public_address)

    async def renounce_admin(self, public_address: str) -> PendingWrite:
        location = ErrorLocation.ACCESS_CONTROL_RENOUNCE_ADMIN
        self._check(location, public_address)
        return await self._binding.transact(location, "renounceRole", DEFAULT_ADMIN_ROLE, public_address)

    async def is_admin(self, public_address: str) -> bool:
        location = ErrorLocation.ACCESS_CONTROL_IS_ADMIN
        self._check(location, public_address)
        return await self._binding.call(location, "hasRole", DEFAULT_ADMIN_ROLE, public_address)

    async def renounce_ownership(self) -> PendingWrite:
        location = ErrorLocation.ACCESS_CONTROL_RENOUNCE_OWNERSHIP
        self._binding.require_bound(location)
        return await self._binding.transact(location, "renounceOwnership")
