"""
Domain value objects.
"""

from cadastre.domain.value_objects.address import ADDRESS_LENGTH, Address
from cadastre.domain.value_objects.address_set import AddressSet
from cadastre.domain.value_objects.asset_identity import AssetIdentity
from cadastre.domain.value_objects.derived_address import DerivedAddress
from cadastre.domain.value_objects.program_registry import ProgramRegistry

__all__ = [
    "ADDRESS_LENGTH",
    "Address",
    "AddressSet",
    "AssetIdentity",
    "DerivedAddress",
    "ProgramRegistry",
]
