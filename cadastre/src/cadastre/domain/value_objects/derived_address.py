"""
DerivedAddress value object - result of a program address search.
"""

from typing import NamedTuple

from cadastre.domain.value_objects.address import Address


class DerivedAddress(NamedTuple):
    """
    Program-derived address paired with the bump that produced it.

    Unpacks like the reference runtime result: ``address, bump = derived``.
    """

    address: Address
    bump: int
