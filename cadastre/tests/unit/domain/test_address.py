"""
Unit tests for Address value object.

Tests address validation, parsing and formatting.

Usage:
    python cadastre/tests/unit/domain/test_address.py
    laborant cadastre --unit
"""

from solders.keypair import Keypair  # type: ignore
from solders.pubkey import Pubkey  # type: ignore

from cadastre.domain.exceptions import InvalidAddressError, ValidationError
from cadastre.domain.value_objects import Address
from shared.tests import LaborantTest

SYSTEM_PROGRAM = "11111111111111111111111111111111"
TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"


class TestAddress(LaborantTest):
    """Unit tests for Address value object."""

    component_name = "cadastre"
    test_category = "unit"

    # ================================================================
    # Creation & Validation tests
    # ================================================================

    def test_create_from_32_bytes(self):
        """Test creating Address from raw bytes."""
        self.reporter.info("Testing address from raw bytes", context="Test")

        address = Address(bytes(range(32)))

        assert address.raw == bytes(range(32))
        assert bytes(address) == bytes(range(32))

    def test_bytearray_is_normalized(self):
        """Test bytearray input is stored as immutable bytes."""
        address = Address(bytearray(32))

        assert isinstance(address.raw, bytes)

    def test_reject_wrong_length(self):
        """Test Address rejects anything but 32 bytes."""
        self.reporter.info("Testing rejection of wrong length", context="Test")

        for length in (0, 31, 33, 64):
            try:
                Address(b"\x01" * length)
                assert False, f"Should have rejected {length} bytes"
            except InvalidAddressError as e:
                assert f"got {length}" in str(e)
                assert e.code == "INVALID_ADDRESS"

    def test_reject_non_bytes(self):
        """Test Address rejects non-bytes payloads."""
        try:
            Address("A" * 32)
            assert False, "Should have raised InvalidAddressError"
        except InvalidAddressError as e:
            assert "expected bytes" in str(e)

    def test_invalid_address_is_validation_error(self):
        """Test malformed input is reported as a validation failure."""
        try:
            Address(b"")
            assert False, "Should have raised"
        except ValidationError as e:
            assert e.field == "address"

    # ================================================================
    # Parsing tests
    # ================================================================

    def test_from_string_round_trips_base58(self):
        """Test base58 parsing and string form."""
        address = Address.from_string(TOKEN_PROGRAM)

        assert str(address) == TOKEN_PROGRAM
        assert address.to_pubkey() == Pubkey.from_string(TOKEN_PROGRAM)

    def test_system_program_is_all_zero(self):
        """Test the all-ones base58 string decodes to 32 zero bytes."""
        address = Address.from_string(SYSTEM_PROGRAM)

        assert address.raw == bytes(32)

    def test_from_string_rejects_empty(self):
        """Test empty string is rejected with the field name."""
        try:
            Address.from_string("", field="identity")
            assert False, "Should have raised InvalidAddressError"
        except InvalidAddressError as e:
            assert e.field == "identity"
            assert "cannot be empty" in str(e)

    def test_from_string_rejects_garbage(self):
        """Test non-base58 text is rejected."""
        for value in ("not-a-key", "0OIl" * 11, "abc"):
            try:
                Address.from_string(value)
                assert False, f"Should have rejected {value!r}"
            except InvalidAddressError:
                pass

    def test_coerce_accepts_all_representations(self):
        """Test coerce from Address, Pubkey, bytes and str."""
        pubkey = Pubkey.from_string(TOKEN_PROGRAM)
        expected = Address.from_pubkey(pubkey)

        assert Address.coerce(expected) is expected
        assert Address.coerce(pubkey) == expected
        assert Address.coerce(bytes(pubkey)) == expected
        assert Address.coerce(TOKEN_PROGRAM) == expected

    def test_coerce_rejects_none_and_unknown_types(self):
        """Test coerce rejects None and unsupported types."""
        for value in (None, 42, [1, 2, 3]):
            try:
                Address.coerce(value, field="owner")
                assert False, f"Should have rejected {value!r}"
            except InvalidAddressError as e:
                assert e.field == "owner"

    def test_coerce_reports_field_on_bad_bytes(self):
        """Test coerce keeps the caller's field name for short bytes."""
        try:
            Address.coerce(b"\x00" * 5, field="mint")
            assert False, "Should have raised InvalidAddressError"
        except InvalidAddressError as e:
            assert e.field == "mint"

    def test_parse_error_is_chained(self):
        """Test the underlying parse failure is kept as the cause."""
        try:
            Address.from_string("not-a-key")
            assert False, "Should have raised InvalidAddressError"
        except InvalidAddressError as e:
            assert e.__cause__ is not None

        try:
            Address.coerce(b"\x00" * 5, field="mint")
            assert False, "Should have raised InvalidAddressError"
        except InvalidAddressError as e:
            assert isinstance(e.__cause__, InvalidAddressError)
            assert e.__cause__.field == "address"

    # ================================================================
    # Equality & curve tests
    # ================================================================

    def test_equality_by_bytes(self):
        """Test addresses compare and hash by value."""
        a = Address(b"\x07" * 32)
        b = Address(bytearray(b"\x07" * 32))
        c = Address(b"\x08" * 32)

        assert a == b
        assert a != c
        assert len({a, b, c}) == 2

    def test_keypair_address_is_on_curve(self):
        """Test a real public key is a curve point."""
        keypair = Keypair.from_seed(bytes([9] * 32))
        address = Address.from_pubkey(keypair.pubkey())

        assert address.is_on_curve() is True

    def test_truncated(self):
        """Test truncated display form."""
        address = Address.from_string(TOKEN_PROGRAM)

        assert address.truncated() == "Tokenk...Q5DA"
        assert repr(address) == f"Address('{TOKEN_PROGRAM}')"


if __name__ == "__main__":
    TestAddress.run_as_main()
