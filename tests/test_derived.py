"""Tests for the string format checkers."""

import pytest

from dataknobs_checker import (
    CheckContext,
    CheckerOptions,
    InvalidFieldError,
    MissingFieldError,
    email,
    ipv4,
    ipv6,
    luhn_valid,
    mac,
    object_id,
    siret,
)
from dataknobs_checker.derived import format_siret


class TestMac:
    """Test the MAC address checker."""

    def test_colon_separated(self, context):
        """Test a lowercase colon-separated address."""
        assert mac()("a0:b1:c2:d3:e4:f5", context) == "a0:b1:c2:d3:e4:f5"

    @pytest.mark.parametrize("value", [
        "a0-b1-c2-d3-e4-f5",
        "a0:b1:c2:d3:e4",
        "A0:B1:C2:D3:E4:F5",
        "a0:b1:c2:d3:e4:f5:06",
    ])
    def test_rejected(self, value, context):
        """Test other separators, lengths and uppercase digits."""
        with pytest.raises(InvalidFieldError):
            mac()(value, context)


class TestIpv4:
    """Test the IPv4 address checker."""

    @pytest.mark.parametrize("value", ["192.168.0.22", "0.0.0.0", "255.255.255.255"])
    def test_accepted(self, value, context):
        """Test valid dotted quads."""
        assert ipv4()(value, context) == value

    @pytest.mark.parametrize("value", ["256.1.1.1", "1.2.3", "1.2.3.4.5", "a.b.c.d"])
    def test_rejected(self, value, context):
        """Test out-of-range octets and wrong shapes."""
        with pytest.raises(InvalidFieldError):
            ipv4()(value, context)


class TestIpv6:
    """Test the IPv6 address checker."""

    @pytest.mark.parametrize("value", [
        "FE80:0000:0000:0000:0202:B3FF:FE1E:8329",
        "fe80::202:b3ff:fe1e:8329",
        "::1",
        "::ffff:192.168.0.22",
    ])
    def test_accepted(self, value, context):
        """Test full, compressed and IPv4-mapped forms."""
        assert ipv6()(value, context) == value

    @pytest.mark.parametrize("value", ["192.168.0.22", "fe80:::1", "gggg::1", "1:2:3:4:5:6:7:8:9"])
    def test_rejected(self, value, context):
        """Test IPv4 addresses and malformed IPv6 addresses."""
        with pytest.raises(InvalidFieldError):
            ipv6()(value, context)


class TestObjectId:
    """Test the ObjectId checker."""

    def test_accepted(self, context):
        """Test a 24-digit hex string in either case."""
        assert object_id()("53f4b9031cf6455b326f4c7a", context) == "53f4b9031cf6455b326f4c7a"
        assert object_id()("53F4B9031CF6455B326F4C7A", context) == "53F4B9031CF6455B326F4C7A"

    @pytest.mark.parametrize("value", ["53f4b9031cf6455b326f4c7", "53f4b9031cf6455b326f4c7z"])
    def test_rejected(self, value, context):
        """Test wrong lengths and non-hex digits."""
        with pytest.raises(InvalidFieldError):
            object_id()(value, context)


class TestEmail:
    """Test the email checker."""

    @pytest.mark.parametrize("value", ["main@jokester.fr", "first.last@sub.example.com", "x@[10.0.0.1]"])
    def test_accepted(self, value, context):
        """Test common address forms."""
        assert email()(value, context) == value

    @pytest.mark.parametrize("value", ["not-an-email", "a@b", "a b@example.com", "@example.com"])
    def test_rejected(self, value, context):
        """Test malformed addresses."""
        with pytest.raises(InvalidFieldError):
            email()(value, context)


class TestDerivedOptions:
    """Test option handling of the format checkers."""

    def test_mandatory(self, context):
        """Test that the caller's options still apply."""
        with pytest.raises(MissingFieldError):
            email(mandatory=True)(None, context)

    def test_length_options_combine_with_pattern(self, context):
        """Test extra string constraints on a format checker."""
        checker = email(max_length=10)
        assert checker("a@jokes.fr", context) == "a@jokes.fr"
        with pytest.raises(InvalidFieldError):
            checker("main@jokester.fr", context)

    def test_caller_options_untouched(self):
        """Test that building a format checker doesn't modify the options."""
        options = CheckerOptions(mandatory=True)
        checker = mac(options)
        assert options.regex is None
        assert checker.options.regex is not None
        assert checker.options.mandatory is True

        mapping = {"mandatory": True}
        mac(mapping)
        assert mapping == {"mandatory": True}


class TestLuhn:
    """Test the Luhn checksum helper."""

    @pytest.mark.parametrize("digits", ["53268510400012", "73282932000074", "79927398713"])
    def test_valid(self, digits):
        """Test numbers with a valid checksum."""
        assert luhn_valid(digits)

    @pytest.mark.parametrize("digits", ["53268510400013", "79927398710"])
    def test_invalid(self, digits):
        """Test numbers with an invalid checksum."""
        assert not luhn_valid(digits)


class TestSiret:
    """Test the SIRET checker."""

    def test_accepts_both_forms(self, context):
        """Test grouped and compact forms without sanitizing."""
        checker = siret()
        assert checker("53268510400012", context) == "53268510400012"
        assert checker("532 685 104 00012", context) == "532 685 104 00012"

    def test_bad_checksum(self, context):
        """Test that a well-shaped number with a bad checksum is invalid."""
        with pytest.raises(InvalidFieldError) as exc_info:
            siret()("53268510400013", context)
        assert exc_info.value.path == "field"

    @pytest.mark.parametrize("value", ["5326851040001", "532-685-104-00012", "532  685 104 00012", 53268510400012])
    def test_bad_shape(self, value, context):
        """Test that the string shape is checked before the checksum."""
        with pytest.raises(InvalidFieldError):
            siret()(value, context)

    def test_sanitize(self, sanitize_context):
        """Test that sanitizing groups the digits."""
        assert siret()("53268510400012", sanitize_context) == "532 685 104 00012"

    def test_sanitize_is_idempotent(self, sanitize_context):
        """Test that a sanitized value sanitizes to itself."""
        checker = siret()
        once = checker("53268510400012", sanitize_context)
        assert checker(once, sanitize_context) == once

    def test_absent(self, context):
        """Test None for optional and mandatory SIRET fields."""
        assert siret()(None, context) is None
        assert siret()(None, CheckContext(ariane="field", sanitize=True)) is None
        with pytest.raises(MissingFieldError):
            siret(mandatory=True)(None, context)

    def test_format_siret(self):
        """Test the grouping helper."""
        assert format_siret("53268510400012") == "532 685 104 00012"
