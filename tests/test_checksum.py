"""Tests for the Luhn primitive."""

import pytest

from idn_validators.services.checksum import is_valid_luhn


@pytest.mark.parametrize(
    "digits",
    ["79927398713", "4532015112830366", "5555555555554444", "0", "18"],
)
def test_valid_luhn(digits):
    assert is_valid_luhn(digits) is True


@pytest.mark.parametrize(
    "digits",
    ["79927398710", "4532015112830365", "1234567890123", "1"],
)
def test_invalid_luhn(digits):
    assert is_valid_luhn(digits) is False


@pytest.mark.parametrize("digits", ["", "1234 5678", "12a4", "٤٥٣٢"])
def test_non_digit_input_is_not_valid(digits):
    """Empty strings, separators and non-ASCII digits never pass."""
    assert is_valid_luhn(digits) is False
