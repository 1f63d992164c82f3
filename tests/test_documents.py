"""Tests for the secondary document validators, masks and text formatters."""

import pytest

from idn_validators.services.documents import (
    format_indonesian_postal_code,
    is_valid_indonesian_bank_account,
    is_valid_indonesian_birth_certificate,
    is_valid_indonesian_credit_card,
    is_valid_indonesian_death_certificate,
    is_valid_indonesian_driving_license,
    is_valid_indonesian_family_card,
    is_valid_indonesian_marriage_certificate,
    is_valid_indonesian_passport,
    is_valid_indonesian_postal_code,
    mask_indonesian_bank_account,
    mask_indonesian_credit_card,
    mask_indonesian_ktp,
    mask_indonesian_npwp,
)
from idn_validators.services.text_formatters import (
    format_indonesian_address,
    format_indonesian_name,
)


@pytest.mark.parametrize(
    "card, expected",
    [
        ("4532015112830366", True),
        ("5555555555554444", True),
        ("4532 0151 1283 0366", True),
        ("4532015112830365", False),  # checksum
        ("1234567890123", False),
        ("79927398713", False),  # passes Luhn but too short for a card
        ("4532-0151-1283-0366", False),
    ],
)
def test_credit_card(card, expected):
    assert is_valid_indonesian_credit_card(card) is expected


@pytest.mark.parametrize(
    "validator, value, expected",
    [
        (is_valid_indonesian_postal_code, "12345", True),
        (is_valid_indonesian_postal_code, "12345 ", True),
        (is_valid_indonesian_postal_code, "1234", False),
        (is_valid_indonesian_postal_code, "123456", False),
        (is_valid_indonesian_postal_code, "1234a", False),
        (is_valid_indonesian_bank_account, "12345678", True),
        (is_valid_indonesian_bank_account, "12345678901234567", True),
        (is_valid_indonesian_bank_account, "1234567", False),
        (is_valid_indonesian_bank_account, "123456789012345678", False),
        (is_valid_indonesian_passport, "A1234567", True),
        (is_valid_indonesian_passport, "AB1234567", True),
        (is_valid_indonesian_passport, "a1234567", True),
        (is_valid_indonesian_passport, "A123456", False),
        (is_valid_indonesian_passport, "A12345678", False),
        (is_valid_indonesian_driving_license, "A123456789012345", True),
        (is_valid_indonesian_driving_license, "b123456789012345", True),
        (is_valid_indonesian_driving_license, "A12345678901234", False),
        (is_valid_indonesian_driving_license, "A1234567890123456", False),
        (is_valid_indonesian_family_card, "1234567890123456", True),
        (is_valid_indonesian_family_card, "123456789012345", False),
        (is_valid_indonesian_family_card, "12345678901234567", False),
    ],
)
def test_document_numbers(validator, value, expected):
    assert validator(value) is expected


@pytest.mark.parametrize(
    "validator",
    [
        is_valid_indonesian_birth_certificate,
        is_valid_indonesian_marriage_certificate,
        is_valid_indonesian_death_certificate,
    ],
)
def test_certificates(validator):
    assert validator("A1234567890") is True
    assert validator("12345678901234567890") is True
    assert validator("A12345678") is False
    assert validator("A123456789012345678901") is False
    assert validator("a1234567890") is False


def test_format_postal_code():
    assert format_indonesian_postal_code(" 12345 ") == "12345"
    assert format_indonesian_postal_code("1234") == "1234"


def test_masks():
    assert mask_indonesian_ktp("3174 0506 0789 0001") == "************0001"
    assert mask_indonesian_npwp("12.345.678.9-123.456") == "***********3456"
    assert mask_indonesian_credit_card("4532015112830366") == "************0366"
    assert mask_indonesian_bank_account("1234567890") == "******7890"


def test_masks_leave_short_input_untouched():
    assert mask_indonesian_ktp("1234") == "1234"
    assert mask_indonesian_npwp("12.345") == "12.345"
    assert mask_indonesian_credit_card("123 456") == "123 456"
    assert mask_indonesian_bank_account("1234567") == "1234567"


@pytest.mark.parametrize(
    "address, expected",
    [
        ("jl sudirman no 123", "Jl. Sudirman No. 123"),
        ("jalan  malioboro  no  456", "Jl. Malioboro No. 456"),
        ("Jl Merdeka nomor 5 rt 01 rw 02 kel gambir kec gambir", "Jl. Merdeka No. 5 RT 01 RW 02 Kel. gambir Kec. gambir"),
    ],
)
def test_format_address(address, expected):
    assert format_indonesian_address(address) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("dr budi santoso", "DR. Budi Santoso"),
        ("muhammad ahmad s.e", "Muhammad Ahmad S.E"),
        ("nur sari wati", "Nur Sari Wati"),
        ("PROF. ir sutami", "PROF. Ir Sutami"),
        ("siti nurhaliza mba", "Siti Nurhaliza MBA."),
    ],
)
def test_format_name(name, expected):
    assert format_indonesian_name(name) == expected
