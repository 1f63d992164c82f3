"""Tests for phone validation, normalization and messaging links."""

import pytest

from idn_validators.services.phone_normalizer import (
    format_indonesian_phone,
    is_valid_indonesian_phone,
    to_telegram_link,
    to_whatsapp_link,
)


@pytest.mark.parametrize(
    "phone",
    [
        "08123456789",
        "+628123456789",
        "628123456789",
        "8123456789",
        "0812 3456 789",
        "0212345678",
        "+62212345678",
        "62212345678",
        "0411234567",
    ],
)
def test_valid_phone(phone):
    assert is_valid_indonesian_phone(phone) is True


@pytest.mark.parametrize(
    "phone",
    ["123456789", "08123456", "081234567890123", "0801234567", "0812-3456-789", ""],
)
def test_invalid_phone(phone):
    assert is_valid_indonesian_phone(phone) is False


@pytest.mark.parametrize(
    "phone",
    ["08123456789", "+628123456789", "628123456789", "8123456789", "0812 3456 789"],
)
def test_format_phone(phone):
    assert format_indonesian_phone(phone) == "+628123456789"


def test_format_does_not_validate():
    assert format_indonesian_phone("abc") == "+62abc"
    assert format_indonesian_phone("0123") == "+62123"


def test_whatsapp_link():
    assert to_whatsapp_link("08123456789") == "https://wa.me/628123456789"
    assert to_whatsapp_link("08123456789", "Hello") == "https://wa.me/628123456789?text=Hello"


def test_link_message_is_percent_encoded():
    assert (
        to_whatsapp_link("+62 812 3456 789", "Halo, apa kabar?")
        == "https://wa.me/628123456789?text=Halo%2C%20apa%20kabar%3F"
    )


def test_telegram_link():
    assert to_telegram_link("08123456789") == "https://t.me/628123456789"
    assert to_telegram_link("08123456789", "Hello") == "https://t.me/628123456789?text=Hello"


def test_link_keeps_number_without_prefix():
    assert to_telegram_link("8123456789") == "https://t.me/8123456789"
