"""
Validators and masks for the other Indonesian document numbers: cards, bank
accounts, passports, SIM, KK, civil registry certificates and postal codes.
"""

import re
from idn_validators.services.checksum import is_valid_luhn
from idn_validators.utils.helpers import strip_whitespace, strip_npwp_punctuation, mask_tail

CREDIT_CARD_PATTERN = re.compile(r'\d{13,19}', re.ASCII)
POSTAL_CODE_PATTERN = re.compile(r'\d{5}', re.ASCII)
BANK_ACCOUNT_PATTERN = re.compile(r'\d{8,17}', re.ASCII)
PASSPORT_PATTERN = re.compile(r'[A-Z]{1,2}\d{7}', re.ASCII)
DRIVING_LICENSE_PATTERN = re.compile(r'[A-Z]\d{15}', re.ASCII)
FAMILY_CARD_PATTERN = re.compile(r'\d{16}', re.ASCII)
CERTIFICATE_PATTERN = re.compile(r'[A-Z0-9]{10,20}', re.ASCII)


def is_valid_indonesian_credit_card(card_number: str) -> bool:
    clean_card = strip_whitespace(card_number)
    if not CREDIT_CARD_PATTERN.fullmatch(clean_card):
        return False
    return is_valid_luhn(clean_card)


def is_valid_indonesian_postal_code(postal_code: str) -> bool:
    return POSTAL_CODE_PATTERN.fullmatch(strip_whitespace(postal_code)) is not None


def is_valid_indonesian_bank_account(account_number: str) -> bool:
    return BANK_ACCOUNT_PATTERN.fullmatch(strip_whitespace(account_number)) is not None


def is_valid_indonesian_passport(passport: str) -> bool:
    return PASSPORT_PATTERN.fullmatch(strip_whitespace(passport).upper()) is not None


def is_valid_indonesian_driving_license(license_number: str) -> bool:
    """SIM: one letter followed by 15 digits."""
    return DRIVING_LICENSE_PATTERN.fullmatch(strip_whitespace(license_number).upper()) is not None


def is_valid_indonesian_family_card(kk: str) -> bool:
    return FAMILY_CARD_PATTERN.fullmatch(strip_whitespace(kk)) is not None


# Civil registry certificates share one loose shape and are case-sensitive
def _is_certificate_number(certificate: str) -> bool:
    return CERTIFICATE_PATTERN.fullmatch(strip_whitespace(certificate)) is not None


def is_valid_indonesian_birth_certificate(certificate: str) -> bool:
    return _is_certificate_number(certificate)


def is_valid_indonesian_marriage_certificate(certificate: str) -> bool:
    return _is_certificate_number(certificate)


def is_valid_indonesian_death_certificate(certificate: str) -> bool:
    return _is_certificate_number(certificate)


def format_indonesian_postal_code(postal_code: str) -> str:
    clean_postal_code = strip_whitespace(postal_code)
    if len(clean_postal_code) != 5:
        return postal_code
    return clean_postal_code


# ============================================================================
# Masking: keep the last four characters. Inputs that fail the length check
# come back untouched.
# ============================================================================

def mask_indonesian_ktp(ktp: str) -> str:
    clean_ktp = strip_whitespace(ktp)
    if len(clean_ktp) != 16:
        return ktp
    return mask_tail(clean_ktp)


def mask_indonesian_npwp(npwp: str) -> str:
    clean_npwp = strip_npwp_punctuation(npwp)
    if len(clean_npwp) != 15:
        return npwp
    return mask_tail(clean_npwp)


def mask_indonesian_credit_card(card_number: str) -> str:
    clean_card = strip_whitespace(card_number)
    if len(clean_card) < 13:
        return card_number
    return mask_tail(clean_card)


def mask_indonesian_bank_account(account_number: str) -> str:
    clean_account = strip_whitespace(account_number)
    if len(clean_account) < 8:
        return account_number
    return mask_tail(clean_account)
