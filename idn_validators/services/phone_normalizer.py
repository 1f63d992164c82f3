import re
from typing import Optional
from urllib.parse import quote
from idn_validators.utils.helpers import strip_whitespace, strip_country_code

PHONE_PATTERNS = [
    re.compile(r'(\+62|62|0)8[1-9]\d{6,9}', re.ASCII),  # mobile
    re.compile(r'(\+62|62|0)2[1-9]\d{6,8}', re.ASCII),  # landline
    re.compile(r'(\+62|62|0)4[1-9]\d{6,8}', re.ASCII),  # landline
    re.compile(r'8[1-9]\d{6,9}', re.ASCII),  # mobile without prefix
]

_COUNTRY_PREFIX = re.compile(r'^(\+62|62|0)')

# Characters encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"

def is_valid_indonesian_phone(phone: str) -> bool:
    clean_phone = strip_whitespace(phone)
    return any(pattern.fullmatch(clean_phone) for pattern in PHONE_PATTERNS)

def format_indonesian_phone(phone: str) -> str:
    """Normalize to +62 form. The number itself is not validated."""
    return f"+62{strip_country_code(strip_whitespace(phone))}"

def _messaging_link(base_url: str, phone: str, message: Optional[str]) -> str:
    # Only a recognised prefix is rewritten; bare numbers pass through as is
    number = _COUNTRY_PREFIX.sub('62', strip_whitespace(phone), count=1)
    if message:
        return f"{base_url}/{number}?text={quote(message, safe=_URI_COMPONENT_SAFE)}"
    return f"{base_url}/{number}"

def to_whatsapp_link(phone: str, message: Optional[str] = None) -> str:
    return _messaging_link('https://wa.me', phone, message)

def to_telegram_link(phone: str, message: Optional[str] = None) -> str:
    return _messaging_link('https://t.me', phone, message)
