import re

_WHITESPACE = re.compile(r'\s+')
_NPWP_PUNCTUATION = re.compile(r'[.\-]')
_LEADING_COUNTRY_CODE = re.compile(r'^(\+62|62|0)')

def strip_whitespace(value: str) -> str:
    return _WHITESPACE.sub('', value)

def strip_npwp_punctuation(value: str) -> str:
    return _NPWP_PUNCTUATION.sub('', value)

def strip_country_code(phone: str) -> str:
    """Drop one leading +62, 62 or 0 from an already whitespace-free number."""
    return _LEADING_COUNTRY_CODE.sub('', phone, count=1)

def mask_tail(value: str, visible: int = 4) -> str:
    return '*' * (len(value) - visible) + value[-visible:]
