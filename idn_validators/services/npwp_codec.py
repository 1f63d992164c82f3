"""NPWP (taxpayer number) formatting and validation.

The canonical rendering is ``PP.RRR.SSS.K-LLL.MMM``. Validation re-formats the
digits and checks the result against the canonical pattern.
"""

import re
import logging
from idn_validators.errors import InvalidNPWPError
from idn_validators.utils.helpers import strip_npwp_punctuation

logger = logging.getLogger(__name__)

NPWP_DIGITS = re.compile(r'\d{15}', re.ASCII)
NPWP_CANONICAL = re.compile(r'\d{2}\.\d{3}\.\d{3}\.\d{1}-\d{3}\.\d{3}', re.ASCII)

# (width, separator placed after the group)
NPWP_GROUPS = ((2, '.'), (3, '.'), (3, '.'), (1, '-'), (3, '.'), (3, ''))


def format_indonesian_npwp(npwp: str) -> str:
    """Re-punctuate 15 NPWP digits; raises InvalidNPWPError otherwise."""
    clean_npwp = strip_npwp_punctuation(npwp)
    if not NPWP_DIGITS.fullmatch(clean_npwp):
        raise InvalidNPWPError(npwp)

    parts = []
    offset = 0
    for width, separator in NPWP_GROUPS:
        parts.append(clean_npwp[offset:offset + width] + separator)
        offset += width

    return ''.join(parts)


def is_valid_indonesian_npwp(npwp: str) -> bool:
    clean_npwp = strip_npwp_punctuation(npwp)
    if not NPWP_DIGITS.fullmatch(clean_npwp):
        logger.debug("NPWP rejected: expected 15 digits, got %d characters", len(clean_npwp))
        return False

    formatted = format_indonesian_npwp(clean_npwp)
    return NPWP_CANONICAL.fullmatch(formatted) is not None
