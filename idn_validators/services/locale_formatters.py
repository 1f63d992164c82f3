"""
Round-trip formatters for Indonesian currency, dates and times.

Currency rendering is driven by an explicit `CurrencyLocale` table rather than
the host's locale data, so output is identical on every machine.
"""

import re
import math
import logging
import datetime
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Optional, Union
from idn_validators.config.settings import (
    CURRENCY_SYMBOL,
    CURRENCY_GROUP_SEPARATOR,
    CURRENCY_DECIMAL_SEPARATOR,
    CURRENCY_FRACTION_DIGITS,
)
from idn_validators.errors import FormattingError
from idn_validators.models import CurrencyLocale

logger = logging.getLogger(__name__)

INDONESIAN_LOCALE = CurrencyLocale(
    symbol=CURRENCY_SYMBOL,
    group_separator=CURRENCY_GROUP_SEPARATOR,
    decimal_separator=CURRENCY_DECIMAL_SEPARATOR,
    fraction_digits=CURRENCY_FRACTION_DIGITS,
)

DATE_PATTERN = re.compile(r'(\d{1,2})/(\d{1,2})/(\d{4})', re.ASCII)
# Unicode \s so a non-breaking space before the period is accepted
TIME_12H_PATTERN = re.compile(r'([0-9]{1,2}):([0-9]{2})\s*(AM|PM)?', re.IGNORECASE)
TIME_24H_PATTERN = re.compile(r'(\d{1,2}):(\d{2})', re.ASCII)

# Leading numeric prefix, read the way a lenient float parser reads it
_NUMBER_PREFIX = re.compile(r'-?(?:\d+(?:\.\d*)?|\.\d+)', re.ASCII)


# ============================================================================
# Currency
# ============================================================================

def parse_indonesian_currency(currency: str, locale: Optional[CurrencyLocale] = None) -> float:
    """
    Read an amount such as ``Rp 1.000.000,50``.

    Everything except digits, separators and ``-`` is dropped, grouping
    separators are removed and the first decimal separator becomes a point.
    Returns 0.0 when no number can be read.
    """
    locale = locale or INDONESIAN_LOCALE
    group = re.escape(locale.group_separator)
    decimal = re.escape(locale.decimal_separator)

    cleaned = re.sub(rf'[^\d\-{group}{decimal}]', '', currency, flags=re.ASCII)
    normalized = cleaned.replace(locale.group_separator, '')
    normalized = normalized.replace(locale.decimal_separator, '.', 1)

    match = _NUMBER_PREFIX.match(normalized)
    if not match:
        logger.debug("No amount found in %r", currency)
        return 0.0

    return float(match.group(0)) or 0.0


def _group_digits(integer_part: int, separator: str) -> str:
    return f"{integer_part:,}".replace(',', separator)


def format_indonesian_currency(amount: Union[int, float], locale: Optional[CurrencyLocale] = None) -> str:
    """
    Render an amount with the symbol and separators of `locale`.

    Rounds half away from zero to `fraction_digits`. The sign is taken from the
    rounded value, so a negative amount that rounds to zero renders as ``Rp 0``
    rather than ``-Rp 0``. Booleans are treated as the integers 0 and 1.
    """
    locale = locale or INDONESIAN_LOCALE

    if isinstance(amount, float) and not math.isfinite(amount):
        digits = 'NaN' if math.isnan(amount) else '∞'
        negative = amount < 0
    else:
        step = Decimal(1).scaleb(-locale.fraction_digits)
        value = Decimal(int(amount)) if isinstance(amount, int) else Decimal(repr(float(amount)))
        context = Context(prec=max(28, value.adjusted() + locale.fraction_digits + 2))
        rounded = value.quantize(step, rounding=ROUND_HALF_UP, context=context)
        negative = rounded < 0

        integer_part, _, fraction_part = f"{abs(rounded):f}".partition('.')
        digits = _group_digits(int(integer_part), locale.group_separator)
        if locale.fraction_digits > 0:
            digits = f"{digits}{locale.decimal_separator}{fraction_part}"

    sign = '-' if negative else ''
    if locale.symbol_position == 'suffix':
        return f"{sign}{digits}{locale.symbol_separator}{locale.symbol}"
    return f"{sign}{locale.symbol}{locale.symbol_separator}{digits}"


# ============================================================================
# Dates
# ============================================================================

def parse_indonesian_date(date_string: str) -> Optional[datetime.date]:
    """Parse ``DD/MM/YYYY``. Out-of-calendar values give None instead of rolling over."""
    match = DATE_PATTERN.fullmatch(date_string)
    if not match:
        return None

    day, month, year = (int(part) for part in match.groups())
    try:
        return datetime.date(year, month, day)
    except ValueError:
        logger.debug("Date %r is not on the calendar", date_string)
        return None


def format_indonesian_date(date: datetime.date) -> str:
    return f"{date.day:02d}/{date.month:02d}/{date.year:04d}"


# ============================================================================
# Times
# ============================================================================

def parse_indonesian_time(time_string: str) -> str:
    """
    Convert ``H:MM AM|PM`` to 24-hour ``HH:MM``.

    A string without a period is zero-padded; anything that does not look like
    a time is returned unchanged.
    """
    match = TIME_12H_PATTERN.fullmatch(time_string)
    if not match:
        return time_string

    hours, minutes, period = match.groups()
    hour = int(hours)

    if period:
        period = period.upper()
        if period == 'PM' and hour != 12:
            hour += 12
        elif period == 'AM' and hour == 12:
            hour = 0

    return f"{hour:02d}:{minutes}"


def format_indonesian_time(time_string: str, use_12_hour: bool = True) -> str:
    match = TIME_24H_PATTERN.fullmatch(time_string)
    if not match:
        return time_string

    hours, minutes = match.groups()
    hour = int(hours)

    if use_12_hour:
        period = 'PM' if hour >= 12 else 'AM'
        if hour > 12:
            hour -= 12
        if hour == 0:
            hour = 12
        return f"{hour}:{minutes} {period}"

    return f"{hour:02d}:{minutes}"


# ============================================================================
# Terbilang (amount in words)
# ============================================================================

ONES = ['', 'satu', 'dua', 'tiga', 'empat', 'lima', 'enam', 'tujuh', 'delapan', 'sembilan']
TEENS = ['sepuluh', 'sebelas', 'dua belas', 'tiga belas', 'empat belas', 'lima belas',
         'enam belas', 'tujuh belas', 'delapan belas', 'sembilan belas']
TENS = ['', '', 'dua puluh', 'tiga puluh', 'empat puluh', 'lima puluh', 'enam puluh',
        'tujuh puluh', 'delapan puluh', 'sembilan puluh']
SCALES = ['', 'ribu', 'juta', 'miliar', 'triliun']


def _words_below_thousand(n: int) -> str:
    if n < 10:
        return ONES[n]
    if n < 20:
        return TEENS[n - 10]
    if n < 100:
        return TENS[n // 10] + (f" {ONES[n % 10]}" if n % 10 else '')

    hundreds = 'seratus' if n // 100 == 1 else f"{ONES[n // 100]} ratus"
    rest = n % 100
    return hundreds + (f" {_words_below_thousand(rest)}" if rest else '')


def to_indonesian_words(num: Union[int, float]) -> str:
    if isinstance(num, bool) or (isinstance(num, float) and not num.is_integer()):
        raise FormattingError("Only whole numbers can be written out", num)

    num = int(num)
    if abs(num) >= 1000 ** len(SCALES):
        raise FormattingError("Number too large to write out", num)

    if num == 0:
        return 'nol'
    if num < 0:
        return f"negatif {to_indonesian_words(-num)}"

    words = []
    scale_index = 0
    while num > 0:
        num, chunk = divmod(num, 1000)
        if chunk:
            if scale_index == 1 and chunk == 1:
                words.insert(0, 'seribu')
            else:
                scale = SCALES[scale_index]
                words.insert(0, f"{_words_below_thousand(chunk)} {scale}".strip())
        scale_index += 1

    return ' '.join(words)
