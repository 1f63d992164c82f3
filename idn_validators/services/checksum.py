"""Digit checksum primitives shared by the card validators."""

import re

_DIGITS = re.compile(r'\d+', re.ASCII)


def is_valid_luhn(digits: str) -> bool:
    """
    Luhn (mod 10) check over a string of ASCII digits.

    Starting from the rightmost digit, every second digit is doubled and 9 is
    subtracted when the double exceeds 9. The number is valid when the digit
    sum is a multiple of 10. Any length of one digit or more is accepted;
    empty or non-digit input is simply not valid.
    """
    if not _DIGITS.fullmatch(digits):
        return False

    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit

    return total % 10 == 0
