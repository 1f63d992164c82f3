import re
import logging
from typing import Dict, Optional
from idn_validators.models import KTPInfo
from idn_validators.utils.helpers import strip_whitespace, mask_tail

logger = logging.getLogger(__name__)

KTP_PATTERN = re.compile(r'\d{16}', re.ASCII)

# Female holders have 40 added to the day of birth, so one field carries both
# the day of month and the gender.
FEMALE_DAY_OFFSET = 40


class KTPDecoder:
    def __init__(self):
        # Fixed-width fields of the 16 digit NIK, as [start, end) offsets
        self.fields_config = [
            {'field_name': 'province', 'start': 0, 'end': 2, 'min': 11, 'max': 99},
            {'field_name': 'regency', 'start': 2, 'end': 4, 'min': 1, 'max': 99},
            {'field_name': 'district', 'start': 4, 'end': 6, 'min': 1, 'max': 99},
            {'field_name': 'day', 'start': 6, 'end': 8, 'min': 1, 'max': 31},
            {'field_name': 'month', 'start': 8, 'end': 10, 'min': 1, 'max': 12},
            {'field_name': 'year', 'start': 10, 'end': 12, 'min': 0, 'max': 99},
            {'field_name': 'sequence', 'start': 12, 'end': 16, 'min': 1, 'max': 9999},
        ]

    def clean(self, ktp: str) -> str:
        return strip_whitespace(ktp)

    def extract_fields(self, clean_ktp: str) -> Dict[str, str]:
        return {
            field['field_name']: clean_ktp[field['start']:field['end']]
            for field in self.fields_config
        }

    def decode_day(self, raw_day: int) -> int:
        if 41 <= raw_day <= 71:
            return raw_day - FEMALE_DAY_OFFSET
        return raw_day

    def is_valid(self, ktp: str) -> bool:
        clean_ktp = self.clean(ktp)
        if not KTP_PATTERN.fullmatch(clean_ktp):
            logger.debug("KTP rejected: expected 16 digits, got %d characters", len(clean_ktp))
            return False

        raw_fields = self.extract_fields(clean_ktp)

        for field in self.fields_config:
            value = int(raw_fields[field['field_name']])
            if field['field_name'] == 'day':
                value = self.decode_day(value)

            if not field['min'] <= value <= field['max']:
                logger.debug(
                    "KTP %s rejected: %s %d outside %d-%d",
                    mask_tail(clean_ktp), field['field_name'], value, field['min'], field['max']
                )
                return False

        return True

    def parse(self, ktp: str) -> Optional[KTPInfo]:
        if not self.is_valid(ktp):
            return None

        raw_fields = self.extract_fields(self.clean(ktp))
        day = self.decode_day(int(raw_fields['day']))

        # Gender follows the parity of the decoded day; the offset of 40 is even
        # so the encoded day has the same parity.
        gender = 'male' if day % 2 == 1 else 'female'

        return KTPInfo(
            province_code=raw_fields['province'],
            city_code=raw_fields['regency'],
            district_code=raw_fields['district'],
            birth_date=f"{day:02d}/{raw_fields['month']}/{raw_fields['year']}",
            gender=gender,
            random_digits=raw_fields['sequence'],
        )


_decoder = KTPDecoder()


def is_valid_indonesian_ktp(ktp: str) -> bool:
    return _decoder.is_valid(ktp)


def parse_indonesian_ktp(ktp: str) -> Optional[KTPInfo]:
    return _decoder.parse(ktp)
