from pydantic import BaseModel
from typing import Literal, Optional
import datetime

class KTPInfo(BaseModel):
    province_code: str
    city_code: str
    district_code: str
    birth_date: str
    gender: Literal["male", "female"]
    random_digits: str

class CurrencyLocale(BaseModel):
    """Number rendering rules for one currency, independent of host locale data."""
    symbol: str = "Rp"
    symbol_position: Literal["prefix", "suffix"] = "prefix"
    symbol_separator: str = " "
    group_separator: str = "."
    decimal_separator: str = ","
    fraction_digits: int = 0

# Request bodies
class TextInput(BaseModel):
    value: str

class AmountInput(BaseModel):
    amount: float

class DateInput(BaseModel):
    date: datetime.date

class TimeFormatInput(BaseModel):
    value: str
    use_12_hour: bool = True

# Responses
class ValidationResponse(BaseModel):
    success: bool
    message: str
    valid: bool = False

class FormatResponse(BaseModel):
    success: bool
    message: str
    formatted: Optional[str] = None

class KTPResponse(BaseModel):
    success: bool
    message: str
    data: Optional[KTPInfo] = None

class AmountResponse(BaseModel):
    success: bool
    message: str
    amount: Optional[float] = None

class DateResponse(BaseModel):
    success: bool
    message: str
    date: Optional[datetime.date] = None
