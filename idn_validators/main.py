from fastapi import FastAPI, HTTPException
import logging
from idn_validators.config.settings import APP_HOST, APP_PORT, LOG_LEVEL
from idn_validators.errors import FormattingError
from idn_validators.models import (
    TextInput,
    AmountInput,
    DateInput,
    TimeFormatInput,
    ValidationResponse,
    FormatResponse,
    KTPResponse,
    AmountResponse,
    DateResponse,
)
from idn_validators.services.ktp_codec import KTPDecoder
from idn_validators.services.npwp_codec import format_indonesian_npwp, is_valid_indonesian_npwp
from idn_validators.services.plate_codec import PlateCodec
from idn_validators.services.phone_normalizer import format_indonesian_phone, is_valid_indonesian_phone
from idn_validators.services.documents import is_valid_indonesian_credit_card
from idn_validators.services.locale_formatters import (
    parse_indonesian_currency,
    format_indonesian_currency,
    parse_indonesian_date,
    format_indonesian_date,
    parse_indonesian_time,
    format_indonesian_time,
)

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Indonesian Document Validation API",
    description="API untuk validasi dan format KTP, NPWP, plat nomor, telepon, mata uang, tanggal dan waktu",
    version="1.0.0"
)

# Initialize services
ktp_decoder = KTPDecoder()


def _validation(valid: bool, label: str) -> ValidationResponse:
    return ValidationResponse(
        success=True,
        message=f"{label} is valid" if valid else f"{label} is not valid",
        valid=valid
    )


def _formatted(formatted: str, label: str) -> FormatResponse:
    return FormatResponse(success=True, message=f"{label} formatted successfully", formatted=formatted)


def _format_or_400(formatter, value: str, label: str) -> FormatResponse:
    try:
        return _formatted(formatter(value), label)
    except FormattingError as e:
        logger.info("%s formatting rejected: %s", label, e)
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/ktp/validate", response_model=ValidationResponse)
async def validate_ktp(body: TextInput):
    """
    Validate an Indonesian KTP (NIK) number

    - **value**: 16 digit NIK, whitespace tolerated
    """
    return _validation(ktp_decoder.is_valid(body.value), "KTP")


@app.post("/ktp/parse", response_model=KTPResponse)
async def parse_ktp(body: TextInput):
    """
    Decode region codes, birth date, gender and sequence number from a KTP number
    """
    ktp_data = ktp_decoder.parse(body.value)

    if ktp_data is None:
        return KTPResponse(
            success=False,
            message="Invalid KTP number",
            data=None
        )

    return KTPResponse(
        success=True,
        message="KTP data extracted successfully",
        data=ktp_data
    )


@app.post("/npwp/validate", response_model=ValidationResponse)
async def validate_npwp(body: TextInput):
    return _validation(is_valid_indonesian_npwp(body.value), "NPWP")


@app.post("/npwp/format", response_model=FormatResponse)
async def format_npwp(body: TextInput):
    """Format 15 NPWP digits as XX.XXX.XXX.X-XXX.XXX; 400 on wrong digit count"""
    return _format_or_400(format_indonesian_npwp, body.value, "NPWP")


@app.post("/vehicle-plate/validate", response_model=ValidationResponse)
async def validate_vehicle_plate(body: TextInput):
    return _validation(PlateCodec.is_valid(body.value), "Vehicle plate")


@app.post("/vehicle-plate/format", response_model=FormatResponse)
async def format_vehicle_plate(body: TextInput):
    return _format_or_400(PlateCodec.format, body.value, "Vehicle plate")


@app.post("/phone/validate", response_model=ValidationResponse)
async def validate_phone(body: TextInput):
    return _validation(is_valid_indonesian_phone(body.value), "Phone number")


@app.post("/phone/format", response_model=FormatResponse)
async def format_phone(body: TextInput):
    return _formatted(format_indonesian_phone(body.value), "Phone number")


@app.post("/credit-card/validate", response_model=ValidationResponse)
async def validate_credit_card(body: TextInput):
    return _validation(is_valid_indonesian_credit_card(body.value), "Credit card")


@app.post("/currency/parse", response_model=AmountResponse)
async def parse_currency(body: TextInput):
    return AmountResponse(
        success=True,
        message="Amount parsed successfully",
        amount=parse_indonesian_currency(body.value)
    )


@app.post("/currency/format", response_model=FormatResponse)
async def format_currency(body: AmountInput):
    return _formatted(format_indonesian_currency(body.amount), "Amount")


@app.post("/date/parse", response_model=DateResponse)
async def parse_date(body: TextInput):
    """
    Parse a DD/MM/YYYY date

    - Returns success=false for malformed or out-of-calendar dates
    """
    parsed = parse_indonesian_date(body.value)
    if parsed is None:
        return DateResponse(success=False, message="Invalid date, expected DD/MM/YYYY")

    return DateResponse(success=True, message="Date parsed successfully", date=parsed)


@app.post("/date/format", response_model=FormatResponse)
async def format_date(body: DateInput):
    return _formatted(format_indonesian_date(body.date), "Date")


@app.post("/time/parse", response_model=FormatResponse)
async def parse_time(body: TextInput):
    return _formatted(parse_indonesian_time(body.value), "Time")


@app.post("/time/format", response_model=FormatResponse)
async def format_time(body: TimeFormatInput):
    return _formatted(format_indonesian_time(body.value, body.use_12_hour), "Time")


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "message": "API is running",
        "services": {
            "ktp": "active",
            "npwp": "active",
            "vehicle_plate": "active",
            "phone": "active",
            "locale_formatters": "active"
        }
    }


@app.get("/")
async def root():
    """API information"""
    return {
        "name": "Indonesian Document Validation API",
        "version": "1.0.0",
        "endpoints": [
            {
                "path": route.path,
                "method": sorted(route.methods)[0],
                "description": route.summary or route.name.replace("_", " ")
            }
            for route in app.routes
            if getattr(route, "include_in_schema", False)
        ]
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
