import os
from dotenv import load_dotenv

load_dotenv()

APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", 8000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Currency locale table (id-ID defaults)
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "Rp")
CURRENCY_GROUP_SEPARATOR = os.getenv("CURRENCY_GROUP_SEPARATOR", ".")
CURRENCY_DECIMAL_SEPARATOR = os.getenv("CURRENCY_DECIMAL_SEPARATOR", ",")
CURRENCY_FRACTION_DIGITS = int(os.getenv("CURRENCY_FRACTION_DIGITS", 0))
