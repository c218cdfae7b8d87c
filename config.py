import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./kvoice.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))

    # Guest quota (counters live on the local installation, not per account)
    GUEST_COUNTER_STORE_PATH = data.get("GUEST_COUNTER_STORE_PATH", "./.kvoice_counters.json")
    GUEST_INVOICE_LIMIT = data.get("GUEST_INVOICE_LIMIT", 7)
    GUEST_EXPORT_LIMIT = data.get("GUEST_EXPORT_LIMIT", 7)

    # Invoice defaults used when an account has no saved preferences
    DEFAULT_CURRENCY = data.get("DEFAULT_CURRENCY", "GHS")
    DEFAULT_TAX_RATE = data.get("DEFAULT_TAX_RATE", 15)
    DEFAULT_INVOICE_PREFIX = data.get("DEFAULT_INVOICE_PREFIX", "INV-")
    QUICK_PAYMENT_METHOD = data.get("QUICK_PAYMENT_METHOD", "Cash/Other")
