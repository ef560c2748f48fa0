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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./erp.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Runtime log file (ring buffer shared by frontend and server logs)
    RUNTIME_LOG_FILE = data.get("RUNTIME_LOG_FILE", ".runtime.logs")
    RUNTIME_LOG_MAX_LINES = data.get("RUNTIME_LOG_MAX_LINES", 100)
    RUNTIME_LOG_LEVEL = data.get("RUNTIME_LOG_LEVEL", "WARNING")

    # Document numbering (one series per document type)
    QUOTE_NUMBER_PREFIX = data.get("QUOTE_NUMBER_PREFIX", "QT")
    SALES_ORDER_NUMBER_PREFIX = data.get("SALES_ORDER_NUMBER_PREFIX", "SO")
    INVOICE_NUMBER_PREFIX = data.get("INVOICE_NUMBER_PREFIX", "INV")
    DOCUMENT_NUMBER_MAX_RETRIES = data.get("DOCUMENT_NUMBER_MAX_RETRIES", 3)

    # Invoicing
    INVOICE_DUE_DAYS = data.get("INVOICE_DUE_DAYS", 30)
    DEFAULT_CURRENCY = data.get("DEFAULT_CURRENCY", "USD")
    COMPANY_NAME = data.get("COMPANY_NAME", "Acme ERP")
    COMPANY_ADDRESS = data.get("COMPANY_ADDRESS", "123 Commerce Street, Springfield, SP 12345")
