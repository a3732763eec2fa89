import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Path Configuration ---
INPUT_DIR = BASE_DIR / os.getenv("INPUT_DIR", "input")
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")

# --- Filename Configuration ---
SALES_FILENAME_PREFIX = os.getenv("SALES_FILENAME_PREFIX", "sales_")
REPORT_FILENAME_BASE = os.getenv("REPORT_FILENAME_BASE", "sales_report")

# --- Output Flags ---
SAVE_JSON_OUTPUT = os.getenv("SAVE_JSON_OUTPUT", "true").strip().lower() in (
    "1",
    "true",
    "yes",
)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILENAME = os.getenv("LOG_FILENAME", "sales_report.log")

# --- Webhook ---
WEBHOOK_URL = os.getenv("WEBHOOK_URL")

# --- Shared Business Logic ---
# Single fixed display currency; amounts are never converted.
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "$")

# Source column header -> internal field name.
SALES_COLUMNS = {
    "Date": "sale_date",
    "SKU": "sku",
    "Unit Price": "unit_price",
    "Quantity": "quantity",
    "Total Price": "total_price",
}
NUMERIC_COLUMNS = ["Unit Price", "Quantity", "Total Price"]

# English month names for display labels. Kept here instead of strftime("%B")
# so labels do not change with the process locale.
MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]
