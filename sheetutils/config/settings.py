"""Global settings and configuration."""
import os
from datetime import datetime
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Package and project directories
PACKAGE_ROOT = Path(__file__).parent.parent
PROJECT_ROOT = PACKAGE_ROOT.parent
DATA_DIR = PACKAGE_ROOT / "data"
LOGS_DIR = PROJECT_ROOT / "logs"

# Locale data
MONTH_NAMES_FILE = DATA_DIR / "month_names.yaml"
DEFAULT_LOCALE = os.getenv("SHEETUTILS_DEFAULT_LOCALE", "es-uy")

# Logging
LOG_LEVEL = os.getenv("SHEETUTILS_LOG_LEVEL", "INFO")
LOG_FILE = Path(os.getenv("SHEETUTILS_LOG_FILE", str(LOGS_DIR / "sheetutils.log")))

# Slug memoization
SLUG_CACHE_SIZE = int(os.getenv("SHEETUTILS_SLUG_CACHE_SIZE", "1024"))

# Drive backups
BACKUP_PREFIX = os.getenv("SHEETUTILS_BACKUP_PREFIX", "Respaldo")

# Timestamps
DEFAULT_TIMESTAMP_FORMAT = "YYYYMMDD HHmmss"

# Day 0 of spreadsheet date serial numbers
SPREADSHEET_EPOCH = datetime(1899, 12, 30)

# Placeholder replaced by the real 1-based row number when writing rows
ROW_PLACEHOLDER = "__ROW__"

# Spreadsheet-like files handled by the drive helpers (suffix -> MIME type)
SUPPORTED_MIME_TYPES = {
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ".xls": "application/vnd.ms-excel",
    ".csv": "text/csv",
    ".ods": "application/vnd.oasis.opendocument.spreadsheet",
}
