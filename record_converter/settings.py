# record_converter/settings.py
import os
from pathlib import Path

# Bump when the output document changes shape
CONVERTER_VERSION = os.getenv("CONVERTER_VERSION", "0.1.0")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Uploads larger than this are rejected with 413
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(1024 * 1024)))

# Name offered to the browser for the converted document
OUTPUT_FILENAME = "output.html"

PACKAGE_ROOT = Path(__file__).resolve().parent
TEMPLATES_DIR = Path(os.getenv("TEMPLATES_DIR", str(PACKAGE_ROOT / "templates")))
