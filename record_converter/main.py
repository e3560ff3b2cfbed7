from fastapi import FastAPI

from record_converter.routers.convert import router as convert_router
from record_converter.settings import CONVERTER_VERSION, LOG_LEVEL
from record_converter.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging(LOG_LEVEL) # Init Logging

# Create the FastAPI app instance
app = FastAPI(title="Person Record Converter", version=CONVERTER_VERSION)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """
    Simple health probe for monitoring.
    Returns:
      - ok: static True if the app is alive
      - version: converter version stamped into every output document
    """
    return {
        "ok": True,
        "service": "record-converter",
        "version": CONVERTER_VERSION,
    }

# Register API routers:
app.include_router(convert_router)
