import json
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, File, HTTPException, Query, UploadFile
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from record_converter.converters import get_default_pipeline
from record_converter.settings import MAX_UPLOAD_BYTES, OUTPUT_FILENAME

log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="", tags=["convert"])


class AsciiJSONResponse(JSONResponse):
    """JSON with non-ASCII escaped, so lone surrogates from the request survive encoding."""
    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=True, separators=(",", ":")).encode("ascii")


# Request schema for JSON callers that already hold the document text
class ConvertTextRequest(BaseModel):
    html: str


def _decode_upload(data: bytes) -> str:
    """UTF-8 text of an uploaded file (a leading BOM is dropped)."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        log.warning("upload is not valid UTF-8: %s", e)
        raise HTTPException(400, "Error reading file")


@router.post("/convert", response_class=HTMLResponse)
def convert_file(
    file: UploadFile = File(..., description="Input record document (.html)"),
    inline: bool = Query(False, description="Serve for preview instead of as a download"),
) -> HTMLResponse:
    """
    Convert one uploaded record document.

    Returns the converted document as text/html. By default it is sent as an
    attachment named output.html; with ?inline=true it is sent for display
    (e.g. in an iframe preview).

    Warnings about missing fields are part of the returned document, not
    of the HTTP status.
    """
    data = file.file.read(MAX_UPLOAD_BYTES + 1)
    if not data:
        raise HTTPException(400, "Please select a file")
    if len(data) > MAX_UPLOAD_BYTES:
        raise HTTPException(413, f"File is larger than {MAX_UPLOAD_BYTES} bytes")

    text = _decode_upload(data)
    try:
        result = get_default_pipeline().run(text)
    except Exception as e:
        log.exception("conversion failed: filename=%s", file.filename)
        raise HTTPException(500, f"Error processing file: {e}")

    log.info("converted %s (%d warning(s))", file.filename, len(result.warnings))
    disposition = "inline" if inline else "attachment"
    return HTMLResponse(
        content=result.html,
        headers={"Content-Disposition": f'{disposition}; filename="{OUTPUT_FILENAME}"'},
    )


@router.post("/convert/text", response_class=AsciiJSONResponse)
def convert_text(req: ConvertTextRequest) -> Dict[str, Any]:
    """
    Convert document text sent as JSON.

    Request body:
      {"html": "<div class=\"field\">...</div>"}

    Response JSON:
      {
        "ok": True,
        "html": "<!doctype html>...",
        "warnings": [ ... ],
        "input_hash": "<hex>",
        "output_hash": "<hex>"
      }
    """
    try:
        result = get_default_pipeline().run(req.html)
    except Exception as e:
        log.exception("conversion failed for JSON payload")
        raise HTTPException(500, f"Error processing file: {e}")

    warnings: List[str] = result.warnings
    return {
        "ok": True,
        "html": result.html,
        "warnings": warnings,
        "input_hash": result.input_hash,
        "output_hash": result.output_hash,
    }
