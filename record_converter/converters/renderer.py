import json
import logging
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from record_converter.settings import CONVERTER_VERSION, TEMPLATES_DIR
from .base import Renderer
from .types import AuditHashes, CanonicalRecord

log = logging.getLogger(__name__)

TEMPLATE_NAME = "record.html.j2"
MISSING_PLACEHOLDER = "(Missing)"
FINGERPRINT_MAX_HEX = 16

_ENV = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    # Every {{ }} in the template is record data, so escape all of it
    autoescape=select_autoescape(enabled_extensions=("html", "j2"), default=True),
    trim_blocks=True,
    lstrip_blocks=True,
)


def fingerprint(text: str) -> str:
    """
    32-bit rolling hash (h = h*31 + unit) over the UTF-16 code units of `text`,
    reported as the absolute value of the signed result in lowercase hex.

    This is an integrity fingerprint for the audit line, NOT a cryptographic
    hash. The "sha256:" prefix shown next to it in the output is a display
    convention only.

    Lone surrogates are hashed as plain code units, the same as any other.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (h * 31 + unit) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 1 << 32
    return format(abs(h), "x")[:FINGERPRINT_MAX_HEX]


def stable_json(record: CanonicalRecord) -> str:
    """Compact JSON in canonical key order; the output hash is taken over this."""
    return json.dumps(record, ensure_ascii=False, separators=(",", ":"))


class TemplateRenderer(Renderer):
    """Renders a canonical record into a standalone HTML document."""
    def __init__(self, version: Optional[str] = None, env: Environment = _ENV):
        self.version = version or CONVERTER_VERSION
        self.template = env.get_template(TEMPLATE_NAME)

    def audit(self, record: CanonicalRecord, source_text: str) -> AuditHashes:
        return AuditHashes(
            input_hash=fingerprint(source_text),
            output_hash=fingerprint(stable_json(record)),
        )

    def render_document(
        self, record: CanonicalRecord, source_text: str, audit: Optional[AuditHashes] = None
    ) -> str:
        if audit is None:
            audit = self.audit(record, source_text)
        log.debug("audit hashes: input=%s output=%s", audit.input_hash, audit.output_hash)

        return self.template.render(
            record=record,
            warnings=record.get("warnings") or [],
            dob_missing=not record["dateOfBirth"].strip(),
            missing_placeholder=MISSING_PLACEHOLDER,
            input_hash=audit.input_hash,
            output_hash=audit.output_hash,
            version=self.version,
        )


def render_document(record: CanonicalRecord, source_text: str, *, version: Optional[str] = None) -> str:
    """Convenience wrapper around the default renderer."""
    return TemplateRenderer(version=version).render_document(record, source_text)
