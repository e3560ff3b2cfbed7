# record_converter/converters/base.py
from typing import Optional, Protocol
from .types import AuditHashes, CanonicalRecord, RawRecord


class Extractor(Protocol):
    def extract_record(self, html: str) -> RawRecord:
        """Pull whatever recognized fields exist. Never raises on bad markup."""
        ...


class Normalizer(Protocol):
    def normalize_record(self, raw: RawRecord) -> CanonicalRecord:
        """Return a NEW canonical record. Do not mutate `raw`."""
        ...


class Renderer(Protocol):
    def audit(self, record: CanonicalRecord, source_text: str) -> AuditHashes:
        ...

    def render_document(
        self, record: CanonicalRecord, source_text: str, audit: Optional[AuditHashes] = None
    ) -> str:
        """Render `record`; `audit` is computed from the inputs when not given."""
        ...
