import logging
from dataclasses import dataclass
from typing import List, Optional
from .base import Extractor, Normalizer, Renderer
from .extractor import HTMLFieldExtractor
from .rules import RuleNormalizer
from .renderer import TemplateRenderer
from .types import AuditHashes, CanonicalRecord

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    record: CanonicalRecord
    html: str
    audit: AuditHashes

    @property
    def input_hash(self) -> str:
        return self.audit.input_hash

    @property
    def output_hash(self) -> str:
        return self.audit.output_hash

    @property
    def warnings(self) -> List[str]:
        return list(self.record.get("warnings", []))


class ConversionPipeline:
    """
    extract -> normalize -> render, all on fresh per-call records.
    Holds only its stage objects, so one instance can be shared freely.
    Stage exceptions are not caught here; callers decide how to report them.
    """
    def __init__(self, extractor: Extractor, normalizer: Normalizer, renderer: Renderer):
        self.extractor = extractor
        self.normalizer = normalizer
        self.renderer = renderer

    def run(self, text: str) -> ConversionResult:
        raw = self.extractor.extract_record(text)
        log.debug("extracted fields: %s", sorted(raw))
        canonical = self.normalizer.normalize_record(raw)
        # hashes come from the renderer so they match the audit line
        audit = self.renderer.audit(canonical, text)
        html = self.renderer.render_document(canonical, text, audit)
        return ConversionResult(record=canonical, html=html, audit=audit)

    def convert(self, text: str) -> str:
        return self.run(text).html


_default: Optional[ConversionPipeline] = None


def get_default_pipeline() -> ConversionPipeline:
    """Factory for the rule-based pipeline used by the API and CLI."""
    global _default
    if _default is None:
        _default = ConversionPipeline(HTMLFieldExtractor(), RuleNormalizer(), TemplateRenderer())
    return _default


def convert(text: str) -> str:
    """Full text of an input record document -> full text of the output document."""
    return get_default_pipeline().convert(text)
