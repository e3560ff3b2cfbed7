from .pipeline import get_default_pipeline, ConversionPipeline, ConversionResult, convert
from .extractor import HTMLFieldExtractor, extract_record
from .rules import RuleNormalizer, normalize_record, reformat_date
from .renderer import TemplateRenderer, render_document, fingerprint
from .types import AuditHashes, CanonicalRecord, RawRecord
from .base import Extractor, Normalizer, Renderer

__all__ = [
    "get_default_pipeline",
    "ConversionPipeline",
    "ConversionResult",
    "convert",
    "HTMLFieldExtractor",
    "extract_record",
    "RuleNormalizer",
    "normalize_record",
    "reformat_date",
    "TemplateRenderer",
    "render_document",
    "fingerprint",
    "AuditHashes",
    "CanonicalRecord",
    "RawRecord",
    "Extractor",
    "Normalizer",
    "Renderer",
]
