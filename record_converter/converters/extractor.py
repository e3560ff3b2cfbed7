import logging
from typing import Dict

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from .base import Extractor
from .types import RawRecord

log = logging.getLogger(__name__)

# Label text (lower-cased) -> RawRecord slot
LABEL_SLOTS: Dict[str, str] = {
    "first name": "firstName",
    "family name": "familyName",
    "dob": "dob",
}


class HTMLFieldExtractor(Extractor):
    """
    Reads person fields out of markup shaped like:

        <div class="field">
          <span class="label">First name</span>
          <span class="value">Alice</span>
        </div>

    Blocks are visited in document order, so a repeated label overwrites
    the earlier one. Unknown labels are skipped.
    """
    def __init__(self, features: str = "html.parser"):
        self.features = features

    def extract_record(self, html: str) -> RawRecord:
        rec: RawRecord = {}
        try:
            soup = BeautifulSoup(html or "", self.features)
        except ParserRejectedMarkup as e:
            # Unreadable markup just means no fields were found
            log.warning("input could not be parsed as HTML: %s", e)
            return rec

        for block in soup.select(".field"):
            label_el = block.select_one(".label")
            value_el = block.select_one(".value")
            if label_el is None or value_el is None:
                continue

            label = label_el.get_text().strip().lower()
            slot = LABEL_SLOTS.get(label)
            if slot is None:
                log.debug("ignoring unrecognized field label: %r", label)
                continue
            rec[slot] = value_el.get_text().strip()  # type: ignore[literal-required]

        return rec


def extract_record(html: str) -> RawRecord:
    """Convenience wrapper around the default extractor."""
    return HTMLFieldExtractor().extract_record(html)
