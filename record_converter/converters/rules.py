import logging
from datetime import datetime
from typing import List, Optional
from .base import Normalizer
from .types import CanonicalRecord, RawRecord

log = logging.getLogger(__name__)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# (raw slot, message) in the order warnings are reported
MISSING_FIELD_WARNINGS = (
    ("firstName", "Given Name field is missing or could not be parsed from the input."),
    ("familyName", "Surname field is missing or could not be parsed from the input."),
    ("dob", "Date of birth (DOB) field is missing or could not be parsed from the input."),
)


class RuleNormalizer(Normalizer):
    """
    Rule-based mapping from the input convention to the canonical one:
      firstName  -> givenName
      familyName -> surname
      dob        -> dateOfBirth ("1988-04-12" -> "12 April 1988")
    Missing or blank source fields become "" plus a warning.
    """
    def normalize_record(self, raw: RawRecord) -> CanonicalRecord:
        warnings = missing_field_warnings(raw)
        dob = raw.get("dob")

        out: CanonicalRecord = {
            "givenName": raw.get("firstName") or "",
            "surname": raw.get("familyName") or "",
            "dateOfBirth": reformat_date(dob) if not is_blank(dob) else "",
        }
        if warnings:
            out["warnings"] = warnings
            log.info("record has %d missing field(s)", len(warnings))
        return out


# --- Field helpers ---

def is_blank(s: Optional[str]) -> bool:
    """True for None or whitespace-only strings."""
    return s is None or not s.strip()

def missing_field_warnings(raw: RawRecord) -> List[str]:
    """One message per absent/blank field, first name -> family name -> dob."""
    return [msg for slot, msg in MISSING_FIELD_WARNINGS if is_blank(raw.get(slot))]

def reformat_date(value: str) -> str:
    """
    Turn YYYY-MM-DD into "D Month YYYY".
    The value is pinned to midnight with no timezone so the day can't shift.
    One-digit month and day ("1988-4-12") are accepted too.
    Anything that doesn't parse is returned unchanged.
    """
    try:
        dt = datetime.strptime(f"{value}T00:00:00", "%Y-%m-%dT%H:%M:%S")
    except (TypeError, ValueError):
        log.warning("unparseable date kept as-is: %r", value)
        return value
    return f"{dt.day} {MONTH_NAMES[dt.month - 1]} {dt.year:04d}"


def normalize_record(raw: RawRecord) -> CanonicalRecord:
    """Convenience wrapper around the default normalizer."""
    return RuleNormalizer().normalize_record(raw)
