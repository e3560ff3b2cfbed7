# record_converter/converters/types.py
from typing import List, NamedTuple
from typing_extensions import NotRequired, TypedDict


class RawRecord(TypedDict, total=False):
    """Fields as found in the input document. Any slot may be missing."""
    firstName: str
    familyName: str
    dob: str          # expected YYYY-MM-DD, not validated


class CanonicalRecord(TypedDict):
    """Fully defaulted record used for rendering."""
    givenName: str
    surname: str
    dateOfBirth: str  # "D Month YYYY", or the raw dob if it didn't parse
    warnings: NotRequired[List[str]]  # only present when non-empty


class AuditHashes(NamedTuple):
    """Fingerprints shown on the audit line of an output document."""
    input_hash: str
    output_hash: str
