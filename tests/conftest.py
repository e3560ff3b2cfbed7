# tests/conftest.py
import pytest
from bs4 import BeautifulSoup
from fastapi.testclient import TestClient

from record_converter.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


# --- Input documents ---
def _field(label, value):
    return (
        '  <div class="field">\n'
        f'    <span class="label">{label}</span>\n'
        f'    <span class="value">{value}</span>\n'
        "  </div>\n"
    )


@pytest.fixture
def make_record_html():
    """
    Build an input document from (label, value) pairs, in order.
    Matches the shape the converter reads: div.field > span.label + span.value
    """
    def _make(*pairs):
        body = "".join(_field(label, value) for label, value in pairs)
        return (
            "<!doctype html>\n<html><head><title>Input</title></head>\n"
            f"<body>\n  <h1>Person Record</h1>\n{body}</body>\n</html>\n"
        )
    return _make


@pytest.fixture
def alice_html(make_record_html):
    return make_record_html(
        ("First name", "Alice"),
        ("Family name", "Smith"),
        ("Dob", "1988-04-12"),
    )


@pytest.fixture
def bob_html(make_record_html):
    return make_record_html(("First name", "Bob"))


# --- Output helpers ---
@pytest.fixture
def output_fields():
    """Map label -> value text for the field blocks of a converted document."""
    def _read(html):
        soup = BeautifulSoup(html, "html.parser")
        out = {}
        for block in soup.select("div.field"):
            out[block.select_one(".label").get_text()] = block.select_one(".value").get_text()
        return out
    return _read


@pytest.fixture
def output_warnings():
    """Warning messages listed in a converted document (None if no warnings block)."""
    def _read(html):
        box = BeautifulSoup(html, "html.parser").select_one("div.warning-box")
        if box is None:
            return None
        return [li.get_text() for li in box.select("li")]
    return _read
