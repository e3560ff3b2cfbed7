import re

from record_converter.converters import AuditHashes, ConversionPipeline, convert, get_default_pipeline

SHA_RE = re.compile(r"sha256:([0-9a-f]+)")


def test_alice_end_to_end(alice_html, output_fields, output_warnings):
    html = convert(alice_html)
    assert output_fields(html) == {
        "Given Name": "Alice",
        "Surname": "Smith",
        "Date of birth": "12 April 1988",
    }
    assert output_warnings(html) is None
    hashes = SHA_RE.findall(html)
    assert len(hashes) == 2
    assert all(1 <= len(h) <= 16 for h in hashes)

def test_bob_end_to_end(bob_html, output_fields, output_warnings):
    html = convert(bob_html)
    fields = output_fields(html)
    assert fields["Given Name"] == "Bob"
    assert fields["Surname"] == ""
    assert fields["Date of birth"] == "(Missing)"
    assert '<div class="field field-warning">' in html
    assert output_warnings(html) == [
        "Surname field is missing or could not be parsed from the input.",
        "Date of birth (DOB) field is missing or could not be parsed from the input.",
    ]

def test_unparseable_document_gets_three_warnings(output_warnings):
    html = convert("%%% this is not a record %%%")
    assert len(output_warnings(html)) == 3

def test_injection_in_input_is_escaped(make_record_html):
    src = make_record_html(
        ("First name", "Eve"),
        ("Family name", "&lt;script&gt;alert(1)&lt;/script&gt;"),
        ("Dob", "2000-01-01"),
    )
    html = convert(src)
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html

def test_convert_is_deterministic(alice_html):
    assert convert(alice_html) == convert(alice_html)

def test_input_hash_follows_input(alice_html):
    a = SHA_RE.findall(convert(alice_html))
    b = SHA_RE.findall(convert(alice_html + " "))
    assert a[0] != b[0]
    # same extracted record -> same output hash
    assert a[1] == b[1]

def test_run_exposes_record_and_hashes(bob_html):
    result = get_default_pipeline().run(bob_html)
    assert result.record["givenName"] == "Bob"
    assert len(result.warnings) == 2
    assert f"sha256:{result.input_hash}" in result.html
    assert f"sha256:{result.output_hash}" in result.html

def test_custom_stages_are_composed_in_order():
    calls = []

    class Ex:
        def extract_record(self, html):
            calls.append(("extract", html))
            return {"firstName": "X"}

    class No:
        def normalize_record(self, raw):
            calls.append(("normalize", dict(raw)))
            return {"givenName": raw["firstName"], "surname": "", "dateOfBirth": ""}

    class Re:
        def audit(self, record, source_text):
            calls.append(("audit", record["givenName"], source_text))
            return AuditHashes("in-hash", "out-hash")

        def render_document(self, record, source_text, audit=None):
            calls.append(("render", record["givenName"], source_text, audit))
            return f"<done {audit.input_hash}>"

    result = ConversionPipeline(Ex(), No(), Re()).run("in")
    assert result.html == "<done in-hash>"
    assert calls == [
        ("extract", "in"),
        ("normalize", {"firstName": "X"}),
        ("audit", "X", "in"),
        ("render", "X", "in", ("in-hash", "out-hash")),
    ]
    # result hashes are the ones the renderer put in the document
    assert (result.input_hash, result.output_hash) == ("in-hash", "out-hash")

def test_stage_errors_propagate():
    class Boom:
        def extract_record(self, html):
            raise RuntimeError("environment failure")

    pipe = ConversionPipeline(Boom(), None, None)
    try:
        pipe.convert("x")
    except RuntimeError as e:
        assert "environment failure" in str(e)
    else:
        raise AssertionError("expected RuntimeError")
