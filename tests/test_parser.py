import pytest

from canvas_csv.errors import CanvasParseError
from canvas_csv.parser import parse_canvas, parse_with_recovery, replace_lone_surrogates


def test_strict_schema_accepts_known_fields(sample_bytes):
    result = parse_with_recovery(sample_bytes)
    assert result.ok
    assert not result.lenient
    assert [node.id for node in result.document.nodes] == ["A", "B"]
    assert result.document.edges[0].label == "leads to"


def test_unknown_fields_fall_back_to_lenient_schema():
    data = (
        b'{"nodes":[{"id":"A","text":"Hi","x":10,"color":"1"}],'
        b'"edges":[{"id":"e1","fromNode":"A","toNode":"A","fromSide":"right"}]}'
    )
    result = parse_with_recovery(data)
    assert result.ok
    assert result.lenient
    assert result.document.nodes[0].text == "Hi"
    assert result.document.edges[0].toNode == "A"


def test_nulls_and_missing_arrays_are_empty():
    document = parse_canvas(b'{"nodes":[{"id":"A","text":null}],"edges":null}')
    assert document.nodes[0].text == ""
    assert document.edges == []
    assert parse_canvas(b"{}").nodes == []


def test_invalid_json_is_a_parse_error():
    with pytest.raises(CanvasParseError) as excinfo:
        parse_canvas(b"{not json")
    assert str(excinfo.value).startswith("parse .canvas JSON: ")
    assert "\n" not in str(excinfo.value)


def test_failure_reports_the_strict_diagnostic():
    result = parse_with_recovery(b'{"nodes":[{"id":1,"extra":true}]}')
    assert not result.ok
    assert result.document is None
    assert "nodes.0.extra" in result.error
    assert "nodes.0.id" in result.error


def test_invalid_utf8_is_replaced_by_lenient_decode():
    result = parse_with_recovery(b'{"nodes":[{"id":"A","text":"caf\xe9"}],"edges":[]}')
    assert result.ok
    assert result.lenient
    assert result.document.nodes[0].text == "caf\ufffd"


def test_lone_surrogate_escapes_are_replaced():
    document = parse_canvas(b'{"nodes":[{"id":"A","text":"x\\ud800y"},{"id":"B","label":"\\udc00"}]}')
    assert document.nodes[0].text == "x\ufffdy"
    assert document.nodes[1].label == "\ufffd"


def test_surrogate_pairs_and_escaped_backslashes_are_kept():
    document = parse_canvas(b'{"nodes":[{"id":"A","text":"\\ud83d\\ude00"},{"id":"B","text":"\\\\ud800"}]}')
    assert document.nodes[0].text == "\U0001F600"
    assert document.nodes[1].text == "\\ud800"
    assert replace_lone_surrogates(r'"\\ud800" "\ud800x"') == r'"\\ud800" "\ufffdx"'


def test_top_level_null_is_an_empty_document():
    result = parse_with_recovery(b"null")
    assert result.ok
    assert result.document.nodes == []
    assert result.document.edges == []


def test_null_elements_become_zero_value_entries():
    result = parse_with_recovery(b'{"nodes":[null,{"id":"A"}],"edges":[null]}')
    assert result.ok
    assert result.lenient
    assert [node.id for node in result.document.nodes] == ["", "A"]
    assert result.document.edges[0].fromNode == ""
