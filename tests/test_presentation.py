import json

from hmycli.presentation import json_pretty_format, to_json_unsafe


def test_pretty_format_layout():
    assert json_pretty_format('{"a":1,"b":[1,2]}') == (
        '{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ]\n}'
    )


def test_pretty_format_empty_containers():
    assert json_pretty_format('{"a":{},"b":[ ]}') == '{\n  "a": {},\n  "b": []\n}'


def test_pretty_format_keeps_content():
    source = '{"z": "x, y: {}", "n": [true, null, -2.5e3]}'
    assert json.loads(json_pretty_format(source)) == json.loads(source)


def test_pretty_format_keeps_number_literals():
    assert "1.50" in json_pretty_format('{"x":1.50}')


def test_pretty_format_keeps_key_order():
    result = json_pretty_format('{"b":1,"a":2}')
    assert result.index('"b"') < result.index('"a"')


def test_pretty_format_invalid_returned_unchanged():
    assert json_pretty_format("{not json") == "{not json"
    assert json_pretty_format("NaN") == "NaN"


def test_to_json_compact_sorted():
    assert to_json_unsafe({"b": 1, "a": 2}, False) == '{"a":2,"b":1}'


def test_to_json_pretty_matches_formatter():
    payload = {"result": {"x": [1, 2]}, "id": "1"}
    assert to_json_unsafe(payload, True) == json_pretty_format(to_json_unsafe(payload, False))


def test_to_json_escapes_html():
    encoded = to_json_unsafe({"a": "<&>"}, False)
    assert "<" not in encoded and "\\u003c" in encoded
    assert json.loads(encoded) == {"a": "<&>"}


def test_to_json_failure_gives_empty_object():
    assert to_json_unsafe(object(), False) == "{}"
    assert to_json_unsafe({"x": float("nan")}, True) == "{}"