"""JSON output helpers."""

from __future__ import annotations

import json
from typing import Any

_WHITESPACE = " \t\r\n"
_HTML_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


def _indent(text: str, indent: str = "  ") -> str:
    body = text.lstrip(_WHITESPACE)
    stripped = body.rstrip(_WHITESPACE)
    trailing = body[len(stripped):]
    out: list[str] = []
    depth = 0
    need_indent = False
    in_string = False
    escaped = False
    for char in stripped:
        if in_string:
            out.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char in _WHITESPACE:
            continue
        if need_indent and char not in "]}":
            need_indent = False
            depth += 1
            out.append("\n" + indent * depth)
        if char == '"':
            in_string = True
            out.append(char)
        elif char in "{[":
            need_indent = True
            out.append(char)
        elif char == ",":
            out.append(",\n" + indent * depth)
        elif char == ":":
            out.append(": ")
        elif char in "}]":
            if need_indent:
                need_indent = False
            else:
                depth -= 1
                out.append("\n" + indent * depth)
            out.append(char)
        else:
            out.append(char)
    return "".join(out) + trailing


def json_pretty_format(text: str) -> str:
    """Indent a JSON document by two spaces; return it unchanged if invalid."""
    try:
        json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return text
    return _indent(text)


def to_json_unsafe(payload: Any, pretty: bool) -> str:
    """Serialise payload with sorted keys, or return '{}' if it cannot be."""
    try:
        encoded = json.dumps(
            payload,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError):
        return "{}"
    encoded = encoded.translate(_HTML_ESCAPES)
    return json_pretty_format(encoded) if pretty else encoded