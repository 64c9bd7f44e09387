"""
Conversion between the dataclasses in :mod:`braintree_client.core.models`
and Braintree's XML documents.
"""

from __future__ import annotations

import functools
from dataclasses import fields, is_dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Type, TypeVar, Union, get_args, get_origin, get_type_hints
from xml.etree import ElementTree as ET

from .errors import ResponseParseError

__all__ = [
    "decode",
    "dumps",
    "encode",
    "encode_value",
    "format_datetime",
    "loads",
    "tag_for",
]

T = TypeVar("T")

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def tag_for(name: str) -> str:
    return name.replace("_", "-")


@functools.lru_cache(maxsize=None)
def _hints(cls: type) -> Dict[str, Any]:
    return get_type_hints(cls)


def _unwrap_optional(tp: Any) -> Any:
    if get_origin(tp) is Union:
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def format_datetime(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(_DATETIME_FORMAT)


def _parse_datetime(text: str) -> datetime:
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def encode_value(tag: str, value: Any) -> ET.Element:
    """Encode a single value as an element named ``tag``."""
    element = ET.Element(tag)
    if is_dataclass(value):
        _encode_fields(value, element)
    elif isinstance(value, bool):
        element.set("type", "boolean")
        element.text = "true" if value else "false"
    elif isinstance(value, int):
        element.set("type", "integer")
        element.text = str(value)
    elif isinstance(value, Decimal):
        # plain notation, never exponent form
        element.text = format(value, "f")
    elif isinstance(value, datetime):
        element.set("type", "datetime")
        element.text = format_datetime(value)
    elif isinstance(value, (list, tuple)):
        element.set("type", "array")
        for item in value:
            element.append(encode_value("item", item))
    else:
        element.text = str(value)
    return element


def _encode_fields(obj: Any, element: ET.Element) -> None:
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        element.append(encode_value(tag_for(f.name), value))


def encode(obj: Any, root: str | None = None) -> ET.Element:
    """
    Encode ``obj`` into an element.

    Objects exposing ``to_element()`` encode themselves; dataclasses are
    encoded field by field under ``root`` or their ``xml_root``.
    """
    if hasattr(obj, "to_element"):
        return obj.to_element()
    if not is_dataclass(obj):
        raise TypeError(f"Cannot encode {type(obj).__name__} as XML")
    element = ET.Element(root or getattr(obj, "xml_root"))
    _encode_fields(obj, element)
    return element


def dumps(obj: Any) -> bytes:
    body = ET.tostring(encode(obj), encoding="unicode")
    return (_XML_DECLARATION + body).encode("utf-8")


def loads(data: bytes) -> ET.Element:
    try:
        return ET.fromstring(data)
    except ET.ParseError as exc:
        raise ResponseParseError(f"Response body is not valid XML: {exc}") from exc


def _decode_value(tp: Any, element: ET.Element) -> Any:
    tp = _unwrap_optional(tp)
    if is_dataclass(tp):
        return _decode_fields(tp, element)
    if get_origin(tp) in (list, List):
        (item_type,) = get_args(tp) or (str,)
        return [_decode_value(item_type, child) for child in element]

    text = (element.text or "").strip()
    if tp is bool:
        return text == "true"
    if tp is int:
        return int(text)
    if tp is Decimal:
        return Decimal(text)
    if tp is datetime:
        return _parse_datetime(text)
    return element.text or ""


def _decode_fields(cls: Type[T], element: ET.Element) -> T:
    hints = _hints(cls)
    kwargs: Dict[str, Any] = {}
    for f in fields(cls):
        child = element.find(tag_for(f.name))
        if child is None or child.get("nil") == "true":
            continue
        kwargs[f.name] = _decode_value(hints[f.name], child)
    return cls(**kwargs)


def decode(cls: Type[T], element: ET.Element) -> T:
    """Decode ``element`` into an instance of the dataclass ``cls``."""
    try:
        return _decode_fields(cls, element)
    except (ValueError, InvalidOperation) as exc:
        raise ResponseParseError(
            f"Could not decode <{element.tag}> as {cls.__name__}: {exc}"
        ) from exc
