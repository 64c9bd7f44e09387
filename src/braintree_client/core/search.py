"""
Advanced search queries.

A :class:`SearchQuery` is an ordered collection of named fields, each
rendered as one child of the ``<search>`` element::

    <search>
      <order-id><starts-with>A</starts-with></order-id>
      <amount><min>10.00</min></amount>
      <status type="array"><item>settled</item></status>
    </search>
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Union
from xml.etree import ElementTree as ET

from .errors import ResponseParseError
from .models import SearchResult
from .xmlcodec import encode_value, tag_for

__all__ = [
    "MultiField",
    "RangeField",
    "SearchQuery",
    "TextField",
    "parse_search_results",
]

RangeValue = Union[Decimal, int, datetime, str]


@dataclass
class TextField:
    name: str
    is_: Optional[str] = None
    is_not: Optional[str] = None
    starts_with: Optional[str] = None
    ends_with: Optional[str] = None
    contains: Optional[str] = None

    def to_element(self) -> ET.Element:
        element = ET.Element(tag_for(self.name))
        for operator, value in (
            ("is", self.is_),
            ("is_not", self.is_not),
            ("starts_with", self.starts_with),
            ("ends_with", self.ends_with),
            ("contains", self.contains),
        ):
            if value is not None:
                element.append(encode_value(tag_for(operator), value))
        return element


@dataclass
class RangeField:
    name: str
    is_: Optional[RangeValue] = None
    min: Optional[RangeValue] = None
    max: Optional[RangeValue] = None

    def to_element(self) -> ET.Element:
        element = ET.Element(tag_for(self.name))
        for operator, value in (("is", self.is_), ("min", self.min), ("max", self.max)):
            if value is not None:
                element.append(encode_value(operator, value))
        return element


@dataclass
class MultiField:
    name: str
    items: List[str] = field(default_factory=list)

    def to_element(self) -> ET.Element:
        return encode_value(tag_for(self.name), list(self.items))


SearchField = Union[TextField, RangeField, MultiField]


class SearchQuery:
    xml_root = "search"

    def __init__(self) -> None:
        self._fields: Dict[str, SearchField] = {}

    def _add(self, name: str, kind: type) -> SearchField:
        existing = self._fields.get(name)
        if existing is not None:
            if not isinstance(existing, kind):
                raise ValueError(
                    f"Search field '{name}' is already a {type(existing).__name__}"
                )
            return existing
        created = kind(name)
        self._fields[name] = created
        return created

    def add_text_field(self, name: str) -> TextField:
        return self._add(name, TextField)  # type: ignore[return-value]

    def add_range_field(self, name: str) -> RangeField:
        return self._add(name, RangeField)  # type: ignore[return-value]

    def add_multi_field(self, name: str) -> MultiField:
        return self._add(name, MultiField)  # type: ignore[return-value]

    def replace_multi_field(self, name: str, items: List[str]) -> MultiField:
        """Set ``name`` to a fresh multi field, leaving any previous one untouched."""
        replacement = MultiField(name, list(items))
        self._fields[name] = replacement
        return replacement

    @property
    def fields(self) -> List[SearchField]:
        return list(self._fields.values())

    def shallow_copy(self) -> "SearchQuery":
        copy = SearchQuery()
        copy._fields = dict(self._fields)
        return copy

    def to_element(self) -> ET.Element:
        element = ET.Element(self.xml_root)
        for search_field in self._fields.values():
            element.append(search_field.to_element())
        return element

    def __repr__(self) -> str:
        return f"SearchQuery(fields={self.fields!r})"


def parse_search_results(root: ET.Element) -> SearchResult:
    """Read a ``<search-results>`` document into a :class:`SearchResult`."""
    page_size_text = (root.findtext("page-size") or "").strip()
    try:
        page_size = int(page_size_text)
    except ValueError as exc:
        raise ResponseParseError(
            f"Search results carry an invalid page size: '{page_size_text}'"
        ) from exc
    ids_element = root.find("ids")
    ids = [] if ids_element is None else [(item.text or "") for item in ids_element]
    return SearchResult(page_size=page_size, ids=ids)
