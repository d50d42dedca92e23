"""
Semantic model for links carried by the HTTP ``Link`` header (RFC 8288).

A ``WebLink`` is one link: a target URI reference plus the ordered list of
link-params that followed it in the serialization. The model is a semantic
accessor layer over raw parameters. It does not enforce RFC constraints such
as cardinality; validators interpret parameter semantics and emit issues.

KNOWN VS EXTENSION PARAMETERS
-----------------------------
RFC 8288 defines a fixed set of parameter names. Classification happens once,
through the ``_PARAMETER_KINDS`` lookup table. Any name not in the table is an
extension attribute. Names are case-sensitive: ``Rel`` is an extension
attribute, ``rel`` is not.

MULTIPLICITY
------------
- ``rel()``, ``rev()`` and ``hreflang()`` return every occurrence in order.
- ``anchor()``, ``media()``, ``title()``, ``title_encodings()`` and
  ``type()`` return the first occurrence only.

ABSENT VALUES
-------------
A parameter written without ``=value`` has ``value=None``. This is distinct
from ``name=""`` whose value is the empty string.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ContractViolationError

_WHITESPACE = re.compile(r"\s+")


class ParameterKind(str, Enum):
    """Classification of a link-param name."""

    ANCHOR = "anchor"
    REL = "rel"
    REV = "rev"
    HREFLANG = "hreflang"
    MEDIA = "media"
    TITLE = "title"
    TITLE_ENCODED = "title*"
    TYPE = "type"
    EXTENSION = "extension"


_PARAMETER_KINDS: dict[str, ParameterKind] = {
    "anchor": ParameterKind.ANCHOR,
    "rel": ParameterKind.REL,
    "rev": ParameterKind.REV,
    "hreflang": ParameterKind.HREFLANG,
    "media": ParameterKind.MEDIA,
    "title": ParameterKind.TITLE,
    "title*": ParameterKind.TITLE_ENCODED,
    "type": ParameterKind.TYPE,
}

RFC_PARAMETER_NAMES = frozenset(_PARAMETER_KINDS)


def classify_parameter(name: str) -> ParameterKind:
    """Return the kind of parameter ``name`` (case-sensitive)."""
    return _PARAMETER_KINDS.get(name, ParameterKind.EXTENSION)


class WebLinkParameter(BaseModel):
    """
    A single link-param (``name[=value]``).
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Parameter name as serialized.")
    value: Optional[str] = Field(
        default=None,
        description="Parameter value, or None if the parameter had no '=value' part.",
    )

    @property
    def kind(self) -> ParameterKind:
        return classify_parameter(self.name)

    @property
    def is_extension(self) -> bool:
        return self.kind is ParameterKind.EXTENSION


class WebLink(BaseModel):
    """
    One link: a target URI reference and its parameters in encounter order.
    """

    model_config = ConfigDict(frozen=True)

    target: str = Field(description="Target URI reference (the text inside '<...>').")
    params: tuple[WebLinkParameter, ...] = Field(
        default=(),
        description="Link parameters in the order they were serialized.",
    )

    @classmethod
    def create(cls, target: str, params: Iterable[WebLinkParameter] = ()) -> "WebLink":
        """Create a link, rejecting absent arguments.

        Semantic correctness of ``params`` is not checked here; that is the
        validator's job.
        """
        if target is None:
            raise ContractViolationError("WebLink target must not be None")
        if params is None:
            raise ContractViolationError("WebLink params must not be None")
        return cls(target=target, params=tuple(params))

    def anchor(self) -> Optional[str]:
        """Return the first ``anchor`` value (RFC 8288 §3.2), or None."""
        return self._first(ParameterKind.ANCHOR)

    def hreflang(self) -> list[str]:
        """Return all ``hreflang`` values in encounter order (RFC 8288 §3.4.1)."""
        return [value for value in self._values(ParameterKind.HREFLANG) if value is not None]

    def media(self) -> Optional[str]:
        return self._first(ParameterKind.MEDIA)

    def rel(self) -> list[str]:
        """Return all relation types.

        Every ``rel`` value is split on runs of whitespace and the results are
        flattened in encounter order. Repeated ``rel`` parameters are not
        collapsed here; the validator reports them.
        """
        return self._split_all(ParameterKind.REL)

    def rev(self) -> list[str]:
        """Return all reverse relation types, split like ``rel()``."""
        return self._split_all(ParameterKind.REV)

    def title(self) -> Optional[str]:
        return self._first(ParameterKind.TITLE)

    def title_encodings(self) -> Optional[str]:
        """Return the first raw ``title*`` value (not decoded), or None."""
        return self._first(ParameterKind.TITLE_ENCODED)

    def type(self) -> Optional[str]:
        """Return the first ``type`` value (RFC 8288 §3.4.1), or None."""
        return self._first(ParameterKind.TYPE)

    def extension_attributes(self) -> dict[str, list[Optional[str]]]:
        """Group all extension parameters by name, preserving value order.

        Value-less extension parameters appear as None entries.
        """
        grouped: dict[str, list[Optional[str]]] = {}
        for param in self.params:
            if param.is_extension:
                grouped.setdefault(param.name, []).append(param.value)
        return grouped

    def extension_attribute(self, name: str) -> list[Optional[str]]:
        """Return the values of extension attribute ``name``, or an empty list."""
        return self.extension_attributes().get(name, [])

    def _matching(self, kind: ParameterKind) -> Iterator[WebLinkParameter]:
        return (param for param in self.params if param.kind is kind)

    def _values(self, kind: ParameterKind) -> Iterator[Optional[str]]:
        return (param.value for param in self._matching(kind))

    def _first(self, kind: ParameterKind) -> Optional[str]:
        param = next(self._matching(kind), None)
        return param.value if param is not None else None

    def _split_all(self, kind: ParameterKind) -> list[str]:
        parts: list[str] = []
        for value in self._values(kind):
            if value is None:
                continue
            parts.extend(part for part in _WHITESPACE.split(value.strip()) if part)
        return parts
