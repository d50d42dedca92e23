"""
Validation rules for ``WebLink`` collections.

RULE MODEL
----------
A rule inspects either one link (``LinkRule``) or the whole collection
(``CollectionRule``) and contributes zero or more issues. Rules are
independent of each other; the validator decides the report order.

Every link is identified by its ``index``: the position of its link-value in
the header, so issues line up with parser diagnostics for the same header.

RFC 8288 BASELINE
-----------------
The rules in this module form the baseline profile, which is always active:

- INVALID_TARGET (ERROR): target is not a URI reference.
- MISSING_REL (ERROR): no relation type conveyed (RFC 8288 §3.3).
- DUPLICATE_REL (ERROR): ``rel`` MUST NOT appear more than once.
- INVALID_TYPE (WARNING): ``type`` is not shaped like a media type.
- DUPLICATE_PARAMETER (WARNING): single-valued parameter repeated; the
  accessors use the first occurrence.
- MISSING_PARAMETER_VALUE (WARNING): RFC parameter written without a value.
- INVALID_ANCHOR / INVALID_HREFLANG / INVALID_TITLE_ENCODING (WARNING).

``AllowedParametersRule`` is not part of the baseline; it backs the opt-in
strict mode.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Protocol, Sequence, runtime_checkable

from ..models.report import Issue, IssueCode
from ..models.uri import is_uri_reference
from ..models.weblink import ParameterKind, WebLink

_MEDIA_TYPE = re.compile(r"^[A-Za-z0-9!#$&^_.+\-]+/[A-Za-z0-9!#$&^_.+\-]+\s*(;.*)?$", re.DOTALL)
_LANGUAGE_TAG = re.compile(r"^[A-Za-z]{1,8}(-[A-Za-z0-9]{1,8})*$")
# RFC 8187 ext-value: charset "'" [ language ] "'" value-chars
_EXT_VALUE = re.compile(
    r"^[A-Za-z0-9!#$%&+\-^_`{}~]+'[A-Za-z0-9\-]*'(?:[A-Za-z0-9!#$&+\-.^_`|~]|%[0-9A-Fa-f]{2})*$"
)

SINGLE_VALUED_KINDS = (
    ParameterKind.ANCHOR,
    ParameterKind.MEDIA,
    ParameterKind.TITLE,
    ParameterKind.TITLE_ENCODED,
    ParameterKind.TYPE,
)


@runtime_checkable
class LinkRule(Protocol):
    """Rule inspecting one link at a time."""

    name: str

    def check(self, link: WebLink, index: int) -> Iterable[Issue]:
        """Return the issues found for ``link``."""


@runtime_checkable
class CollectionRule(Protocol):
    """Rule inspecting the whole link collection."""

    name: str

    def check_all(self, links: Sequence[WebLink], indices: Sequence[int]) -> Iterable[Issue]:
        """Return the issues found across ``links``."""


class TargetUriRule:
    name = "target-uri"

    def check(self, link: WebLink, index: int) -> list[Issue]:
        if is_uri_reference(link.target):
            return []
        return [
            Issue.error(
                IssueCode.INVALID_TARGET,
                f"Target {link.target!r} is not a valid URI reference",
                link_index=index,
            )
        ]


class RelPresenceRule:
    name = "rel-present"

    def check(self, link: WebLink, index: int) -> list[Issue]:
        if link.rel():
            return []
        return [
            Issue.error(
                IssueCode.MISSING_REL,
                "Link has no relation type: 'rel' parameter is missing or empty",
                link_index=index,
                parameter="rel",
            )
        ]


class RelCardinalityRule:
    """``rel`` MUST NOT appear more than once in a link-value (RFC 8288 §3.3)."""

    name = "rel-once"

    def check(self, link: WebLink, index: int) -> list[Issue]:
        count = sum(1 for param in link.params if param.kind is ParameterKind.REL)
        if count <= 1:
            return []
        return [
            Issue.error(
                IssueCode.DUPLICATE_REL,
                f"'rel' appears {count} times; it must not appear more than once",
                link_index=index,
                parameter="rel",
            )
        ]


class MediaTypeRule:
    name = "type-shape"

    def check(self, link: WebLink, index: int) -> list[Issue]:
        media_type = link.type()
        if media_type is None or _MEDIA_TYPE.match(media_type):
            return []
        return [
            Issue.warning(
                IssueCode.INVALID_TYPE,
                f"'type' value {media_type!r} does not look like a media type (type/subtype)",
                link_index=index,
                parameter="type",
            )
        ]


class SingleValuedParameterRule:
    name = "single-valued"

    def check(self, link: WebLink, index: int) -> list[Issue]:
        counts = Counter(param.name for param in link.params if param.kind in SINGLE_VALUED_KINDS)
        return [
            Issue.warning(
                IssueCode.DUPLICATE_PARAMETER,
                f"'{name}' appears {count} times; only the first occurrence is used",
                link_index=index,
                parameter=name,
            )
            for name, count in counts.items()
            if count > 1
        ]


class ParameterValueRule:
    name = "value-present"

    def check(self, link: WebLink, index: int) -> list[Issue]:
        return [
            Issue.warning(
                IssueCode.MISSING_PARAMETER_VALUE,
                f"'{param.name}' is given without a value",
                link_index=index,
                parameter=param.name,
            )
            for param in link.params
            if not param.is_extension and param.value is None
        ]


class AnchorRule:
    name = "anchor-uri"

    def check(self, link: WebLink, index: int) -> list[Issue]:
        anchor = link.anchor()
        if anchor is None or is_uri_reference(anchor):
            return []
        return [
            Issue.warning(
                IssueCode.INVALID_ANCHOR,
                f"'anchor' value {anchor!r} is not a valid URI reference",
                link_index=index,
                parameter="anchor",
            )
        ]


class HreflangRule:
    name = "hreflang-shape"

    def check(self, link: WebLink, index: int) -> list[Issue]:
        return [
            Issue.warning(
                IssueCode.INVALID_HREFLANG,
                f"'hreflang' value {value!r} is not a language tag",
                link_index=index,
                parameter="hreflang",
            )
            for value in link.hreflang()
            if not _LANGUAGE_TAG.match(value)
        ]


class TitleEncodingRule:
    name = "title-encoding"

    def check(self, link: WebLink, index: int) -> list[Issue]:
        encoded = link.title_encodings()
        if encoded is None or _EXT_VALUE.match(encoded):
            return []
        return [
            Issue.warning(
                IssueCode.INVALID_TITLE_ENCODING,
                f"'title*' value {encoded!r} is not of the form charset'lang'value",
                link_index=index,
                parameter="title*",
            )
        ]


class AllowedParametersRule:
    """Strict mode: extension parameters must be explicitly allowed."""

    name = "allowed-parameters"

    def __init__(self, allowed: Iterable[str]):
        self.allowed = frozenset(allowed)

    def check(self, link: WebLink, index: int) -> list[Issue]:
        issues = []
        for name in link.extension_attributes():
            if name in self.allowed:
                continue
            issues.append(
                Issue.error(
                    IssueCode.UNKNOWN_PARAMETER,
                    f"Parameter '{name}' is not in the allowed parameter list",
                    link_index=index,
                    parameter=name,
                )
            )
        return issues

