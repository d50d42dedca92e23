"""
FAIR Signposting rules for scholarly objects (https://signposting.org/FAIR/).

These rules apply only when the ``signposting`` profile is enabled. They
inspect relation types the baseline leaves uninterpreted:

- ``cite-as``: at most one per header (ERROR), absolute target.
- ``license``: at most one per header (WARNING), absolute target.
- ``describedby``: MUST carry ``type`` (ERROR).
- ``item``: SHOULD carry ``type`` (WARNING).
- ``type``, ``linkset``: absolute target; ``linkset`` typed as a linkset.
"""

from __future__ import annotations

from typing import Sequence

from ..models.report import Issue, IssueCode
from ..models.uri import has_scheme
from ..models.weblink import WebLink

CITE_AS = "cite-as"
DESCRIBED_BY = "describedby"
ITEM = "item"
LICENSE = "license"
LINKSET = "linkset"
TYPE = "type"

ABSOLUTE_TARGET_RELATIONS = (CITE_AS, DESCRIBED_BY, ITEM, LICENSE, LINKSET, TYPE)
LINKSET_MEDIA_TYPES = frozenset({"application/linkset", "application/linkset+json"})


class SignpostingCardinalityRule:
    """Relations that identify the object itself may occur only once per header."""

    name = "signposting-cardinality"

    _LIMITS = (
        (CITE_AS, IssueCode.SIGNPOSTING_DUPLICATE_CITE_AS, Issue.error),
        (LICENSE, IssueCode.SIGNPOSTING_DUPLICATE_LICENSE, Issue.warning),
    )

    def check_all(self, links: Sequence[WebLink], indices: Sequence[int]) -> list[Issue]:
        issues = []
        for relation, code, make_issue in self._LIMITS:
            positions = [index for link, index in zip(links, indices) if relation in link.rel()]
            if len(positions) > 1:
                issues.append(
                    make_issue(
                        code,
                        f"'{relation}' must occur at most once, found {len(positions)} links "
                        f"(link-values {', '.join(str(p) for p in positions)})",
                    )
                )
        return issues


class SignpostingTypeRule:
    name = "signposting-type"

    def check(self, link: WebLink, index: int) -> list[Issue]:
        relations = link.rel()
        if link.type() is not None:
            return []
        if DESCRIBED_BY in relations:
            return [
                Issue.error(
                    IssueCode.SIGNPOSTING_MISSING_TYPE,
                    "'describedby' link must declare the metadata format with 'type'",
                    link_index=index,
                    parameter="type",
                )
            ]
        if ITEM in relations:
            return [
                Issue.warning(
                    IssueCode.SIGNPOSTING_MISSING_TYPE,
                    "'item' link should declare the content format with 'type'",
                    link_index=index,
                    parameter="type",
                )
            ]
        return []


class SignpostingAbsoluteTargetRule:
    name = "signposting-absolute-target"

    def check(self, link: WebLink, index: int) -> list[Issue]:
        if has_scheme(link.target):
            return []
        relations = [rel for rel in link.rel() if rel in ABSOLUTE_TARGET_RELATIONS]
        if not relations:
            return []
        return [
            Issue.warning(
                IssueCode.SIGNPOSTING_NOT_ABSOLUTE,
                f"Target {link.target!r} of '{relations[0]}' link should be an absolute URI",
                link_index=index,
            )
        ]


class SignpostingLinksetTypeRule:
    name = "signposting-linkset-type"

    def check(self, link: WebLink, index: int) -> list[Issue]:
        if LINKSET not in link.rel():
            return []
        media_type = link.type()
        if media_type is not None and media_type.split(";")[0].strip() in LINKSET_MEDIA_TYPES:
            return []
        return [
            Issue.warning(
                IssueCode.SIGNPOSTING_LINKSET_TYPE,
                f"'linkset' link should have type {' or '.join(sorted(LINKSET_MEDIA_TYPES))}, "
                f"found {media_type!r}",
                link_index=index,
                parameter="type",
            )
        ]
