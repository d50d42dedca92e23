"""
Model building: raw link-values to immutable ``WebLink`` objects.

The target of every link-value must be a syntactically valid URI reference.
Link-values whose target fails the check are dropped and reported with one
ERROR issue each; the failure never affects the other links in the header.

Parameters are copied 1:1, in order. A bare parameter keeps ``value=None``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from loguru import logger

from ..models.report import Issue, IssueCode
from ..models.uri import is_uri_reference
from ..models.weblink import WebLink, WebLinkParameter
from .models import RawLinkValue


@dataclass
class BuildResult:
    """
    Built links paired with the raw link-values they came from.

    ``sources[i]`` is the raw link-value ``links[i]`` was built from.
    """
    links: list[WebLink] = field(default_factory=list)
    sources: list[RawLinkValue] = field(default_factory=list)
    issues: list[Issue] = field(default_factory=list)


class WebLinkBuilder:
    """Turn parsed link-values into ``WebLink`` objects."""

    def build(self, link_values: Iterable[RawLinkValue]) -> BuildResult:
        result = BuildResult()
        for link_value in link_values:
            if not is_uri_reference(link_value.target):
                logger.debug(f"Dropping link-value {link_value.index}: invalid target {link_value.target!r}")
                result.issues.append(
                    Issue.error(
                        IssueCode.INVALID_TARGET,
                        f"Target {link_value.target!r} is not a valid URI reference",
                        link_index=link_value.index,
                    )
                )
                continue
            result.links.append(self.to_weblink(link_value))
            result.sources.append(link_value)
        return result

    @staticmethod
    def to_weblink(link_value: RawLinkValue) -> WebLink:
        params = [WebLinkParameter(name=param.name, value=param.value) for param in link_value.params]
        return WebLink.create(link_value.target, params)
