"""
Link header processor: one call from raw header text to validated links.

PIPELINE
--------

    raw str → WebLinkLexer → WebLinkParser → WebLinkBuilder → WebLinkValidator

Each call is synchronous and self-contained. Lexer and parser are created per
call; the processor itself only holds immutable configuration, so a single
instance can serve concurrent callers.

ERROR POLICY
------------
- ``None`` or non-string input is a contract fault: ``ContractViolationError``
  is raised before any token is produced.
- Malformed content never raises. Syntax faults drop one link-value, an invalid
  target drops one link, semantic faults are reported and the link is kept.

REPORT ORDER
------------
Issues are grouped by the link-value they concern, in header order: parser and
builder issues for a link-value come before validator issues for it.
Collection-wide issues come last.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from loguru import logger

from .config import ProcessorConfig
from .errors import ContractViolationError
from .models.report import ValidationReport, ValidationResult
from .parsing.builder import WebLinkBuilder
from .parsing.lexer import WebLinkLexer
from .parsing.parser import WebLinkParser
from .validation.profiles import RuleProfile
from .validation.validator import WebLinkValidator


class WebLinkProcessor:
    """
    Parse and validate HTTP ``Link`` header values.

    Args:
        profiles: Rule profiles to enable on top of the RFC 8288 baseline.
        allowed_parameters: Extension parameter allow-list (strict mode), or
            ``None`` for the unrestricted RFC default.
    """

    def __init__(
        self,
        profiles: Sequence[RuleProfile] = (),
        allowed_parameters: Optional[Iterable[str]] = None,
    ):
        self.validator = WebLinkValidator(profiles=profiles, allowed_parameters=allowed_parameters)
        self.builder = WebLinkBuilder()

    @classmethod
    def from_config(cls, config: ProcessorConfig) -> "WebLinkProcessor":
        return cls(
            profiles=config.resolve_profiles(),
            allowed_parameters=config.allowed_parameters,
        )

    def process(self, raw: str) -> ValidationResult:
        """
        Process one header field value.

        Args:
            raw: The field value, unfolded, without the ``Link:`` field name.
                Repeated header lines must be comma-joined by the caller.

        Returns:
            ValidationResult with the valid links in header order and the report.

        Raises:
            ContractViolationError: if ``raw`` is None or not a string.
        """
        if raw is None:
            raise ContractViolationError("Link header value must not be None")
        if not isinstance(raw, str):
            raise ContractViolationError(
                f"Link header value must be a str, got {type(raw).__name__}"
            )

        # 1. Tokenize + parse (syntax issues, malformed link-values dropped)
        parsed = WebLinkParser().parse(WebLinkLexer(raw))

        # 2. Build links (invalid targets dropped)
        built = self.builder.build(parsed.link_values)

        # 3. Validate against active profiles
        per_link, collection = self.validator.collect(built.links, built.sources)

        # Stable sort keeps parser → builder → validator order within one link-value
        located = sorted(parsed.issues + built.issues + per_link, key=lambda issue: issue.link_index)
        report = ValidationReport(issues=tuple(located + collection))

        logger.info(
            f"WebLinkProcessor: {len(built.links)} valid links, "
            f"{len(report.errors())} errors, {len(report.warnings())} warnings"
        )
        return ValidationResult(links=tuple(built.links), report=report)


def process(
    raw: str,
    profiles: Sequence[RuleProfile] = (),
    allowed_parameters: Optional[Iterable[str]] = None,
) -> ValidationResult:
    """Process ``raw`` with a one-off ``WebLinkProcessor``."""
    return WebLinkProcessor(profiles=profiles, allowed_parameters=allowed_parameters).process(raw)
