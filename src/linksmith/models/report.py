"""
Public diagnostic models returned by the processing pipeline.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .weblink import WebLink


class Severity(str, Enum):
    """
    Severity of a reported issue.

    Only ERROR affects ``contains_issues()``.
    """

    ERROR = "error"
    WARNING = "warning"


class IssueCode(str, Enum):
    """
    Stable issue identifiers.
    """

    # syntax
    SYNTAX_ERROR = "syntax_error"
    MISSING_TARGET = "missing_target"
    EMPTY_PARAMETER = "empty_parameter"
    # model building / RFC 8288 baseline
    INVALID_TARGET = "invalid_target"
    MISSING_REL = "missing_rel"
    DUPLICATE_REL = "duplicate_rel"
    INVALID_TYPE = "invalid_type"
    DUPLICATE_PARAMETER = "duplicate_parameter"
    MISSING_PARAMETER_VALUE = "missing_parameter_value"
    INVALID_ANCHOR = "invalid_anchor"
    INVALID_HREFLANG = "invalid_hreflang"
    INVALID_TITLE_ENCODING = "invalid_title_encoding"
    UNKNOWN_PARAMETER = "unknown_parameter"
    # FAIR Signposting profile
    SIGNPOSTING_DUPLICATE_CITE_AS = "signposting_duplicate_cite_as"
    SIGNPOSTING_DUPLICATE_LICENSE = "signposting_duplicate_license"
    SIGNPOSTING_MISSING_TYPE = "signposting_missing_type"
    SIGNPOSTING_NOT_ABSOLUTE = "signposting_not_absolute"
    SIGNPOSTING_LINKSET_TYPE = "signposting_linkset_type"


class Issue(BaseModel):
    """
    A single diagnostic about one link (or the whole header).
    """

    model_config = ConfigDict(frozen=True)

    severity: Severity = Field(description="ERROR or WARNING.")
    code: IssueCode = Field(description="Stable issue identifier.")
    message: str = Field(description="Human-readable description of the problem.")
    link_index: Optional[int] = Field(
        default=None,
        description="Position of the offending link-value in the header; None for header-wide issues.",
    )
    parameter: Optional[str] = Field(
        default=None,
        description="Name of the offending parameter, where applicable.",
    )

    @classmethod
    def error(
        cls,
        code: IssueCode,
        message: str,
        link_index: Optional[int] = None,
        parameter: Optional[str] = None,
    ) -> "Issue":
        return cls(
            severity=Severity.ERROR,
            code=code,
            message=message,
            link_index=link_index,
            parameter=parameter,
        )

    @classmethod
    def warning(
        cls,
        code: IssueCode,
        message: str,
        link_index: Optional[int] = None,
        parameter: Optional[str] = None,
    ) -> "Issue":
        return cls(
            severity=Severity.WARNING,
            code=code,
            message=message,
            link_index=link_index,
            parameter=parameter,
        )

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR


class ValidationReport(BaseModel):
    """
    Ordered, immutable sequence of issues.

    ``contains_issues()`` is True only if at least one ERROR is present.
    A report holding only WARNINGs is considered clean: callers may trust the
    returned links.
    """

    model_config = ConfigDict(frozen=True)

    issues: tuple[Issue, ...] = Field(default=(), description="Issues in report order.")

    def contains_issues(self) -> bool:
        return any(issue.is_error for issue in self.issues)

    def errors(self) -> list[Issue]:
        return [issue for issue in self.issues if issue.severity is Severity.ERROR]

    def warnings(self) -> list[Issue]:
        return [issue for issue in self.issues if issue.severity is Severity.WARNING]

    def for_link(self, link_index: int) -> list[Issue]:
        return [issue for issue in self.issues if issue.link_index == link_index]

    def codes(self) -> list[IssueCode]:
        return [issue.code for issue in self.issues]


class ValidationResult(BaseModel):
    """
    Links extracted from a header together with the diagnostic report.
    """

    model_config = ConfigDict(frozen=True)

    links: tuple[WebLink, ...] = Field(default=(), description="Valid links in header order.")
    report: ValidationReport = Field(default_factory=ValidationReport)

    def contains_issues(self) -> bool:
        """Return True if the report holds at least one ERROR (WARNINGs are ignored)."""
        return self.report.contains_issues()
