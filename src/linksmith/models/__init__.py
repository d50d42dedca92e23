from .report import (
    Issue,
    IssueCode,
    Severity,
    ValidationReport,
    ValidationResult,
)
from .uri import has_scheme, is_uri_reference
from .weblink import (
    RFC_PARAMETER_NAMES,
    ParameterKind,
    WebLink,
    WebLinkParameter,
    classify_parameter,
)

__all__ = [
    "Issue",
    "IssueCode",
    "Severity",
    "ValidationReport",
    "ValidationResult",
    "has_scheme",
    "is_uri_reference",
    "RFC_PARAMETER_NAMES",
    "ParameterKind",
    "WebLink",
    "WebLinkParameter",
    "classify_parameter",
]
