"""
Public API for the linksmith package.
"""

from .config import ProcessorConfig
from .errors import ContractViolationError
from .models import (
    Issue,
    IssueCode,
    Severity,
    ValidationReport,
    ValidationResult,
    WebLink,
    WebLinkParameter,
)
from .processor import WebLinkProcessor, process
from .validation import RFC8288_PROFILE, SIGNPOSTING_PROFILE, RuleProfile

__all__ = [
    "process",
    "WebLinkProcessor",
    "ProcessorConfig",
    "ContractViolationError",
    "Issue",
    "IssueCode",
    "Severity",
    "ValidationReport",
    "ValidationResult",
    "WebLink",
    "WebLinkParameter",
    "RFC8288_PROFILE",
    "SIGNPOSTING_PROFILE",
    "RuleProfile",
]
