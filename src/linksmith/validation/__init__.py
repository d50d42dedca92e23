"""Semantic validation of parsed links against RFC 8288 and optional profiles."""

from .profiles import (
    PROFILES,
    RFC8288_PROFILE,
    SIGNPOSTING_PROFILE,
    RuleProfile,
    strict_parameters_profile,
)
from .rules import CollectionRule, LinkRule
from .validator import WebLinkValidator

__all__ = [
    "PROFILES",
    "RFC8288_PROFILE",
    "SIGNPOSTING_PROFILE",
    "CollectionRule",
    "LinkRule",
    "RuleProfile",
    "WebLinkValidator",
    "strict_parameters_profile",
]
