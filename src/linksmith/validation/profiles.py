"""
Rule profiles.

A profile is a named, immutable bundle of rules. The RFC 8288 baseline is
always active; further profiles are additive and are handed to the validator
explicitly at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Union

from .rules import (
    AllowedParametersRule,
    AnchorRule,
    CollectionRule,
    HreflangRule,
    LinkRule,
    MediaTypeRule,
    ParameterValueRule,
    RelCardinalityRule,
    RelPresenceRule,
    SingleValuedParameterRule,
    TargetUriRule,
    TitleEncodingRule,
)
from .signposting import (
    SignpostingAbsoluteTargetRule,
    SignpostingCardinalityRule,
    SignpostingLinksetTypeRule,
    SignpostingTypeRule,
)

Rule = Union[LinkRule, CollectionRule]


@dataclass(frozen=True)
class RuleProfile:
    name: str
    rules: tuple[Rule, ...]


RFC8288_PROFILE = RuleProfile(
    name="rfc8288",
    rules=(
        TargetUriRule(),
        RelPresenceRule(),
        RelCardinalityRule(),
        MediaTypeRule(),
        SingleValuedParameterRule(),
        ParameterValueRule(),
        AnchorRule(),
        HreflangRule(),
        TitleEncodingRule(),
    ),
)

SIGNPOSTING_PROFILE = RuleProfile(
    name="signposting",
    rules=(
        SignpostingTypeRule(),
        SignpostingAbsoluteTargetRule(),
        SignpostingLinksetTypeRule(),
        SignpostingCardinalityRule(),
    ),
)

# Optional profiles selectable by name (read-only).
PROFILES = MappingProxyType({SIGNPOSTING_PROFILE.name: SIGNPOSTING_PROFILE})


def strict_parameters_profile(allowed: Iterable[str]) -> RuleProfile:
    """Profile restricting extension parameters to ``allowed``."""
    return RuleProfile(name="strict-parameters", rules=(AllowedParametersRule(allowed),))
