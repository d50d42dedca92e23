"""
Processor configuration.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .validation.profiles import PROFILES, RuleProfile


class ProcessorConfig(BaseModel):
    """
    Which validation behaviour a processor applies on top of the RFC 8288 baseline.
    """

    model_config = ConfigDict(frozen=True)

    profiles: tuple[str, ...] = Field(
        default=(),
        description="Names of optional rule profiles to enable (for example signposting).",
    )
    allowed_parameters: Optional[frozenset[str]] = Field(
        default=None,
        description=(
            "Allow-list for extension parameter names. None leaves them unrestricted "
            "(RFC default); a set enables strict mode."
        ),
    )

    @field_validator("profiles")
    @classmethod
    def check_known_profiles(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        unknown = [name for name in value if name not in PROFILES]
        if unknown:
            raise ValueError(
                f"Unknown profile(s) {unknown}; available: {sorted(PROFILES)}"
            )
        return value

    def resolve_profiles(self) -> list[RuleProfile]:
        return [PROFILES[name] for name in self.profiles]
