"""
Rule-based validation of ``WebLink`` collections.

REPORT ORDER
------------
Per-link issues come first, in the order the links were supplied (and, for
one link, in profile/rule order). Collection-wide issues follow.

SEVERITY CONTRACT
-----------------
``ValidationReport.contains_issues()`` is True only when an ERROR is present.
WARNING-only reports do not flip it.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..errors import ContractViolationError
from ..logging import logger
from ..models.report import Issue, ValidationReport
from ..models.weblink import WebLink
from ..parsing.models import RawLinkValue
from .profiles import RFC8288_PROFILE, RuleProfile, strict_parameters_profile
from .rules import CollectionRule, LinkRule


class WebLinkValidator:
    """
    Validate links against the RFC 8288 baseline plus any extra profiles.

    Args:
        profiles: Additional profiles; the baseline is always included.
        allowed_parameters: ``None`` leaves extension parameters unrestricted
            (RFC default). A collection of names enables strict mode: any other
            extension parameter is an ERROR.
    """

    def __init__(
        self,
        profiles: Sequence[RuleProfile] = (),
        allowed_parameters: Optional[Iterable[str]] = None,
    ):
        active = [RFC8288_PROFILE]
        for profile in profiles:
            if all(profile.name != seen.name for seen in active):
                active.append(profile)
        if allowed_parameters is not None:
            active.append(strict_parameters_profile(allowed_parameters))
        self.profiles: tuple[RuleProfile, ...] = tuple(active)

        rules = [rule for profile in self.profiles for rule in profile.rules]
        self._link_rules = [rule for rule in rules if isinstance(rule, LinkRule)]
        self._collection_rules = [rule for rule in rules if isinstance(rule, CollectionRule)]

    @property
    def profile_names(self) -> list[str]:
        return [profile.name for profile in self.profiles]

    def validate(
        self,
        links: Sequence[WebLink],
        sources: Optional[Sequence[RawLinkValue]] = None,
    ) -> ValidationReport:
        """
        Validate ``links`` and return the report.

        Args:
            links: Links to validate.
            sources: Raw link-values ``links`` were built from (one per link).
                When given, issues reference each link-value's header position;
                otherwise they reference the position in ``links``.
        """
        per_link, collection = self.collect(links, sources)
        return ValidationReport(issues=tuple(per_link + collection))

    def collect(
        self,
        links: Sequence[WebLink],
        sources: Optional[Sequence[RawLinkValue]] = None,
    ) -> tuple[list[Issue], list[Issue]]:
        """Run all rules, returning (per-link issues, collection-wide issues).

        Per-link issues returned without a ``link_index`` are assigned the index
        of the link they were found on.
        """
        if sources is None:
            indices = list(range(len(links)))
        elif len(sources) != len(links):
            raise ContractViolationError(
                f"Expected one source per link, got {len(sources)} sources for {len(links)} links"
            )
        else:
            indices = [source.index for source in sources]

        per_link: list[Issue] = []
        for link, index in zip(links, indices):
            for rule in self._link_rules:
                per_link.extend(
                    issue if issue.link_index is not None else issue.model_copy(update={"link_index": index})
                    for issue in rule.check(link, index)
                )

        collection: list[Issue] = []
        for rule in self._collection_rules:
            collection.extend(rule.check_all(links, indices))

        logger.debug(
            f"Validated {len(links)} links with profiles {self.profile_names}: "
            f"{len(per_link)} link issues, {len(collection)} collection issues"
        )
        return per_link, collection
