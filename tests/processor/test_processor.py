from concurrent.futures import ThreadPoolExecutor

import pytest

from linksmith import (
    SIGNPOSTING_PROFILE,
    ContractViolationError,
    Issue,
    IssueCode,
    RuleProfile,
    Severity,
    WebLinkProcessor,
    process,
)
from linksmith import processor as processor_module

SIGNPOSTING_HEADER = (
    '<https://doi.org/10.5281/zenodo.1234>; rel="cite-as", '
    '<https://example.org/meta.jsonld>; rel="describedby"; type="application/ld+json", '
    '<https://example.org/data.csv>; rel="item"; type="text/csv", '
    '<https://creativecommons.org/licenses/by/4.0/>; rel="license", '
    '<https://schema.org/ScholarlyArticle>; rel="type"'
)


def test_partial_failure_recovery():
    result = process('<https://a/>;rel="self", <not a url>;rel="item", <https://b/>;rel="alt"')
    assert [link.target for link in result.links] == ["https://a/", "https://b/"]
    assert len(result.report.issues) == 1
    issue = result.report.issues[0]
    assert issue.severity == Severity.ERROR
    assert issue.code == IssueCode.INVALID_TARGET
    assert issue.link_index == 1
    assert result.contains_issues()


def test_accessors_on_processed_links():
    result = process(
        '<https://example.org/>; rel="self describedby item"; type=application/json; '
        'type=text/html; hreflang=en; hreflang=de; hreflang=fr; Profile=A; profile=B'
    )
    link = result.links[0]
    assert link.rel() == ["self", "describedby", "item"]
    assert link.type() == "application/json"
    assert link.hreflang() == ["en", "de", "fr"]
    assert link.extension_attributes() == {"Profile": ["A"], "profile": ["B"]}
    assert [i.code for i in result.report.issues] == [IssueCode.DUPLICATE_PARAMETER]
    assert not result.contains_issues()


def test_extension_attributes_round_trip_through_header():
    names = [f"x-ext-{n}" for n in range(5)]
    header = "<https://a/>; rel=self; " + "; ".join(f'{name}="v{n}"; {name}=w{n}' for n, name in enumerate(names))
    link = process(header).links[0]
    for n, name in enumerate(names):
        assert link.extension_attribute(name) == [f"v{n}", f"w{n}"]
    assert link.extension_attribute("rel") == []


@pytest.mark.parametrize("raw", [None, 42, b"<https://a/>; rel=self"])
def test_invalid_input_is_contract_fault_before_lexing(monkeypatch, raw):
    def _fail(*args, **kwargs):
        raise AssertionError("lexer must not be created")

    monkeypatch.setattr(processor_module, "WebLinkLexer", _fail)
    with pytest.raises(ContractViolationError):
        WebLinkProcessor().process(raw)


def test_empty_header_yields_empty_result():
    for raw in ("", "   ", ","):
        result = process(raw)
        assert result.links == ()
        assert result.report.issues == ()
        assert not result.contains_issues()


def test_repeated_rel_is_reported_as_error():
    result = process("<https://a/>; rel=self; rel=item")
    assert result.links[0].rel() == ["self", "item"]
    assert [(i.code, i.severity) for i in result.report.issues] == [
        (IssueCode.DUPLICATE_REL, Severity.ERROR)
    ]
    assert result.contains_issues()


def test_warning_only_result_is_trusted():
    result = process("<https://a/>; rel=self; type=nonsense")
    assert [i.severity for i in result.report.issues] == [Severity.WARNING]
    assert not result.contains_issues()


def test_report_is_ordered_by_link_value():
    result = process("<https://a/>; type=text/html, rel=x, <https://c/>;;rel=c;rel=d")
    assert [(i.code, i.link_index) for i in result.report.issues] == [
        (IssueCode.MISSING_REL, 0),
        (IssueCode.MISSING_TARGET, 1),
        (IssueCode.EMPTY_PARAMETER, 2),
        (IssueCode.DUPLICATE_REL, 2),
    ]


def test_collection_issues_come_last():
    result = process(
        "<https://doi.org/1>; rel=cite-as, <https://doi.org/2>; rel=cite-as, <x y>; rel=z",
        profiles=[SIGNPOSTING_PROFILE],
    )
    assert [(i.code, i.link_index) for i in result.report.issues] == [
        (IssueCode.INVALID_TARGET, 2),
        (IssueCode.SIGNPOSTING_DUPLICATE_CITE_AS, None),
    ]


def test_signposting_header_is_clean():
    result = WebLinkProcessor(profiles=[SIGNPOSTING_PROFILE]).process(SIGNPOSTING_HEADER)
    assert len(result.links) == 5
    assert result.report.issues == ()


def test_signposting_rules_only_when_enabled():
    header = "<https://example.org/meta>; rel=describedby"
    assert process(header).report.issues == ()
    result = process(header, profiles=[SIGNPOSTING_PROFILE])
    assert [i.code for i in result.report.issues] == [IssueCode.SIGNPOSTING_MISSING_TYPE]


def test_strict_mode():
    header = "<https://a/>; rel=self; profile=x; foo=bar"
    assert not process(header).contains_issues()
    result = process(header, allowed_parameters=["profile"])
    assert [(i.code, i.parameter) for i in result.report.issues] == [(IssueCode.UNKNOWN_PARAMETER, "foo")]


def test_processing_is_deterministic():
    header = '<https://a/>; rel="self"; x=1, <bad target>; rel=a, garbage, <https://b/>; title="t"'
    assert process(header) == process(header)


def test_processor_can_be_shared_between_threads():
    processor = WebLinkProcessor(profiles=[SIGNPOSTING_PROFILE])
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(processor.process, [SIGNPOSTING_HEADER] * 16))
    assert all(result == results[0] for result in results)


def test_results_are_immutable():
    result = process("<https://a/>; rel=self")
    with pytest.raises(Exception):
        result.links = ()
    assert isinstance(result.links, tuple)
    assert isinstance(result.report.issues, tuple)


class _UnlocatedNoteRule:
    name = "unlocated-note"

    def check(self, link, index):
        return [Issue.warning(IssueCode.DUPLICATE_PARAMETER, "header-wide note")]


def test_custom_rule_issue_without_index_gets_link_index():
    profile = RuleProfile(name="notes", rules=(_UnlocatedNoteRule(),))
    result = WebLinkProcessor(profiles=[profile]).process("<https://a/>; rel=self, <https://b/>; rel=x")
    assert [(i.message, i.link_index) for i in result.report.issues] == [
        ("header-wide note", 0),
        ("header-wide note", 1),
    ]
    assert not result.contains_issues()
