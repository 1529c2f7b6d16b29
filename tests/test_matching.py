"""Unit tests for the matching engine.

Tests NoticeMatcher for:
- Each clause in isolation (region, agency, classification, grade, year,
  month range, status, title, include and exclude keywords)
- Vacuous truth of empty criteria
- Keyword monotonicity
- evaluate() explanations agreeing with matches()
- Order preservation in filter()
"""

import pytest

from bidwatch.config.models import (
    IncludeMode,
    SearchCriteria,
    StatusFilter,
    TitleMatchMode,
    default_criteria,
)
from bidwatch.domain.constants import NATIONWIDE
from bidwatch.matching import (
    MatchClause,
    MatchResult,
    NoticeMatcher,
    build_notice_payload,
    build_rationale_dict,
    filter_notices,
    matches,
)
from bidwatch.normalization import CriteriaNormalizer


@pytest.fixture
def matcher():
    """Create a NoticeMatcher instance."""
    return NoticeMatcher()


def ids(notices):
    return [notice.id for notice in notices]


class TestIdentityCriteria:
    """An unconstrained search matches everything."""

    def test_empty_criteria_matches_every_notice(self, matcher, sample_notices):
        assert all(matcher.matches(notice, SearchCriteria()) for notice in sample_notices)

    def test_all_grades_selected_matches_every_notice(self, matcher, sample_notices):
        criteria = SearchCriteria(grades=["A", "B", "C", "D"], status=StatusFilter.ALL)
        assert ids(matcher.filter(sample_notices, criteria)) == ["EX-001", "EX-002", "EX-003"]

    def test_cleared_form_without_year_matches_everything(self, matcher, make_notice):
        criteria = default_criteria().model_copy(update={"year": ""})
        notices = [make_notice(id="a", published_date="2019-01-01"), make_notice(id="b")]
        assert ids(matcher.filter(notices, criteria)) == ["a", "b"]


class TestRegionClause:
    """Tests for the region clause."""

    def test_exact_region_matches(self, matcher, make_notice):
        notice = make_notice(region="東京都")
        assert matcher.matches(notice, SearchCriteria(region="東京都"))

    def test_other_region_fails(self, matcher, make_notice):
        notice = make_notice(region="東京都")
        assert not matcher.matches(notice, SearchCriteria(region="広島県"))

    def test_region_is_not_substring_match(self, matcher, make_notice):
        notice = make_notice(region="京都府")
        assert not matcher.matches(notice, SearchCriteria(region="京都"))

    @pytest.mark.parametrize("region", ["東京都", "広島県", "沖縄県", "どこか"])
    def test_nationwide_notice_matches_any_region(self, matcher, make_notice, region):
        notice = make_notice(region=NATIONWIDE)
        assert matcher.matches(notice, SearchCriteria(region=region))

    def test_region_filter_keeps_nationwide_samples(self, matcher, sample_notices):
        result = matcher.filter(sample_notices, SearchCriteria(region="東京都"))
        assert ids(result) == ["EX-001", "EX-003"]


class TestAgencyClause:
    """Tests for the agency substring clause."""

    def test_substring_matches(self, matcher, sample_notices):
        result = matcher.filter(sample_notices, SearchCriteria(agency="広島"))
        assert ids(result) == ["EX-002"]

    def test_agency_is_case_sensitive(self, matcher, make_notice):
        notice = make_notice(agency="JICA")
        assert matcher.matches(notice, SearchCriteria(agency="JICA"))
        assert not matcher.matches(notice, SearchCriteria(agency="jica"))


class TestClassificationClause:
    """Tests for the classification clause."""

    def test_exact_classification(self, matcher, make_notice):
        notice = make_notice(classification="工事")
        assert matcher.matches(notice, SearchCriteria(classification="工事"))
        assert not matcher.matches(notice, SearchCriteria(classification="役務"))


class TestGradeClause:
    """Tests for grade set intersection."""

    def test_empty_selection_never_excludes(self, matcher, sample_notices):
        assert len(matcher.filter(sample_notices, SearchCriteria(grades=[]))) == 3

    def test_any_shared_grade_matches(self, matcher, make_notice):
        notice = make_notice(grades=["B", "C"])
        assert matcher.matches(notice, SearchCriteria(grades=["A", "C"]))

    def test_disjoint_selection_excludes(self, matcher, make_notice):
        notice = make_notice(grades=["B", "C"])
        assert not matcher.matches(notice, SearchCriteria(grades=["A", "D"]))

    def test_grade_a_only_drops_notice_without_a(self, matcher, sample_notices):
        result = matcher.filter(sample_notices, SearchCriteria(grades=["A"]))
        assert ids(result) == ["EX-001", "EX-003"]


class TestPublicationPeriod:
    """Tests for the year and month range clauses."""

    def test_year_matches_prefix(self, matcher, make_notice):
        notice = make_notice(published_date="2024-03-01")
        assert matcher.matches(notice, SearchCriteria(year="2024"))
        assert not matcher.matches(notice, SearchCriteria(year="2025"))

    def test_month_from_is_inclusive(self, matcher, make_notice):
        notice = make_notice(published_date="2025-09-01")
        assert matcher.matches(notice, SearchCriteria(month_from="09"))
        assert not matcher.matches(notice, SearchCriteria(month_from="10"))

    def test_month_to_is_inclusive(self, matcher, make_notice):
        notice = make_notice(published_date="2025-10-31")
        assert matcher.matches(notice, SearchCriteria(month_to="10"))
        assert not matcher.matches(notice, SearchCriteria(month_to="09"))

    def test_month_to_alone_bounds_above(self, matcher, make_notice):
        """The upper bound applies without a lower bound."""
        notice = make_notice(published_date="2025-12-01")
        assert not matcher.matches(notice, SearchCriteria(month_to="11"))

    def test_month_range_compares_numerically(self, matcher, make_notice):
        """Zero padding keeps 02 below 10."""
        notice = make_notice(published_date="2025-02-15")
        assert matcher.matches(notice, SearchCriteria(month_from="01", month_to="10"))
        assert not matcher.matches(notice, SearchCriteria(month_from="10"))

    def test_inverted_range_matches_nothing(self, matcher, sample_notices):
        criteria = SearchCriteria(month_from="11", month_to="02")
        assert matcher.filter(sample_notices, criteria) == []


class TestStatusClause:
    """Tests for the status clause."""

    def test_open_only(self, matcher, sample_notices):
        result = matcher.filter(sample_notices, SearchCriteria(status=StatusFilter.OPEN))
        assert ids(result) == ["EX-001", "EX-002"]

    def test_closed_only(self, matcher, sample_notices):
        result = matcher.filter(sample_notices, SearchCriteria(status="closed"))
        assert ids(result) == ["EX-003"]


class TestTitleClause:
    """Tests for partial and exact title matching."""

    def test_exact_matches_only_identical_title(self, matcher, sample_notices):
        criteria = SearchCriteria(
            title="データ入力業務 一式", title_match_mode=TitleMatchMode.EXACT
        )
        assert ids(matcher.filter(sample_notices, criteria)) == ["EX-001"]

    def test_exact_rejects_substring(self, matcher, sample_notices):
        criteria = SearchCriteria(title="データ", title_match_mode=TitleMatchMode.EXACT)
        assert matcher.filter(sample_notices, criteria) == []

    def test_partial_matches_substring(self, matcher, sample_notices):
        criteria = SearchCriteria(title="データ", title_match_mode=TitleMatchMode.PARTIAL)
        assert ids(matcher.filter(sample_notices, criteria)) == ["EX-001"]

    def test_partial_is_default(self, matcher, sample_notices):
        assert ids(matcher.filter(sample_notices, SearchCriteria(title="業務"))) == [
            "EX-001",
            "EX-003",
        ]


class TestIncludeKeywords:
    """Tests for include keyword modes."""

    def test_all_mode_requires_every_token(self, matcher, sample_notices):
        criteria = SearchCriteria(include_keywords="データ 総務省", include_mode=IncludeMode.ALL)
        assert ids(matcher.filter(sample_notices, criteria)) == ["EX-001"]

        criteria = SearchCriteria(include_keywords="データ 広島", include_mode=IncludeMode.ALL)
        assert matcher.filter(sample_notices, criteria) == []

    def test_any_mode_requires_one_token(self, matcher, sample_notices):
        criteria = SearchCriteria(include_keywords="データ 広島", include_mode=IncludeMode.ANY)
        assert ids(matcher.filter(sample_notices, criteria)) == ["EX-001", "EX-002"]

    def test_keywords_search_agency_too(self, matcher, sample_notices):
        criteria = SearchCriteria(include_keywords="某独法", include_mode=IncludeMode.ANY)
        assert ids(matcher.filter(sample_notices, criteria)) == ["EX-003"]

    def test_exclude_only_ignores_include_tokens(self, matcher, sample_notices):
        criteria = SearchCriteria(
            include_keywords="存在しない語", include_mode=IncludeMode.EXCLUDE_ONLY
        )
        assert len(matcher.filter(sample_notices, criteria)) == 3

    def test_token_may_span_title_agency_separator(self, matcher, make_notice):
        """The haystack is title + ' ' + agency, searched as one string."""
        notice = make_notice(title="清掃 業務", agency="横浜市")
        criteria = SearchCriteria(include_keywords="業務", include_mode=IncludeMode.ALL)
        assert matcher.matches(notice, criteria)
        # A single token cannot contain whitespace, but the joined text is literal
        assert "業務 横浜市" in notice.searchable_text

    def test_keywords_are_case_sensitive(self, matcher, sample_notices):
        criteria = SearchCriteria(include_keywords="web", include_mode=IncludeMode.ANY)
        assert matcher.filter(sample_notices, criteria) == []


class TestExcludeKeywords:
    """Tests for exclude keywords."""

    def test_exclude_drops_matching_notice(self, matcher, sample_notices):
        criteria = SearchCriteria(exclude_keywords="電子化")
        assert ids(matcher.filter(sample_notices, criteria)) == ["EX-001", "EX-003"]

    def test_exclude_checks_agency(self, matcher, sample_notices):
        criteria = SearchCriteria(exclude_keywords="総務省")
        assert ids(matcher.filter(sample_notices, criteria)) == ["EX-002", "EX-003"]

    def test_exclude_applies_in_exclude_only_mode(self, matcher, sample_notices):
        criteria = SearchCriteria(
            include_keywords="データ",
            include_mode=IncludeMode.EXCLUDE_ONLY,
            exclude_keywords="Web",
        )
        assert ids(matcher.filter(sample_notices, criteria)) == ["EX-001", "EX-002"]

    def test_exclude_wins_over_include(self, matcher, sample_notices):
        criteria = SearchCriteria(
            include_keywords="データ", include_mode=IncludeMode.ANY, exclude_keywords="一式"
        )
        assert matcher.filter(sample_notices, criteria) == []


class TestKeywordMonotonicity:
    """Adding keywords moves the result set in a fixed direction."""

    @pytest.mark.parametrize("extra", ["業務", "電子化", "総務省", "無関係"])
    def test_adding_exclude_token_never_grows(self, matcher, sample_notices, extra):
        before = matcher.filter(sample_notices, SearchCriteria(exclude_keywords="保守"))
        after = matcher.filter(sample_notices, SearchCriteria(exclude_keywords=f"保守 {extra}"))
        assert set(ids(after)) <= set(ids(before))

    @pytest.mark.parametrize("extra", ["業務", "電子化", "総務省", "無関係"])
    def test_adding_any_token_never_shrinks(self, matcher, sample_notices, extra):
        base = SearchCriteria(include_keywords="データ", include_mode=IncludeMode.ANY)
        grown = base.model_copy(update={"include_keywords": f"データ {extra}"})
        assert set(ids(matcher.filter(sample_notices, base))) <= set(
            ids(matcher.filter(sample_notices, grown))
        )

    @pytest.mark.parametrize("extra", ["業務", "電子化", "総務省", "無関係"])
    def test_adding_all_token_never_grows(self, matcher, sample_notices, extra):
        base = SearchCriteria(include_keywords="業務", include_mode=IncludeMode.ALL)
        narrowed = base.model_copy(update={"include_keywords": f"業務 {extra}"})
        assert set(ids(matcher.filter(sample_notices, narrowed))) <= set(
            ids(matcher.filter(sample_notices, base))
        )


class TestEvaluate:
    """Tests for per-notice explanations."""

    def test_reports_every_failed_clause(self, matcher, sample_notices):
        criteria = SearchCriteria(
            region="北海道", status=StatusFilter.OPEN, exclude_keywords="某独法"
        )
        ex003 = sample_notices[2]

        result = matcher.evaluate(ex003, criteria)

        assert isinstance(result, MatchResult)
        assert result.notice_id == "EX-003"
        assert result.is_match is False
        # Nationwide notice passes the region clause
        assert result.failed_clauses == [MatchClause.STATUS, MatchClause.EXCLUDE_KEYWORDS]
        assert result.matched_exclude_tokens == ["某独法"]
        assert result.reason == "status, exclude_keywords"

    def test_matching_notice_records_include_tokens(self, matcher, sample_notices):
        criteria = SearchCriteria(include_keywords="電子化 データ", include_mode=IncludeMode.ANY)

        result = matcher.evaluate(sample_notices[1], criteria)

        assert result.is_match is True
        assert result.failed_clauses == []
        assert result.matched_include_tokens == ["電子化"]
        assert result.reason == "matched"

    @pytest.mark.parametrize(
        "criteria",
        [
            SearchCriteria(),
            SearchCriteria(region="広島県", grades=["A"]),
            SearchCriteria(year="2025", month_from="09", month_to="10"),
            SearchCriteria(title="一式", title_match_mode=TitleMatchMode.EXACT),
            SearchCriteria(include_keywords="業務 保守", include_mode=IncludeMode.ALL),
            SearchCriteria(exclude_keywords="広島", status=StatusFilter.CLOSED),
        ],
    )
    def test_evaluate_agrees_with_matches(self, matcher, sample_notices, criteria):
        for notice in sample_notices:
            assert matcher.evaluate(notice, criteria).is_match == matcher.matches(notice, criteria)


class TestFilter:
    """Tests for collection filtering."""

    def test_preserves_input_order(self, matcher, sample_notices):
        reversed_notices = list(reversed(sample_notices))
        result = matcher.filter(reversed_notices, SearchCriteria())
        assert ids(result) == ["EX-003", "EX-002", "EX-001"]

    def test_does_not_deduplicate(self, matcher, sample_notices):
        doubled = sample_notices + sample_notices
        assert len(matcher.filter(doubled, SearchCriteria())) == 6

    def test_accepts_normalized_criteria(self, matcher, sample_notices):
        normalized = CriteriaNormalizer().normalize(SearchCriteria(exclude_keywords="電子化"))
        assert ids(matcher.filter(sample_notices, normalized)) == ["EX-001", "EX-003"]

    def test_inputs_are_not_mutated(self, matcher, sample_notices):
        criteria = SearchCriteria(include_keywords="データ", grades=["A"])
        snapshot = [notice.model_dump() for notice in sample_notices]

        matcher.filter(sample_notices, criteria)

        assert [notice.model_dump() for notice in sample_notices] == snapshot
        assert criteria.include_keywords == "データ"
        assert criteria.grades == frozenset({"A"})

    def test_module_level_shortcuts(self, sample_notices):
        criteria = SearchCriteria(status="open")
        assert matches(sample_notices[0], criteria) is True
        assert ids(filter_notices(sample_notices, criteria)) == ["EX-001", "EX-002"]


class TestPayloads:
    """Tests for payload helpers."""

    def test_build_notice_payload(self, sample_notices):
        payload = build_notice_payload(sample_notices[0])

        assert payload["id"] == "EX-001"
        assert payload["grades"] == ["A", "B", "C", "D"]
        assert payload["published_date"] == "2025-10-18"
        assert payload["deadline"] == "2025-10-25 17:00"
        assert payload["status"] == "open"
        assert payload["url"] == "https://example.gov/ex-001"

    def test_build_rationale_dict(self, matcher, sample_notices):
        result = matcher.evaluate(sample_notices[0], SearchCriteria(status="closed"))

        rationale = build_rationale_dict(result)

        assert rationale == {
            "notice_id": "EX-001",
            "is_match": False,
            "failed_clauses": ["status"],
            "matched_include_tokens": [],
            "matched_exclude_tokens": [],
            "reason": "status",
        }
