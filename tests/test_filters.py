"""Tests for the filter engine and FilterCriteria parsing."""

from __future__ import annotations

from datetime import date

import pytest

from coachlog.models import FilterCriteria
from coachlog.services.filters import apply_filters, available_microcycles


def _ids(entries) -> list:
    return [e.id for e in entries]


class TestApplyFilters:
    def test_empty_criteria_is_identity(self, entries) -> None:
        result = apply_filters(entries, FilterCriteria())
        assert result == entries
        assert result is not entries

    def test_does_not_mutate_input(self, entries) -> None:
        before = list(entries)
        apply_filters(entries, FilterCriteria(session_type="Match"))
        assert entries == before

    def test_session_type_exact_match(self, entries) -> None:
        assert _ids(apply_filters(entries, FilterCriteria(session_type="Training"))) == [1, 3]

    def test_microcycle_exact_match(self, entries) -> None:
        assert _ids(apply_filters(entries, FilterCriteria(microcycle=3))) == [3, 4]

    def test_objective_case_insensitive_on_objective1(self, make_entry) -> None:
        entry = make_entry(objective1="Improve Sprint Speed")
        assert apply_filters([entry], FilterCriteria(objective="sprint")) == [entry]

    def test_objective_matches_objective2(self, entries) -> None:
        # id 1 über objective1, id 4 über objective2
        assert _ids(apply_filters(entries, FilterCriteria(objective="SPRINT"))) == [1, 4]

    def test_objective_with_absent_objective2(self, make_entry) -> None:
        entry = make_entry(objective1="Endurance", objective2=None)
        assert apply_filters([entry], FilterCriteria(objective="press")) == []

    def test_date_range_scenario(self, entries) -> None:
        criteria = FilterCriteria(start_date=date(2024, 1, 15), end_date=date(2024, 2, 15))
        assert _ids(apply_filters(entries, criteria)) == [2]

    def test_date_bounds_are_inclusive(self, entries) -> None:
        criteria = FilterCriteria(start_date=date(2024, 3, 1), end_date=date(2024, 3, 3))
        assert _ids(apply_filters(entries, criteria)) == [3, 4]

    def test_start_date_only(self, entries) -> None:
        assert _ids(apply_filters(entries, FilterCriteria(start_date=date(2024, 3, 4)))) == [5]

    def test_dates_compare_on_calendar_value(self, make_entry) -> None:
        # "05.03.2024" ist lexikographisch nicht sortierbar
        entries = [make_entry(id=1, date="05.03.2024"), make_entry(id=2, date="2023-12-31")]
        criteria = FilterCriteria(start_date=date(2024, 1, 1))
        assert _ids(apply_filters(entries, criteria)) == [1]

    def test_unparsable_entry_date_excluded_by_date_bound(self, make_entry) -> None:
        entry = make_entry(date="someday")
        assert apply_filters([entry], FilterCriteria(end_date=date(2030, 1, 1))) == []
        assert apply_filters([entry], FilterCriteria()) == [entry]

    def test_criteria_combine_with_and(self, entries) -> None:
        criteria = FilterCriteria(session_type="Training", microcycle=3)
        assert _ids(apply_filters(entries, criteria)) == [3]

    def test_chained_filters_equal_combined(self, entries) -> None:
        c1 = FilterCriteria(microcycle=3)
        c2 = FilterCriteria(objective="sprint")
        chained = apply_filters(apply_filters(entries, c1), c2)
        combined = apply_filters(entries, FilterCriteria(microcycle=3, objective="sprint"))
        assert chained == combined == [entries[3]]

    def test_no_match_returns_empty_list(self, entries) -> None:
        assert apply_filters(entries, FilterCriteria(session_type="Yoga")) == []


class TestAvailableMicrocycles:
    def test_distinct_sorted_without_none(self, entries) -> None:
        assert available_microcycles(entries) == [1, 2, 3]

    def test_empty(self) -> None:
        assert available_microcycles([]) == []


class TestFilterCriteriaFromMapping:
    def test_reads_all_fields(self) -> None:
        criteria = FilterCriteria.from_mapping(
            {
                "sessionType": "Match",
                "microcycle": "4",
                "objective": "press",
                "startDate": "2024-01-01",
                "endDate": "2024-01-31",
            }
        )
        assert criteria == FilterCriteria(
            session_type="Match",
            microcycle=4,
            objective="press",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 31),
        )

    @pytest.mark.parametrize("value", ["", "all", "  ", "All"])
    def test_empty_and_all_mean_no_constraint(self, value) -> None:
        criteria = FilterCriteria.from_mapping({"sessionType": value, "microcycle": value})
        assert criteria.is_empty

    @pytest.mark.parametrize("value", ["all", "All", "ALL"])
    def test_all_is_a_search_term_for_objective(self, value) -> None:
        criteria = FilterCriteria.from_mapping({"objective": value})
        assert criteria.objective == value
        assert not criteria.is_empty

    def test_blank_objective_means_no_constraint(self) -> None:
        assert FilterCriteria.from_mapping({"objective": "   "}).objective is None

    def test_objective_all_matches_substring(self, make_entry) -> None:
        ball = make_entry(id=1, objective1="Ball control")
        other = make_entry(id=2, objective1="Endurance")
        criteria = FilterCriteria.from_mapping({"objective": "all"})
        assert _ids(apply_filters([ball, other], criteria)) == [1]

    def test_non_numeric_microcycle_is_ignored(self, caplog) -> None:
        criteria = FilterCriteria.from_mapping({"microcycle": "abc"})
        assert criteria.microcycle is None
        assert "non-numeric microcycle" in caplog.text

    def test_unparsable_date_bound_is_ignored(self) -> None:
        assert FilterCriteria.from_mapping({"startDate": "not a date"}).start_date is None

    def test_to_args_round_trip(self) -> None:
        args = {"sessionType": "Training", "microcycle": "2", "endDate": "2024-05-01"}
        assert FilterCriteria.from_mapping(args).to_args() == args
