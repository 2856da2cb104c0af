"""Tests for non-raising validation of raw openings and exceptions."""

from __future__ import annotations

import pytest

from conftest import load_scenarios, schedule_data
from openings.schema import validate_exceptions, validate_openings

_invalid = load_scenarios("invalid")


class TestValidSchedules:

    @pytest.mark.parametrize(
        "name", ["empty", "standard", "holiday", "late", "mixed_exceptions"]
    )
    def test_fixture_schedules_valid(self, name):
        data = schedule_data(name)
        assert validate_openings(data["openings"]) == []
        assert validate_exceptions(data["exceptions"]) == []


class TestOpeningsValidation:

    @pytest.mark.parametrize("key", ["Tes", "Abf", "01", "123", "0", "Mon,Funday"])
    def test_bad_atomic_keys_reported(self, key):
        """Stricter than normalisation: every atom is checked."""
        errors = validate_openings({key: ["10:00-20:00"]})
        assert len(errors) == 1
        assert repr(key) in errors[0]

    @pytest.mark.parametrize("spec", _invalid["weekday_keys"], ids=lambda s: s["id"])
    def test_bad_ranges_reported(self, spec):
        assert validate_openings({spec["key"]: "10:00-12:00"}) != []

    @pytest.mark.parametrize("spec", _invalid["times"], ids=lambda s: s["id"])
    def test_bad_times_reported(self, spec):
        errors = validate_openings({"Mon": spec["times"]})
        assert len(errors) == 1
        assert "HH:MM-HH:MM" in errors[0]

    def test_collects_every_error(self):
        errors = validate_openings({
            "Mon-Xyz": "10:00-12:00",
            "Tue": ["a-b", "13:00", "10:00-11:00"],
        })
        assert len(errors) == 3

    def test_non_string_time(self):
        errors = validate_openings({"Mon": [1000]})
        assert errors == [
            "Key 'Mon', time 0: expected a string, got 1000 (expected HH:MM-HH:MM)"
        ]

    def test_wrong_times_container(self):
        errors = validate_openings({"Mon": {"from": "10:00"}})
        assert "must be a string or a list" in errors[0]

    def test_not_a_mapping(self):
        errors = validate_openings(["Mon"])
        assert errors == ["weekday schedule must be an object, got list"]


class TestExceptionsValidation:

    @pytest.mark.parametrize(
        "key",
        ["17/01/01", "01/01/2017", "2017/01", "wrong", "a/b/c", "aa/bb/cc"],
    )
    def test_bad_dates_reported(self, key):
        errors = validate_exceptions({key: ["10:00-20:00"]})
        assert len(errors) == 1
        assert "YYYY/MM/DD" in errors[0]

    @pytest.mark.parametrize("spec", _invalid["date_keys"], ids=lambda s: s["id"])
    def test_bad_ranges_reported(self, spec):
        assert validate_exceptions({spec["key"]: []}) != []

    def test_list_atoms_checked(self):
        errors = validate_exceptions({"2017/08/01,2017/8/1x": []})
        assert len(errors) == 1
        assert "'2017/8/1x'" in errors[0]

    def test_null_times_valid(self):
        assert validate_exceptions({"2019/12/24": None}) == []
