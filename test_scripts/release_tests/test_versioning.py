# Tests for next-version suggestion
from __future__ import annotations

import pytest

from prioritykit.schemas.enums import ChangeType
from prioritykit.services.versioning import (
    coerce_change_type,
    is_increase,
    is_well_formed,
    next_version,
    parse_version,
)


@pytest.mark.parametrize(
    "current,change_type,expected",
    [
        ("1.0.0", "MAJOR", "2.0.0"),
        ("1.2.3", "MINOR", "1.3.0"),
        ("1.2.3", "PATCH", "1.2.4"),
        ("1.2.3", "HOTFIX", "1.2.4"),
        ("1.2.3", ChangeType.MAJOR, "2.0.0"),
        ("9.99.999", "PATCH", "9.99.1000"),
    ],
)
def test_transition_table(current, change_type, expected):
    assert next_version(current, change_type) == expected


@pytest.mark.parametrize("change_type", ["BOGUS", "", None, "feature"])
def test_unknown_change_type_bumps_minor(change_type):
    assert next_version("1.2.3", change_type) == "1.3.0"


@pytest.mark.parametrize("change_type", ["major", "Patch", " HOTFIX", "MAJOR "])
def test_change_type_must_match_exactly(change_type):
    assert next_version("1.2.3", change_type) == "1.3.0"


def test_malformed_middle_component_defaults_to_zero():
    assert next_version("1.x.3", "PATCH") == "1.0.4"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1.2.3", (1, 2, 3)),
        ("", (0, 0, 0)),
        ("7", (7, 0, 0)),
        ("1.2", (1, 2, 0)),
        ("1.2.3.4", (1, 2, 3)),
        ("v1.2.3", (0, 2, 3)),
        ("1.2.3-beta", (1, 2, 3)),
        (" 4.5.6", (4, 5, 6)),
        ("01.002.3", (1, 2, 3)),
        (None, (0, 0, 0)),
    ],
)
def test_parse_version_is_lenient(raw, expected):
    assert tuple(parse_version(raw)) == expected


@pytest.mark.parametrize("change_type", list(ChangeType) + ["nonsense", None])
def test_zero_version_never_raises(change_type):
    assert isinstance(next_version("0.0.0", change_type), str)


@pytest.mark.parametrize(
    "garbage",
    ["...", "a.b.c", "--", "1..", "🙂", "1.2." + "9" * 5000, "9" * 4300 + ".0.0", "-" + "1" * 4500],
)
def test_garbage_never_raises(garbage):
    assert next_version(garbage, "PATCH").count(".") == 2


def test_oversized_component_reads_as_zero():
    assert next_version("1.2." + "9" * 5000, "PATCH") == "1.2.1"


def test_long_component_still_increments():
    assert next_version("1.2." + "9" * 50, "PATCH") == "1.2.1" + "0" * 50


@pytest.mark.parametrize("raw", ["١.2.3", "１.2.3"])
def test_non_ascii_digits_are_not_numbers(raw):
    assert tuple(parse_version(raw)) == (0, 2, 3)
    assert next_version(raw, "PATCH") == "0.2.4"
    assert not is_well_formed("1.2.٣")


def test_is_well_formed():
    assert is_well_formed("1.2.3")
    assert not is_well_formed("1.x.3")
    assert not is_well_formed("1.2")
    assert not is_well_formed("")
    assert not is_well_formed(None)


def test_coerce_change_type_fallback():
    assert coerce_change_type("HOTFIX") == ChangeType.HOTFIX
    assert coerce_change_type("hotfix") == ChangeType.MINOR
    assert coerce_change_type("unknown") == ChangeType.MINOR


def test_is_increase():
    assert is_increase("1.2.3", "1.3.0")
    assert not is_increase("1.2.3", "1.2.3")
    assert not is_increase("2.0.0", "1.9.9")
