# Tests for manual priority + RICE display facets
from __future__ import annotations

import pytest

from prioritykit.config import settings
from prioritykit.schemas.enums import Priority
from prioritykit.services.priority import classify, coerce_priority


def test_classify_keeps_facets_independent():
    dp = classify(Priority.LOW, 125.0)
    assert dp.manual == Priority.LOW
    assert dp.rice == 125.0


def test_classify_unscored():
    dp = classify("HIGH", None)
    assert dp.manual == Priority.HIGH
    assert dp.rice is None
    assert dp.rice_label == "—"


@pytest.mark.parametrize("raw,expected", [("high", Priority.HIGH), (" Medium ", Priority.MEDIUM), (None, Priority.MEDIUM)])
def test_coerce_priority(raw, expected):
    assert coerce_priority(raw) == expected


def test_coerce_priority_rejects_unknown():
    with pytest.raises(ValueError):
        coerce_priority("URGENT")


def test_rice_label_uses_configured_decimals(monkeypatch):
    monkeypatch.setattr(settings, "SCORE_DISPLAY_DECIMALS", 2)
    assert classify("LOW", 1 / 3).rice_label == "0.33"


def test_display_priority_is_immutable():
    dp = classify("LOW", 1.0)
    with pytest.raises(Exception):
        dp.rice = 2.0  # type: ignore[misc]
