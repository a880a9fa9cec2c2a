from __future__ import annotations

import pytest

from sprint_planner.config import get_settings


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults() -> None:
    settings = get_settings()

    assert settings.default_sprint_length == 7
    assert settings.credit_multiplier == 1.5
    assert settings.confidence_multiplier == 2.0
    assert settings.default_confidence == 3
    assert settings.high_focus_confidence_threshold == 2
    assert settings.crucial_credit_threshold == 4


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("SPRINT_PLANNER_SPRINT_LENGTH", "14")
    monkeypatch.setenv("SPRINT_PLANNER_CONFIDENCE_MULTIPLIER", "3.0")
    monkeypatch.setenv("SPRINT_PLANNER_PREFERRED_TIME", "Morning")

    settings = get_settings()

    assert settings.default_sprint_length == 14
    assert settings.confidence_multiplier == 3.0
    assert settings.default_preferred_time == "Morning"


def test_invalid_configuration_raises_runtime_error(monkeypatch) -> None:
    monkeypatch.setenv("SPRINT_PLANNER_SPRINT_LENGTH", "0")

    with pytest.raises(RuntimeError, match="Invalid sprint planner configuration"):
        get_settings()
