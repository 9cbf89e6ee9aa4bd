from __future__ import annotations

from lecture_ai.core.settings import Settings


def test_blank_generation_timeout_means_no_limit(monkeypatch) -> None:
    monkeypatch.setenv("GENERATION_TIMEOUT_S", "")
    assert Settings().generation_timeout_s is None


def test_generation_timeout_read_from_env(monkeypatch) -> None:
    monkeypatch.setenv("GENERATION_TIMEOUT_S", "12.5")
    assert Settings().generation_timeout_s == 12.5
