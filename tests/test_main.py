"""Tests for main module."""

import pytest

from generator_steps.main import add_after_suspend, main, recover_with_sentinel
from generator_steps.driver import StepDriver
from generator_steps.models import StepResult


@pytest.fixture(autouse=True)
def fast_env(monkeypatch):
    monkeypatch.setenv("FETCH_LATENCY_SECONDS", "0")
    monkeypatch.setenv("FIBONACCI_COUNT", "2")
    monkeypatch.delenv("SIMULATE_FETCH_FAILURE", raising=False)
    monkeypatch.delenv("FIBONACCI_LIMIT", raising=False)


def test_main_succeeds(capsys):
    """Test the full demonstration run."""
    assert main() == 0
    assert "EXECUTION SUMMARY" in capsys.readouterr().out


def test_main_with_fetch_failure(monkeypatch):
    """Test the demonstration recovering from a failed fetch."""
    monkeypatch.setenv("SIMULATE_FETCH_FAILURE", "true")
    assert main() == 0


def test_main_reports_invalid_config(monkeypatch):
    """Test that configuration errors give a non-zero exit code."""
    monkeypatch.setenv("FIBONACCI_LIMIT", "0")
    assert main() == 1


def test_recover_with_sentinel():
    """Test the recovery scenario computation."""
    driver = StepDriver(recover_with_sentinel())
    assert driver.start() == StepResult.pending(0)
    assert driver.fail(ValueError("rejected")) == StepResult.pending(-1)


def test_add_after_suspend():
    """Test the resume scenario computation."""
    driver = StepDriver(add_after_suspend())
    assert driver.start() == StepResult.pending(10)
    assert driver.resume(5) == StepResult.complete(15)
