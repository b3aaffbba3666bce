"""Pytest configuration and fixtures.

Provides environment isolation for the dev-validation flag and the
hypothesis settings profile shared by property tests.
"""

from __future__ import annotations

from hypothesis import HealthCheck, settings
import pytest

# The autouse env fixture is function-scoped; property tests never touch the env.
settings.register_profile(
    "okerr",
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("okerr")

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_validate_env(request, monkeypatch):
    """Run every test with ``OKERR_VALIDATE`` unset.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    monkeypatch.delenv("OKERR_VALIDATE", raising=False)


@pytest.fixture
def validate_enabled(monkeypatch):
    """Turn on dev-time validation for the duration of a test."""
    monkeypatch.setenv("OKERR_VALIDATE", "1")


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "allow_env_pollution: keep OKERR_* variables from the host"
    )
