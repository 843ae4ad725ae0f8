"""
Load-test configuration module.

This module defines configuration classes for the different ways the
pull-request service load test is run (full scenario, quick smoke run,
test suite). Values are loaded from environment variables with sensible
defaults; Locust's ``--host`` option still takes precedence over
``BASE_URL``.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration: the full ramp scenario."""

    BASE_URL: str = os.environ.get("PR_SERVICE_URL", "http://172.18.0.5:8080")

    TEAM_SIZE: int = int(os.environ.get("LOADTEST_TEAM_SIZE", "100"))
    PULL_REQUEST_NAME: str = "Load Test Feature"

    # Pause between iterations of a single virtual user
    THINK_TIME_SECONDS: float = 0.1

    # (duration_seconds, target_users) ramp stages
    STAGES: tuple[tuple[float, int], ...] = (
        (10, 50),
        (30, 50),
        (10, 0),
    )

    THRESHOLDS_PATH: Path = Path(
        os.environ.get(
            "LOADTEST_THRESHOLDS",
            str(BASE_DIR / "tests" / "performance" / "thresholds.yml"),
        )
    )

    # How long to wait for /health before the run starts; 0 skips the check
    HEALTH_TIMEOUT_SECONDS: float = float(os.environ.get("LOADTEST_HEALTH_TIMEOUT", "10"))
    REQUEST_TIMEOUT_SECONDS: float = 10.0


class SmokeConfig(Config):
    """Short ramp used to sanity-check a deployment before a full run."""

    STAGES: tuple[tuple[float, int], ...] = (
        (5, 5),
        (10, 5),
        (5, 0),
    )


class TestingConfig(Config):
    """Test-suite configuration."""

    BASE_URL: str = "http://127.0.0.1:8080"
    TEAM_SIZE: int = 100
    HEALTH_TIMEOUT_SECONDS: float = 0.0
    REQUEST_TIMEOUT_SECONDS: float = 2.0

    STAGES: tuple[tuple[float, int], ...] = (
        (1, 2),
        (1, 2),
        (1, 0),
    )


# Configuration mapping for easy access
config = {
    "full": Config,
    "smoke": SmokeConfig,
    "testing": TestingConfig,
    "default": Config,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified run profile.

    Args:
        env: Profile name (full, smoke, testing).
             If None, uses the LOADTEST_ENV environment variable.

    Returns:
        Configuration class for the specified profile.

    Raises:
        ValueError: If the profile has no team members to author pull
            requests (``LOADTEST_TEAM_SIZE`` below 1).
    """
    if env is None:
        env = os.environ.get("LOADTEST_ENV", "full")
    selected = config.get(env, config["default"])
    if selected.TEAM_SIZE < 1:
        raise ValueError(f"TEAM_SIZE must be at least 1, got {selected.TEAM_SIZE}")
    return selected
