"""Configuration management for the application."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class FetchConfig:
    """Fake server configuration parameters."""

    latency_seconds: float = 0.1
    subject: str = "generators"
    faker_seed: int = 42

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.latency_seconds < 0:
            raise ValueError("latency_seconds must not be negative")

    @classmethod
    def from_env(cls) -> "FetchConfig":
        """Load fake server configuration from environment variables."""
        return cls(
            latency_seconds=float(os.getenv("FETCH_LATENCY_SECONDS", "0.1")),
            subject=os.getenv("FETCH_SUBJECT", "generators"),
            faker_seed=int(os.getenv("FAKER_SEED", "42")),
        )


@dataclass
class DemoConfig:
    """Demonstration harness configuration parameters."""

    fibonacci_limit: int = 50
    fibonacci_count: int = 10
    simulate_fetch_failure: bool = False
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.fibonacci_limit <= 0:
            raise ValueError("fibonacci_limit must be positive")
        if self.fibonacci_count <= 0:
            raise ValueError("fibonacci_count must be positive")

    @classmethod
    def from_env(cls) -> "DemoConfig":
        """Load demonstration configuration from environment variables."""
        return cls(
            fibonacci_limit=int(os.getenv("FIBONACCI_LIMIT", "50")),
            fibonacci_count=int(os.getenv("FIBONACCI_COUNT", "10")),
            simulate_fetch_failure=_env_flag("SIMULATE_FETCH_FAILURE"),
            verbose=_env_flag("VERBOSE"),
        )


def get_fetch_config() -> FetchConfig:
    """Get fake server configuration."""
    return FetchConfig.from_env()


def get_demo_config() -> DemoConfig:
    """Get demonstration configuration."""
    return DemoConfig.from_env()
