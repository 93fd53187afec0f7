"""
Engine configuration.

Controls draft class sizing, default randomness and the API server.
All settings can be overridden via environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from bullpen.core.rng import RandomSource, SeededRandomSource, SystemRandomSource


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


@dataclass
class EngineConfig:
    """Runtime configuration for the simulation engine."""

    # Draft settings
    draft_class_size: int = field(
        default_factory=lambda: _env_int("BULLPEN_DRAFT_CLASS_SIZE", 800)
    )
    draft_teams: int = field(default_factory=lambda: _env_int("BULLPEN_DRAFT_TEAMS", 20))
    draft_rounds: int = field(default_factory=lambda: _env_int("BULLPEN_DRAFT_ROUNDS", 40))

    # Fixed seed makes every engine call reproducible; None = system entropy
    seed: Optional[int] = field(default_factory=lambda: _env_int("BULLPEN_SEED", None))

    log_level: str = field(default_factory=lambda: os.getenv("BULLPEN_LOG_LEVEL", "INFO"))

    # API server
    api_host: str = field(default_factory=lambda: os.getenv("BULLPEN_API_HOST", "127.0.0.1"))
    api_port: int = field(default_factory=lambda: _env_int("BULLPEN_API_PORT", 8000))

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.draft_class_size < 0:
            errors.append("BULLPEN_DRAFT_CLASS_SIZE must be >= 0")
        if self.draft_teams < 2:
            errors.append("BULLPEN_DRAFT_TEAMS must be >= 2")
        if self.draft_rounds < 1:
            errors.append("BULLPEN_DRAFT_ROUNDS must be >= 1")
        if logging.getLevelName(self.log_level.upper()) == f"Level {self.log_level.upper()}":
            errors.append(f"Unknown BULLPEN_LOG_LEVEL: {self.log_level}")
        return errors


# Singleton config instance
_config: Optional[EngineConfig] = None


def get_config() -> EngineConfig:
    """Get the global engine configuration."""
    global _config
    if _config is None:
        _config = EngineConfig.from_env()
    return _config


def set_config(config: Optional[EngineConfig]) -> None:
    """
    Replace the global configuration.

    Passing None resets to environment defaults on next access.
    """
    global _config
    _config = config


def make_random_source(seed: Optional[int] = None) -> RandomSource:
    """
    Build a random source for one engine call.

    Args:
        seed: Explicit seed; falls back to the configured seed

    Returns:
        Seeded source when any seed is known, otherwise system entropy
    """
    if seed is None:
        seed = get_config().seed
    if seed is None:
        return SystemRandomSource()
    return SeededRandomSource(seed)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for CLI and API entry points."""
    logging.basicConfig(
        level=(level or get_config().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
