"""Configuration management for kakeibo."""

from dataclasses import dataclass, field
from pathlib import Path

from kakeibo.exceptions import ConfigurationError


@dataclass
class StorageConfig:
    """JSON snapshot storage configuration."""

    data_dir: Path = field(default_factory=lambda: Path("data"))
    pretty_json: bool = False


@dataclass
class ScheduleConfig:
    """Obligation schedule configuration."""

    upcoming_days: int = 31


@dataclass
class ScenarioConfig:
    """Configuration for synthetic household generation."""

    name: str = "household"
    num_accounts: int = 3
    num_cards: int = 2
    transactions_per_card: int = 20
    num_recurring: int = 6
    num_savings_goals: int = 2
    history_days: int = 90


@dataclass
class KakeiboConfig:
    """Main configuration for kakeibo."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    scenario: ScenarioConfig | None = None
    seed: int | None = None
    log_level: str = "INFO"
    locale: str = "ja_JP"

    @classmethod
    def from_env(cls) -> "KakeiboConfig":
        """Create config from environment variables."""
        import os

        storage = StorageConfig(
            data_dir=Path(os.getenv("KAKEIBO_DATA_DIR", "data")),
            pretty_json=os.getenv("KAKEIBO_PRETTY_JSON", "false").lower() == "true",
        )

        schedule = ScheduleConfig(
            upcoming_days=_env_int("KAKEIBO_UPCOMING_DAYS", 31),
        )

        seed = os.getenv("KAKEIBO_SEED")

        return cls(
            storage=storage,
            schedule=schedule,
            seed=_env_int("KAKEIBO_SEED", 0) if seed else None,
            log_level=os.getenv("KAKEIBO_LOG_LEVEL", "INFO"),
            locale=os.getenv("KAKEIBO_LOCALE", "ja_JP"),
        )


def _env_int(name: str, default: int) -> int:
    import os

    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
