import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

from rosterforge.models.matchmaking import BotConfig, MatchmakingConfig
from rosterforge.models.run import RunConfig
from rosterforge.models.snapshot import SnapshotConfig
from rosterforge.presets import (
    get_bot_preset,
    get_matchmaking_preset,
    get_run_preset,
    get_snapshot_preset,
)


class Settings(BaseSettings):
    """Process-level defaults loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="ROSTERFORGE_")

    debug: bool = False
    log_level: str = "INFO"

    # Named presets resolved through rosterforge.presets
    snapshot_preset: str = "roguelike"
    matchmaking_preset: str = "roguelike"
    bot_preset: str = "roguelike"
    run_preset: str = "roguelike"

    default_bot_deck_size: int = 12

    def snapshot_config(self) -> SnapshotConfig:
        return get_snapshot_preset(self.snapshot_preset)

    def matchmaking_config(self) -> MatchmakingConfig:
        return get_matchmaking_preset(self.matchmaking_preset)

    def bot_config(self) -> BotConfig:
        return get_bot_preset(self.bot_preset)

    def run_config(self) -> RunConfig:
        return get_run_preset(self.run_preset)


settings = Settings()


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for jobs and scripts."""
    name = (level or ("DEBUG" if settings.debug else settings.log_level)).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
