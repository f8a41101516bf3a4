import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class Settings(BaseModel):
    # Detector Configuration
    detector_config_path: str | None = Field(
        default=None, alias="NEWSWATCH_DETECTOR_CONFIG"
    )

    # Correlation Engine
    correlation_history_minutes: int = Field(
        default=60, alias="CORRELATION_HISTORY_MINUTES"
    )
    correlation_momentum_window: int = Field(
        default=10, alias="CORRELATION_MOMENTUM_WINDOW"
    )
    correlation_velocity_window: int = Field(
        default=15, alias="CORRELATION_VELOCITY_WINDOW"
    )
    correlation_max_headlines: int = Field(
        default=8, alias="CORRELATION_MAX_HEADLINES"
    )

    # Narrative Tracker
    narrative_history_minutes: int = Field(
        default=120, alias="NARRATIVE_HISTORY_MINUTES"
    )
    narrative_velocity_window: int = Field(
        default=30, alias="NARRATIVE_VELOCITY_WINDOW"
    )
    narrative_max_headlines: int = Field(default=5, alias="NARRATIVE_MAX_HEADLINES")
    narrative_max_sources: int = Field(default=5, alias="NARRATIVE_MAX_SOURCES")

    # Entity Ranker
    mention_history_minutes: int = Field(default=30, alias="MENTION_HISTORY_MINUTES")
    mention_max_samples: int = Field(default=5, alias="MENTION_MAX_SAMPLES")
    max_characters: int = Field(default=15, alias="MAX_CHARACTERS")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


global_settings = Settings.model_validate(dict(os.environ))
