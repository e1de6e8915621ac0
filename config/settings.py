"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    # Persistence
    DATA_FILE: str = os.getenv("DATA_FILE", "readings.csv")

    # "contamination" (pH + pollutants) or "hydrological" (level + turbidity)
    READING_SCHEMA: str = os.getenv("READING_SCHEMA", "contamination")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()


settings = Settings()
