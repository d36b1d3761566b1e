# meditrack/core/config.py
from __future__ import annotations

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_TITLE: str = "MediTrack Diario Pro"
    APP_TAGLINE: str = (
        "Tu diario digital profesional, confidencial y organizado "
        "para la práctica médica moderna."
    )

    # Service account JSON used by firebase_admin
    FIREBASE_CREDENTIALS: str = "meditrack/core/firebase_key.json"
    FIREBASE_PROJECT_ID: str = ""

    # Vite dev server origins of the web frontend
    CORS_ORIGINS: List[str] = [
        "http://127.0.0.1:5173",
        "http://localhost:5173",
    ]

    LOG_LEVEL: str = "INFO"
    AI_DEBUG_MODE: bool = False

    DEFAULT_DURATION_MINUTES: int = 20
    DEFAULT_CATEGORY: str = "General"
    DASHBOARD_WINDOW_DAYS: int = 7

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
