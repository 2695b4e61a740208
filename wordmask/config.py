from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path
from typing import Literal

class Settings(BaseSettings):
    # Logging
    log_level: str = Field(default="INFO", alias="WM_LOG_LEVEL")

    # SQLite (listas de palabras y modo por cliente)
    db_path: str = Field(default=".local/wordmask.sqlite", alias="WM_DB_PATH")

    # Saneado de listas de palabras
    max_words: int = Field(default=500, alias="WM_MAX_WORDS")
    max_word_length: int = Field(default=256, alias="WM_MAX_WORD_LENGTH")

    # asterisks | field_numbers
    default_mode: Literal["asterisks", "field_numbers"] = Field(default="asterisks", alias="WM_DEFAULT_MODE")

    # API
    max_text_length: int = Field(default=200_000, alias="WM_MAX_TEXT_LENGTH")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

settings = Settings()

# Crea el directorio de la base de datos si no existe
Path(settings.db_path).parent.mkdir(parents=True, exist_ok=True)
