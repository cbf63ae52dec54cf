"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks ASTCALC_.
"""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # CLI: ile punktów wykresu pokazać w tabeli
    plot_preview_rows: int = 20

    # CLI: domyślny plik JSON z podstawieniami zmiennych {"x": <Node>, ...}
    bindings_file: Optional[str] = None

    # App
    app_title: str = "AstCalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="ASTCALC_", env_file=".env", extra="ignore")
