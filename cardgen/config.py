import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError, model_validator

from .i18n.errors import UnsupportedLanguageError

logger = logging.getLogger(__name__)


SUPPORTED_LANGUAGES: dict[str, str] = {
    "zh-CN": "简体中文",
    "zh-TW": "繁體中文",
    "en-US": "English",
    "ja-JP": "日本語",
    "ko-KR": "한국어",
}

DEFAULT_LANGUAGE = "zh-CN"
FALLBACK_LANGUAGE = "en-US"
PREFERENCE_KEY = "hearthstone-card-generator-language"

_bundled_locales_dir = Path(__file__).parent / "locales"


class I18nConfig(BaseModel):
    supported_languages: dict[str, str] = dict(SUPPORTED_LANGUAGES)
    default_language: str = DEFAULT_LANGUAGE
    fallback_language: str = FALLBACK_LANGUAGE
    locales_dir: str = str(_bundled_locales_dir)
    locales_base_url: str = ""  # e.g. https://cdn.example.com/i18n (overrides locales_dir)
    fetch_timeout: float = 10.0
    preload_fallback: bool = True
    preference_key: str = PREFERENCE_KEY

    @model_validator(mode="after")
    def check_languages(self) -> "I18nConfig":
        for code in (self.default_language, self.fallback_language):
            if code not in self.supported_languages:
                raise UnsupportedLanguageError(code)
        return self


class AppConfig(BaseModel):
    i18n: I18nConfig = I18nConfig()
    host: str = "127.0.0.1"
    port: int = 8765


_config_dir = Path(os.environ.get("CARDGEN_CONFIG_DIR", Path.home() / ".cardgen"))
_config_file = _config_dir / "config.json"
_preferences_file = _config_dir / "preferences.json"


def _ensure_config_dir() -> None:
    _config_dir.mkdir(parents=True, exist_ok=True)


def get_config_dir() -> Path:
    return _config_dir


def get_preferences_path() -> Path:
    return _preferences_file


def load_config() -> AppConfig:
    _ensure_config_dir()
    if _config_file.exists():
        try:
            data = json.loads(_config_file.read_text(encoding="utf-8"))
            return AppConfig(**data)
        except (json.JSONDecodeError, OSError, ValidationError) as e:
            logger.warning("Failed to load config.json, using defaults: %s", e)
    return AppConfig()


def save_config(config: AppConfig) -> None:
    _ensure_config_dir()
    _config_file.write_text(
        config.model_dump_json(indent=2),
        encoding="utf-8",
    )


_current_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    global _current_config
    if _current_config is None:
        _current_config = load_config()
    return _current_config


def update_config(config: AppConfig) -> AppConfig:
    global _current_config
    save_config(config)
    _current_config = config
    return _current_config


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads disk."""
    global _current_config
    _current_config = None
