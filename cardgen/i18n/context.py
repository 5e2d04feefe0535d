import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import I18nConfig
from .engine import I18n
from .events import NotificationBridge
from .preferences import JsonPreferenceStore, PreferenceStore
from .selector import LanguageSelector
from .store import FileResourceStore, HttpResourceStore, ResourceStore

logger = logging.getLogger(__name__)


@dataclass
class I18nContext:
    """Everything the app needs for translation, built once at startup."""

    config: I18nConfig
    store: ResourceStore
    engine: I18n
    bridge: NotificationBridge
    selector: LanguageSelector

    async def start(self, host_language: Optional[str] = None) -> str:
        return await self.selector.initialize(
            host_language, preload_fallback=self.config.preload_fallback
        )

    async def close(self) -> None:
        await self.store.aclose()


def build_store(config: I18nConfig) -> ResourceStore:
    if config.locales_base_url:
        logger.info("Loading language files from %s", config.locales_base_url)
        return HttpResourceStore(config.locales_base_url, timeout=config.fetch_timeout)
    return FileResourceStore(config.locales_dir)


def build_context(
    config: I18nConfig,
    preferences: PreferenceStore | Path | str,
    store: Optional[ResourceStore] = None,
) -> I18nContext:
    if not isinstance(preferences, PreferenceStore):
        preferences = JsonPreferenceStore(preferences)
    store = store or build_store(config)
    engine = I18n(
        store,
        supported_languages=config.supported_languages,
        fallback_language=config.fallback_language,
        current_language=config.default_language,
    )
    bridge = NotificationBridge()
    selector = LanguageSelector(
        engine,
        preferences,
        bridge,
        default_language=config.default_language,
        preference_key=config.preference_key,
    )
    return I18nContext(config=config, store=store, engine=engine, bridge=bridge, selector=selector)
