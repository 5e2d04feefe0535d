"""Runtime translation for the card generator UI."""

from .engine import I18n, interpolate
from .errors import I18nError, LanguageLoadError, UnsupportedLanguageError
from .events import LANGUAGE_CHANGED, LanguageChanged, NotificationBridge
from .preferences import JsonPreferenceStore, MemoryPreferenceStore, PreferenceStore
from .selector import LanguageSelector, detect_host_language, parse_accept_language
from .store import FileResourceStore, HttpResourceStore, ResourceStore

__all__ = [
    "I18n",
    "interpolate",
    "I18nError",
    "LanguageLoadError",
    "UnsupportedLanguageError",
    "LANGUAGE_CHANGED",
    "LanguageChanged",
    "NotificationBridge",
    "PreferenceStore",
    "MemoryPreferenceStore",
    "JsonPreferenceStore",
    "LanguageSelector",
    "detect_host_language",
    "parse_accept_language",
    "ResourceStore",
    "FileResourceStore",
    "HttpResourceStore",
]
