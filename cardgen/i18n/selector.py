import logging
import os
from typing import Optional

from .engine import I18n
from .errors import LanguageLoadError
from .events import NotificationBridge
from .preferences import PreferenceStore

logger = logging.getLogger(__name__)

_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")


def normalize_language_tag(tag: Optional[str]) -> str:
    """Normalize a host language tag: ``en_us.UTF-8`` -> ``en-US``."""
    if not tag:
        return ""
    raw = str(tag).strip()
    if ";" in raw:
        raw = raw.split(";", 1)[0].strip()
    raw = raw.split(".", 1)[0].split("@", 1)[0].replace("_", "-")
    if not raw:
        return ""
    parts = raw.split("-")
    primary = parts[0].lower()
    rest = [p.upper() if len(p) == 2 else p for p in parts[1:] if p]
    return "-".join([primary, *rest])


def parse_accept_language(header: Optional[str]) -> str:
    """Return the highest-weighted tag of an Accept-Language header."""
    if not header:
        return ""
    best, best_q = "", -1.0
    for item in header.split(","):
        piece = item.strip()
        if not piece:
            continue
        tag, _, params = piece.partition(";")
        q = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                q = float(params[2:])
            except ValueError:
                q = 0.0
        tag = tag.strip()
        if tag and tag != "*" and q > best_q:
            best, best_q = tag, q
    return best


def detect_host_language() -> str:
    for var in _LOCALE_ENV_VARS:
        value = os.environ.get(var, "").strip()
        if value and value not in ("C", "POSIX") and not value.startswith("C."):
            return value
    return ""


class LanguageSelector:
    """Chooses the initial language and performs language switches."""

    def __init__(
        self,
        engine: I18n,
        preferences: PreferenceStore,
        bridge: NotificationBridge,
        default_language: str,
        preference_key: str,
    ):
        self.engine = engine
        self.preferences = preferences
        self.bridge = bridge
        self.default_language = default_language
        self.preference_key = preference_key

    def match_host_language(self, host_language: Optional[str]) -> Optional[str]:
        tag = normalize_language_tag(host_language)
        if not tag:
            return None
        if self.engine.is_supported(tag):
            return tag
        prefix = tag.split("-", 1)[0] + "-"
        for code in self.engine.supported_languages:
            if code.lower().startswith(prefix):
                return code
        return None

    def determine_initial_language(self, host_language: Optional[str] = None) -> str:
        saved = self.preferences.get(self.preference_key)
        if saved and self.engine.is_supported(saved):
            return saved

        matched = self.match_host_language(host_language)
        if matched:
            return matched

        return self.default_language

    async def initialize(self, host_language: Optional[str] = None, preload_fallback: bool = False) -> str:
        code = self.determine_initial_language(host_language)
        self.engine.commit(code)
        await self.engine.init(preload_fallback=preload_fallback)
        return code

    async def switch_language(self, code: str) -> bool:
        if not self.engine.is_supported(code):
            logger.warning("Unsupported language: %s", code)
            return False

        try:
            await self.engine.load_language(code)
        except LanguageLoadError as e:
            logger.error("Failed to switch to language %s: %s", code, e)
            return False

        try:
            self.preferences.set(self.preference_key, code)
        except OSError as e:
            logger.error("Failed to save language preference %s: %s", code, e)

        self.engine.commit(code)
        # Empty when the file for ``code`` failed and the fallback was loaded instead
        tree = self.engine.translations(code)
        self.bridge.language_changed(code, tree.to_dict() if tree is not None else {})
        return True
