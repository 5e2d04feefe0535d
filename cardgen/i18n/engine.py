"""Translation lookup with per-language caching and a single fallback language."""

import logging
import re
from typing import Any, Mapping, Optional

from .errors import LanguageLoadError, UnsupportedLanguageError
from .store import ResourceStore
from .tree import Leaf, Namespace, parse_tree, walk

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def interpolate(template: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Replace ``{{name}}`` markers; unknown names are left as-is."""
    if not params:
        return template

    def _sub(match: re.Match) -> str:
        name = match.group(1)
        if name in params and params[name] is not None:
            return str(params[name])
        return match.group(0)

    return _PLACEHOLDER.sub(_sub, template)


class I18n:
    def __init__(
        self,
        store: ResourceStore,
        supported_languages: Mapping[str, str],
        fallback_language: str,
        current_language: Optional[str] = None,
    ):
        self.store = store
        self._supported = dict(supported_languages)
        if fallback_language not in self._supported:
            raise UnsupportedLanguageError(fallback_language)
        self._fallback = fallback_language
        current = current_language or fallback_language
        if current not in self._supported:
            raise UnsupportedLanguageError(current)
        self._current = current
        self._cache: dict[str, Namespace] = {}

    # ── State ──

    @property
    def current_language(self) -> str:
        return self._current

    @property
    def fallback_language(self) -> str:
        return self._fallback

    @property
    def supported_languages(self) -> dict[str, str]:
        return dict(self._supported)

    def is_supported(self, code: Optional[str]) -> bool:
        return code in self._supported

    def loaded_languages(self) -> list[str]:
        return list(self._cache)

    def translations(self, code: Optional[str] = None) -> Optional[Namespace]:
        return self._cache.get(code or self._current)

    def commit(self, code: str) -> None:
        """Make ``code`` the current language."""
        if code not in self._supported:
            raise UnsupportedLanguageError(code)
        self._current = code

    # ── Loading ──

    async def _fetch_tree(self, code: str) -> Namespace:
        data = await self.store.fetch(code)
        try:
            return parse_tree(data)
        except TypeError as e:
            raise LanguageLoadError(code, f"malformed payload: {e}", cause=e) from e
        except RecursionError as e:
            raise LanguageLoadError(code, "malformed payload: nested too deeply", cause=e) from e

    async def load_language(self, code: str) -> Namespace:
        cached = self._cache.get(code)
        if cached is not None:
            return cached

        try:
            tree = await self._fetch_tree(code)
        except LanguageLoadError as e:
            logger.error("Error loading language %s: %s", code, e)
            if code == self._fallback:
                raise
            return await self._load_fallback()

        # Racing loads of the same code keep whichever finished first.
        return self._cache.setdefault(code, tree)

    async def _load_fallback(self) -> Namespace:
        code = self._fallback
        cached = self._cache.get(code)
        if cached is not None:
            return cached
        try:
            tree = await self._fetch_tree(code)
        except LanguageLoadError as e:
            logger.error("Error loading fallback language %s: %s", code, e)
            raise
        return self._cache.setdefault(code, tree)

    async def preload_fallback(self) -> bool:
        try:
            await self.load_language(self._fallback)
            return True
        except LanguageLoadError as e:
            logger.error("Failed to preload fallback language %s: %s", self._fallback, e)
            return False

    async def init(self, preload_fallback: bool = False) -> bool:
        try:
            await self.load_language(self._current)
        except LanguageLoadError as e:
            logger.error("Failed to initialize I18n: %s", e)
            return False
        if preload_fallback:
            await self.preload_fallback()
        logger.info("I18n initialized with language: %s", self._current)
        return True

    # ── Lookup ──

    def resolve(
        self,
        key: str,
        params: Optional[Mapping[str, Any]] = None,
        language: Optional[str] = None,
    ) -> str:
        """Return the translation for a dotted ``key``.

        Never raises: a missing table, a missing key or a key that names a
        namespace all return ``key`` unchanged. A miss in a non-fallback
        language is retried once against the fallback language if it is
        already loaded.
        """
        lang = language or self._current
        tree = self._cache.get(lang)
        if tree is None:
            logger.warning("Translations not loaded for language: %s", lang)
            return key

        node = walk(tree, key)
        if node is None:
            if lang != self._fallback and self._fallback in self._cache:
                node = walk(self._cache[self._fallback], key)
                lang = self._fallback
            if node is None:
                logger.warning("Translation key not found: %s for language: %s", key, lang)
                return key

        if not isinstance(node, Leaf):
            logger.warning("Translation value is not a string: %s", key)
            return key

        return interpolate(node.text, params)

    t = resolve

    def get_keywords(self, language: Optional[str] = None) -> dict[str, Any]:
        lang = language or self._current
        for code in (lang, self._fallback):
            tree = self._cache.get(code)
            if tree is not None:
                keywords = tree.get("keywords")
                if isinstance(keywords, Namespace):
                    return keywords.to_dict()
            if lang == self._fallback:
                break
        return {}
