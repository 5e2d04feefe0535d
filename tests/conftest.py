from __future__ import annotations

from typing import Any

import pytest

from cardgen.config import I18nConfig
from cardgen.i18n import I18n, MemoryPreferenceStore, ResourceStore
from cardgen.i18n.context import I18nContext, build_context
from cardgen.i18n.errors import LanguageLoadError

SUPPORTED = {
    "zh-CN": "简体中文",
    "zh-TW": "繁體中文",
    "en-US": "English",
    "ja-JP": "日本語",
    "ko-KR": "한국어",
}

TREES: dict[str, dict[str, Any]] = {
    "en-US": {
        "app": {"title": "Card Generator"},
        "greet": "Hi {{name}}",
        "ui": {"generate": "Generate", "only_in_english": "English only"},
        "keywords": {"taunt": "Taunt", "battlecry": "Battlecry"},
    },
    "zh-CN": {
        "app": {"title": "卡牌生成器"},
        "greet": "你好 {{name}}",
        "ui": {"generate": "生成"},
        "keywords": {"taunt": "嘲讽"},
    },
    "zh-TW": {"app": {"title": "卡牌產生器"}},
    "ja-JP": {"app": {"title": "カードジェネレーター"}},
    "ko-KR": {"app": {"title": "카드 생성기"}},
}


class FakeStore(ResourceStore):
    def __init__(self, trees: dict[str, Any] | None = None, failing: set[str] | None = None) -> None:
        self.trees = dict(TREES if trees is None else trees)
        self.failing = set(failing or ())
        self.calls: list[str] = []
        self.closed = False

    async def fetch(self, code: str) -> Any:
        self.calls.append(code)
        if code in self.failing or code not in self.trees:
            raise LanguageLoadError(code, "unreachable")
        return self.trees[code]

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def engine(store: FakeStore) -> I18n:
    return I18n(store, SUPPORTED, fallback_language="en-US", current_language="zh-CN")


@pytest.fixture
def preferences() -> MemoryPreferenceStore:
    return MemoryPreferenceStore()


@pytest.fixture
def context(store: FakeStore, preferences: MemoryPreferenceStore) -> I18nContext:
    return build_context(I18nConfig(supported_languages=SUPPORTED), preferences, store=store)
