from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from cardgen.config import PREFERENCE_KEY, I18nConfig
from cardgen.i18n import LANGUAGE_CHANGED, MemoryPreferenceStore
from cardgen.i18n.context import I18nContext, build_context
from cardgen.main import create_app

from .conftest import SUPPORTED, FakeStore


@pytest.fixture
def client(context: I18nContext, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LC_ALL", "ko_KR.UTF-8")
    with TestClient(create_app(context)) as c:
        yield c


def test_health(client: TestClient) -> None:
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_startup_uses_host_language(client: TestClient) -> None:
    data = client.get("/api/i18n/languages").json()

    assert data["current"] == "ko-KR"
    assert data["fallback"] == "en-US"
    assert [lang["code"] for lang in data["languages"]] == ["zh-CN", "zh-TW", "en-US", "ja-JP", "ko-KR"]
    assert sorted(data["loaded"]) == ["en-US", "ko-KR"]


def test_translate_with_params_and_fallback(client: TestClient) -> None:
    resp = client.get("/api/i18n/translate", params={"key": "greet", "name": "Ada"})
    assert resp.json() == {"key": "greet", "value": "Hi Ada"}

    resp = client.get("/api/i18n/translate", params={"key": "app.title"})
    assert resp.json()["value"] == "카드 생성기"

    resp = client.get("/api/i18n/translate", params={"key": "app.title", "lang": "ja-JP"})
    assert resp.json()["value"] == "app.title"


def test_switch_language(
    client: TestClient, context: I18nContext, preferences: MemoryPreferenceStore, store: FakeStore
) -> None:
    events = []
    context.bridge.on(LANGUAGE_CHANGED, events.append)

    resp = client.put("/api/i18n/language", json={"language": "zh-CN"})

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "language": "zh-CN"}
    assert preferences.get(PREFERENCE_KEY) == "zh-CN"
    assert [e.language for e in events] == ["zh-CN"]

    current = client.get("/api/i18n/current").json()
    assert current["translations"]["app"]["title"] == "卡牌生成器"
    assert client.get("/api/i18n/keywords").json() == {"keywords": {"taunt": "嘲讽"}}


def test_switch_to_unsupported_language(client: TestClient) -> None:
    resp = client.put("/api/i18n/language", json={"language": "fr-FR"})

    assert resp.status_code == 400
    assert client.get("/api/i18n/languages").json()["current"] == "ko-KR"


def test_switch_with_broken_language_file_uses_cached_fallback(client: TestClient, store: FakeStore) -> None:
    store.failing.add("ja-JP")

    resp = client.put("/api/i18n/language", json={"language": "ja-JP"})

    assert resp.status_code == 200
    assert client.get("/api/i18n/translate", params={"key": "app.title"}).json()["value"] == "app.title"
    assert client.get("/api/i18n/current").json() == {"language": "ja-JP", "translations": {}}


def test_switch_failure_returns_503(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LC_ALL", "ko_KR.UTF-8")
    preferences = MemoryPreferenceStore()
    ctx = build_context(
        I18nConfig(supported_languages=SUPPORTED),
        preferences,
        store=FakeStore(failing={"en-US"}),
    )

    with TestClient(create_app(ctx)) as c:
        resp = c.put("/api/i18n/language", json={"language": "en-US"})
        current = c.get("/api/i18n/languages").json()["current"]

    assert resp.status_code == 503
    assert current == "ko-KR"
    assert preferences.get(PREFERENCE_KEY) is None


def test_keywords_fallback(client: TestClient) -> None:
    assert client.get("/api/i18n/keywords").json() == {
        "keywords": {"taunt": "Taunt", "battlecry": "Battlecry"}
    }


def test_detect_uses_accept_language(client: TestClient) -> None:
    resp = client.get("/api/i18n/detect", headers={"Accept-Language": "ja;q=0.9, fr-FR"})

    assert resp.json() == {"host_language": "fr-FR", "language": "zh-CN"}

    resp = client.get("/api/i18n/detect", headers={"Accept-Language": "zh-TW,zh;q=0.9"})
    assert resp.json()["language"] == "zh-TW"


def test_prompt_routes(client: TestClient) -> None:
    assert client.get("/api/prompts/languages").json()["languages"][0] == "zh-CN"

    data = client.get("/api/prompts/card", params={"language": "xx"}).json()
    assert data["language"] == "zh-CN"
    assert "炉石传说" in data["prompt"]

    data = client.post(
        "/api/prompts/card/messages", json={"description": "tea murloc", "language": "en-US"}
    ).json()
    assert data["messages"][1] == {"role": "user", "content": "tea murloc"}

    data = client.get("/api/prompts/artwork", params={"name": "Ashbringer", "card_type": "weapon"}).json()
    assert data["card_type"] == "WEAPON"
    assert data["prompt"].startswith("Fantasy weapon artwork of Ashbringer")


def test_store_closed_on_shutdown(context: I18nContext, store: FakeStore) -> None:
    with TestClient(create_app(context)):
        pass

    assert store.closed is True
