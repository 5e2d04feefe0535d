"""Language file sources: local directory or HTTP."""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

import httpx

from .errors import LanguageLoadError

logger = logging.getLogger(__name__)


def resource_name(code: str) -> str:
    return f"{code}.json"


class ResourceStore(ABC):
    """Abstract source of language files."""

    @abstractmethod
    async def fetch(self, code: str) -> Any:
        """Return the decoded JSON for ``code`` or raise LanguageLoadError."""
        ...

    async def aclose(self) -> None:
        pass


class FileResourceStore(ResourceStore):
    def __init__(self, locales_dir: Path | str):
        self.locales_dir = Path(locales_dir)

    async def fetch(self, code: str) -> Any:
        path = self.locales_dir / resource_name(code)
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise LanguageLoadError(code, str(e), cause=e) from e
        try:
            return json.loads(raw.decode("utf-8"))
        except (ValueError, RecursionError) as e:
            # UnicodeDecodeError and JSONDecodeError are both ValueErrors
            raise LanguageLoadError(code, "invalid JSON", cause=e) from e


class HttpResourceStore(ResourceStore):
    """Fetches ``<base_url>/<code>.json`` with a shared httpx client."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    def url_for(self, code: str) -> str:
        return f"{self.base_url}/{resource_name(code)}"

    async def fetch(self, code: str) -> Any:
        url = self.url_for(code)
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise LanguageLoadError(code, f"HTTP {e.response.status_code}", cause=e) from e
        except httpx.HTTPError as e:
            raise LanguageLoadError(code, f"{type(e).__name__}: {e}", cause=e) from e
        try:
            return resp.json()
        except (ValueError, RecursionError) as e:
            raise LanguageLoadError(code, "invalid JSON", cause=e) from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
