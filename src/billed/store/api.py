"""
REST store: bills are served by the backend API under /bills.
Configure in config.yaml under store. The JWT, when signed in, is read from session storage.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from billed.errors import StoreError
from billed.store.base import FileTuple
from commons.config import config, env_or, section
from commons.constants import Constants as Co
from commons.storage.base import SessionStorage

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5678"


class Api:
    """Thin JSON-over-HTTP client. One httpx.AsyncClient per request."""

    def __init__(
        self,
        base_url: str,
        storage: Optional[SessionStorage] = None,
        timeout: Optional[float] = None,
        jwt_key: str = "jwt",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.storage = storage
        self.timeout = timeout
        self.jwt_key = jwt_key
        self.transport = transport

    def _headers(self, json_body: bool = True, authorize: bool = True) -> Dict[str, str]:
        h = {"Accept": "application/json"}
        if json_body:
            h["Content-Type"] = "application/json"
        jwt = self.storage.get_item(self.jwt_key) if (authorize and self.storage is not None) else None
        if jwt:
            h["Authorization"] = f"Bearer {jwt}"
        return h

    async def request(
        self,
        method: str,
        url: str,
        *,
        content: Optional[str] = None,
        data: Optional[Mapping[str, Any]] = None,
        files: Optional[Mapping[str, FileTuple]] = None,
    ) -> Any:
        # multipart bodies get their Content-Type (with boundary) from httpx
        headers = self._headers(json_body=files is None)
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self.transport
            ) as client:
                resp = await client.request(
                    method, url, headers=headers, content=content, data=data, files=files
                )
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise StoreError(f"{method} {url} failed: {e}") from e
        return _json_or_raise(resp)

    async def get(self, url: str) -> Any:
        return await self.request("GET", url)

    async def post(self, url: str, data=None, files=None) -> Any:
        return await self.request("POST", url, data=data, files=files)

    async def patch(self, url: str, content: str) -> Any:
        return await self.request("PATCH", url, content=content)

    async def delete(self, url: str) -> Any:
        return await self.request("DELETE", url)


def _json_or_raise(resp: httpx.Response) -> Any:
    if not resp.is_success:
        message = resp.reason_phrase or "request failed"
        if resp.content:
            try:
                body = resp.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and body.get("message"):
                message = str(body["message"])
        logger.error("%s %s -> %s %s", resp.request.method, resp.request.url, resp.status_code, message)
        raise StoreError(message, status_code=resp.status_code)
    if not resp.content:
        return None
    return resp.json()


class ApiEntity:
    """CRUD on one backend collection, e.g. /bills."""

    def __init__(self, key: str, api: Api):
        self.key = key
        self.api = api

    async def select(self, selector: str) -> Dict[str, Any]:
        return await self.api.get(f"/{self.key}/{selector}")

    async def list(self) -> List[Dict[str, Any]]:
        return await self.api.get(f"/{self.key}")

    async def create(
        self, data: Mapping[str, Any], files: Optional[Mapping[str, FileTuple]] = None
    ) -> Dict[str, Any]:
        return await self.api.post(f"/{self.key}", data=data, files=files)

    async def update(self, data: str, selector: str) -> Any:
        return await self.api.patch(f"/{self.key}/{selector}", content=data)

    async def delete(self, selector: str) -> Any:
        return await self.api.delete(f"/{self.key}/{selector}")


class ApiStore:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        storage: Optional[SessionStorage] = None,
        timeout: Optional[float] = None,
        jwt_key: str = "jwt",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api = Api(base_url, storage=storage, timeout=timeout, jwt_key=jwt_key, transport=transport)

    def bills(self) -> ApiEntity:
        return ApiEntity("bills", self.api)


def get_api_store(storage: Optional[SessionStorage] = None, cfg: Optional[Dict[str, Any]] = None) -> ApiStore:
    """Build an ApiStore from config (store.base_url, overridable by the env var in store.base_url_env)."""
    cfg = config if cfg is None else cfg
    store_cfg = section(cfg, Co.STORE)
    base_url = env_or(store_cfg, Co.BASE_URL, Co.BASE_URL_ENV) or DEFAULT_BASE_URL
    return ApiStore(
        base_url=base_url,
        storage=storage,
        timeout=store_cfg.get(Co.TIMEOUT),
        jwt_key=section(cfg, Co.SESSION).get(Co.JWT_KEY) or "jwt",
    )
