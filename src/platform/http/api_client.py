"""
Backend API client

Thin wrapper over a shared `httpx.AsyncClient` that every driven adapter
uses. It owns base URL / timeout configuration and translates transport
failures and non-2xx answers into `ApiRequestError`, so adapters only deal
with decoded payloads.
"""

from decimal import Decimal
from typing import Any, Mapping

import httpx
import orjson
from pydantic import TypeAdapter, ValidationError

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import ApiRequestError
from src.platform.logging.loguru_io import Logger


def _orjson_default(obj: Any) -> Any:
    if isinstance(obj, Decimal):
        return str(obj)
    raise TypeError(f'Type is not JSON serializable: {type(obj).__name__}')


def encode_json(payload: Any) -> bytes:
    return orjson.dumps(payload, default=_orjson_default)


def _extract_server_message(response: httpx.Response) -> str | None:
    try:
        body = orjson.loads(response.content)
    except orjson.JSONDecodeError:
        return None
    if isinstance(body, dict):
        message = body.get('message')
        return str(message) if message else None
    return None


class ApiClient:
    def __init__(
        self,
        *,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=settings.API_BASE_URL,
            timeout=settings.API_TIMEOUT_SECONDS,
            verify=settings.API_VERIFY_TLS,
            transport=transport,
            headers={'Accept': 'application/json'},
        )

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def get(self, path: str, *, params: Mapping[str, Any] | None = None) -> httpx.Response:
        return await self._send('GET', path, params=params)

    async def post_json(self, path: str, *, payload: Any) -> httpx.Response:
        return await self._send(
            'POST',
            path,
            content=encode_json(payload),
            headers={'Content-Type': 'application/json'},
        )

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise ApiRequestError(f'{method} {path} failed: {e}') from e

        if response.is_success:
            return response

        server_message = _extract_server_message(response)
        raise ApiRequestError(
            f'{method} {path} returned {response.status_code}',
            response.status_code,
            server_message=server_message,
        )

    async def aclose(self) -> None:
        await self._client.aclose()
        Logger.base.debug('🔌 [API] Client closed')


def decode_response(response: httpx.Response, type_: Any) -> Any:
    """
    Validate a response body into a pydantic model (or any TypeAdapter-able type).

    Raises:
        ApiRequestError: When the body does not match the expected shape
    """
    try:
        return TypeAdapter(type_).validate_json(response.content)
    except ValidationError as e:
        request = response.request
        raise ApiRequestError(
            f'Unexpected payload from {request.method} {request.url.path}: '
            f'{e.error_count()} validation errors',
            response.status_code,
        ) from e
