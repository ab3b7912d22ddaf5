"""Request/response handling shared by every resource client."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
import pydantic

from .._http import BytesBody, ChunkSink, JSONBody, RequestBody
from ..errors import DecodeError, RemoteError, TransportError, ValidationError
from ..models import BunnyModel, ErrorPayload, ListResult, PageMeta

if TYPE_CHECKING:
    from .._http import BaseTransport
    from ..config import ClientConfig
    from ..types import PageParameters

logger = logging.getLogger("bunnycdn.request")

M = TypeVar("M", bound=BunnyModel)


@dataclass(frozen=True)
class APIResponse:
    """A 2xx response that passed the error-payload check."""

    status_code: int
    body: str
    data: Any = None
    page_meta: PageMeta = field(default_factory=PageMeta)


def _read_json(text: str) -> Any:
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError:
        return None


def _transport_error(response: httpx.Response) -> TransportError:
    text = response.text
    message = f"HTTP {response.status_code} {response.reason_phrase}"
    if text:
        message = f"{message} - {text}"
    payload = ErrorPayload.detect(_read_json(text))
    if payload is not None:
        return TransportError(
            payload.message or message,
            status_code=response.status_code,
            error_key=payload.error_key or "",
            field=payload.field or "",
        )
    return TransportError(message, status_code=response.status_code)


def _detect_page_meta(data: Any) -> PageMeta:
    if not isinstance(data, dict):
        return PageMeta()
    try:
        page_meta = PageMeta.model_validate(data)
    except pydantic.ValidationError:
        logger.debug("response carries no usable pagination envelope")
        return PageMeta()
    # Absent fields parse to zeroed defaults, which valid() rejects
    return page_meta


def classify_response(response: httpx.Response) -> APIResponse:
    """Turn a raw response into an APIResponse or raise the matching error.

    Non-2xx statuses raise TransportError. A 2xx body that is the API's error
    payload raises RemoteError. Pagination metadata is attached when present.
    """
    if not response.is_success:
        raise _transport_error(response)

    text = response.text
    data = _read_json(text)
    payload = ErrorPayload.detect(data)
    if payload is not None:
        raise RemoteError(
            payload.message or "",
            status_code=response.status_code,
            error_key=payload.error_key or "",
            field=payload.field or "",
        )
    return APIResponse(
        status_code=response.status_code,
        body=text,
        data=data,
        page_meta=_detect_page_meta(data),
    )


def decode_model(model: type[M], data: Any) -> M:
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as exc:
        raise DecodeError(str(exc), error_key="decode.invalid", field=model.__name__) from exc


def decode_list(model: type[M], response: APIResponse) -> ListResult[M]:
    """Decode a list body, element by element.

    Uses the pagination envelope's items when one is present, otherwise the
    body must be a JSON array. Decoding stops at the first element that does
    not match ``model``; the elements decoded so far are returned and the
    rest are counted in ``skipped``.
    """
    page: PageMeta | None = None
    if response.page_meta.valid():
        page = response.page_meta
        raw_items = page.items
    elif isinstance(response.data, list):
        raw_items = response.data
    else:
        raise DecodeError(
            f"Expected a JSON array of {model.__name__}", error_key="decode.not_a_list"
        )

    items: list[M] = []
    for index, raw in enumerate(raw_items):
        try:
            items.append(model.model_validate(raw))
        except pydantic.ValidationError as exc:
            skipped = len(raw_items) - index
            logger.warning(
                "stopped decoding %s list at element %d, %d element(s) skipped: %s",
                model.__name__,
                index,
                skipped,
                exc.errors()[0]["msg"] if exc.errors() else exc,
            )
            return ListResult(items=items, skipped=skipped, page=page)
    return ListResult(items=items, skipped=0, page=page)


def build_page_params(page_params: PageParameters | None) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if page_params is not None:
        params["page"] = page_params.page
        params["perPage"] = page_params.per_page
    return params


def format_bool(value: bool) -> str:
    return "true" if value else "false"


class BaseResourceClient:
    """Base resource client with the shared async request primitives."""

    def __init__(self, transport: BaseTransport, config: ClientConfig):
        self._transport = transport
        self._config = config

    @property
    def _api_key(self) -> str:
        return self._config.api_key

    @property
    def _read_password(self) -> str:
        return self._config.read_password

    @property
    def _write_password(self) -> str:
        if not self._config.write_password:
            raise ValidationError(
                "No write password configured; write operations are disabled",
                error_key="config.no_write_password",
                field="write_password",
            )
        return self._config.write_password

    def _api_url(self, path: str) -> str:
        return self._config.api_url(path)

    async def _request(
        self,
        method: str,
        url: str,
        access_key: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: RequestBody = None,
        headers: Mapping[str, str] | None = None,
    ) -> APIResponse:
        try:
            response = await self._transport.send(
                method,
                url,
                access_key=access_key,
                params=params,
                body=body,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        return classify_response(response)

    async def _get(
        self,
        url: str,
        access_key: str,
        params: Mapping[str, Any] | None = None,
    ) -> APIResponse:
        return await self._request("GET", url, access_key, params=params)

    async def _post(
        self,
        url: str,
        access_key: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> APIResponse:
        return await self._request(
            "POST", url, access_key, body=_as_body(body), headers=headers
        )

    async def _put(
        self,
        url: str,
        access_key: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> APIResponse:
        return await self._request(
            "PUT", url, access_key, body=_as_body(body), headers=headers
        )

    async def _delete(self, url: str, access_key: str) -> APIResponse:
        return await self._request("DELETE", url, access_key)

    async def _stream(self, url: str, access_key: str, on_chunk: ChunkSink) -> None:
        try:
            await self._transport.stream("GET", url, access_key=access_key, on_chunk=on_chunk)
        except httpx.HTTPStatusError as exc:
            raise _transport_error(exc.response) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"GET {url} failed: {exc}") from exc


def _as_body(body: Any) -> RequestBody:
    if body is None or isinstance(body, (JSONBody, BytesBody)):
        return body
    if isinstance(body, (bytes, bytearray, memoryview)):
        return BytesBody(bytes(body))
    return JSONBody(body)


__all__ = [
    "APIResponse",
    "BaseResourceClient",
    "build_page_params",
    "classify_response",
    "decode_list",
    "decode_model",
    "format_bool",
]
