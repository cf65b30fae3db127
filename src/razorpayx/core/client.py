"""
HTTP dispatch shared by every RazorpayX resource.
"""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import requests
from requests.auth import HTTPBasicAuth

from .config import ClientConfig, filter_headers
from .errors import ApiError, ApiErrorDetail
from .utils import is_non_null_object

__all__ = [
    "API_ERROR_MESSAGE",
    "ApiResponse",
    "FailureKind",
    "HttpClient",
    "TransportFailure",
]

API_ERROR_MESSAGE = "Razorpayx API Error"


def _parse_body(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, ValueError):
        return response.text


@dataclass(frozen=True)
class ApiResponse:
    status_code: int
    headers: Mapping[str, str]
    data: Any
    raw: requests.Response

    @classmethod
    def from_response(cls, response: requests.Response) -> "ApiResponse":
        return cls(
            status_code=response.status_code,
            headers=response.headers,
            data=_parse_body(response),
            raw=response,
        )


class FailureKind(enum.Enum):
    HTTP_RESPONSE = "http_response"
    NO_RESPONSE = "no_response"


@dataclass(frozen=True)
class TransportFailure:
    """
    A failed request, classified once at the transport boundary.
    """

    kind: FailureKind
    status_code: Optional[int] = None
    body: Any = None

    @classmethod
    def from_exception(cls, exc: requests.RequestException) -> "TransportFailure":
        response = exc.response
        if response is None:
            return cls(kind=FailureKind.NO_RESPONSE)
        return cls(
            kind=FailureKind.HTTP_RESPONSE,
            status_code=response.status_code,
            body=_parse_body(response),
        )

    @property
    def detail(self) -> Optional[ApiErrorDetail]:
        if not is_non_null_object(self.body):
            return None
        error = self.body.get("error")
        if not is_non_null_object(error):
            return None
        return ApiErrorDetail.from_payload(error)

    def to_api_error(self) -> ApiError:
        return ApiError(API_ERROR_MESSAGE, self.detail, self.status_code)


class HttpClient:
    """
    Sends authenticated requests to the RazorpayX API.

    :class:`ClientConfig` guarantees non-empty credentials. Extra headers are
    passed through the allow-list again here, so nothing else reaches the
    wire. Only :class:`requests.RequestException` failures are turned into
    :class:`ApiError`; anything else propagates unchanged.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()
        self._auth = HTTPBasicAuth(config.key_id, config.key_secret)
        self._headers: Dict[str, str] = {
            "User-Agent": config.user_agent,
            **filter_headers(config.extra_headers),
        }

    def build_url(self, url: str) -> str:
        return self.config.base_url + url.lstrip("/")

    def _request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[Any] = None,
    ) -> ApiResponse:
        try:
            response = self.session.request(
                method,
                self.build_url(url),
                params=params,
                json=data,
                headers=self._headers,
                auth=self._auth,
                timeout=self.config.timeout_seconds,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise TransportFailure.from_exception(exc).to_api_error() from exc
        return ApiResponse.from_response(response)

    def get(self, url: str, params: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        return self._request("GET", url, params=params)

    def post(self, url: str, data: Optional[Any] = None) -> ApiResponse:
        return self._request("POST", url, data=data)

    def patch(self, url: str, data: Any) -> ApiResponse:
        return self._request("PATCH", url, data=data)
