from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union, cast

import json
import logging
import urllib.parse

import requests

from .errors import APIError, BatchSizeError
from .types import (
    AsyncScanObject,
    AsyncScanResponse,
    Metadata,
    ScanIdResult,
    ScanRequest,
    ScanResponse,
    ThreatScanReportObject,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://service.api.aisecurity.paloaltonetworks.com"
MAX_IDS_PER_REQUEST = 5
UNKNOWN_ERROR_MESSAGE = "Unknown error while calling AIRS"


@dataclass(frozen=True)
class AIRSConfig:
    """Client configuration for talking to AIRS.

    Attributes
    ----------
    api_token: str
        API token sent as the ``x-pan-token`` header on every request.
    base_url: str
        Base URL of the AIRS scan API. Defaults to::

            https://service.api.aisecurity.paloaltonetworks.com

    session: Optional[requests.Session]
        Optional custom :class:`requests.Session`. If ``None``, a
        short‑lived session is created per request.
    timeout: float
        Timeout in seconds for HTTP requests, passed to ``requests`` as
        given. Must be positive. Defaults to 60.0s.
    """

    api_token: str
    base_url: str = DEFAULT_BASE_URL
    session: Optional[requests.Session] = field(default=None, compare=False)
    timeout: float = 60.0


class AIRSClient:
    """AIRS scan API client.

    Four operations, one attempt each. Every failed call raises exactly one
    :class:`APIError`; oversized or empty ID batches raise
    :class:`BatchSizeError` without touching the network.
    """

    def __init__(self, config: AIRSConfig):
        if not config.api_token:
            raise ValueError("api_token is required")
        if not config.base_url:
            raise ValueError("base_url is required")
        self._base_url = _normalize_base_url(config.base_url)
        self._headers = _build_headers(config.api_token)
        self._session = config.session
        if config.timeout <= 0:
            raise ValueError("timeout must be positive")
        self._timeout = config.timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    # --- scans -------------------------------------------------------------

    def scan_sync_request(self, request: ScanRequest) -> ScanResponse:
        """POST ``/v1/scan/sync/request`` and return the immediate verdict."""

        data = self._call("POST", "/v1/scan/sync/request", body=request)
        return cast(ScanResponse, data)

    def scan_async_request(self, batch: Sequence[AsyncScanObject]) -> AsyncScanResponse:
        """POST ``/v1/scan/async/request``.

        ``batch`` is a sequence of ``{"req_id": ..., "scan_req": ...}`` items.
        The response only acknowledges receipt; poll
        :meth:`get_scan_results_by_scan_ids` with the returned ``scan_id``.
        """

        data = self._call("POST", "/v1/scan/async/request", body=list(batch))
        return cast(AsyncScanResponse, data)

    # Convenience wrapper around :meth:`scan_sync_request` for a single prompt/response pair
    def scan_prompt(
        self,
        prompt: Optional[str] = None,
        response: Optional[str] = None,
        *,
        profile_name: Optional[str] = None,
        profile_id: Optional[str] = None,
        tr_id: Optional[str] = None,
        metadata: Optional[Metadata] = None,
    ) -> ScanResponse:
        if prompt is None and response is None:
            raise ValueError("prompt or response is required")
        if not profile_name and not profile_id:
            raise ValueError("profile_name or profile_id is required")

        content: Dict[str, str] = {}
        if prompt is not None:
            content["prompt"] = prompt
        if response is not None:
            content["response"] = response

        profile: Dict[str, str] = {}
        if profile_id:
            profile["profile_id"] = profile_id
        if profile_name:
            profile["profile_name"] = profile_name

        request: Dict[str, Any] = {"ai_profile": profile, "contents": [content]}
        if tr_id:
            request["tr_id"] = tr_id
        if metadata:
            request["metadata"] = dict(metadata)
        return self.scan_sync_request(cast(ScanRequest, request))

    # --- lookups -----------------------------------------------------------

    def get_scan_results_by_scan_ids(self, scan_ids: Sequence[str]) -> List[ScanIdResult]:
        """GET ``/v1/scan/results`` for up to 5 scan IDs."""

        query = _join_ids(scan_ids, "scan_id")
        data = self._call("GET", "/v1/scan/results", params={"scan_ids": query})
        return cast(List[ScanIdResult], data)

    def get_threat_scan_reports(self, report_ids: Sequence[str]) -> List[ThreatScanReportObject]:
        """GET ``/v1/scan/reports`` for up to 5 report IDs."""

        query = _join_ids(report_ids, "report_id")
        data = self._call("GET", "/v1/scan/reports", params={"report_ids": query})
        return cast(List[ThreatScanReportObject], data)

    def _call(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: Optional[Mapping[str, str]] = None,
    ) -> Any:
        payload = _encode_body(body) if body is not None else None
        outcome = _request_json(
            method=method,
            base_url=self._base_url,
            path=path,
            headers=self._headers,
            session=self._session,
            timeout=self._timeout,
            payload=payload,
            params=params,
        )
        return _raise_for_outcome(outcome, method=method, path=path)


# --- Error normalization -------------------------------------------------


def _raise_for_outcome(outcome: "_Outcome", *, method: str, path: str) -> Any:
    if isinstance(outcome, Success):
        return outcome.data

    if isinstance(outcome, ApiFailure):
        error = _api_error_from_body(outcome.status_code, outcome.body)
        logger.warning("AIRS %s %s failed: status=%d message=%s", method, path, error.status_code, error.message)
        raise error

    logger.warning("AIRS %s %s got no usable response: %s", method, path, outcome.reason)
    raise APIError(500, UNKNOWN_ERROR_MESSAGE)


def _api_error_from_body(status_code: int, body: Mapping[str, Any]) -> APIError:
    nested = body.get("error")
    nested_message = nested.get("message") if isinstance(nested, Mapping) else None
    message = body.get("message") or nested_message or f"API Error {status_code}"
    # Falsy scalars carry no details; empty objects and arrays still do.
    has_details = bool(nested) or isinstance(nested, (Mapping, list))
    details = json.dumps(nested, separators=(",", ":")) if has_details else None
    return APIError(status_code, str(message), details)


def _join_ids(ids: Sequence[str], kind: str) -> str:
    if isinstance(ids, (str, bytes)):
        raise TypeError(f"{kind}s must be a sequence of IDs, not a single string")
    if len(ids) < 1:
        raise BatchSizeError(f"At least 1 {kind} is required")
    if len(ids) > MAX_IDS_PER_REQUEST:
        raise BatchSizeError(f"Max of {MAX_IDS_PER_REQUEST} {kind}s can be requested at a time")
    return ",".join(ids)


# --- Low‑level HTTP helpers ----------------------------------------------


@dataclass(frozen=True)
class Success:
    data: Any


@dataclass(frozen=True)
class ApiFailure:
    status_code: int
    body: Mapping[str, Any]


@dataclass(frozen=True)
class TransportFailure:
    reason: str


_Outcome = Union[Success, ApiFailure, TransportFailure]


def _normalize_base_url(base_url: str) -> str:
    parsed = urllib.parse.urlparse(base_url)
    if not parsed.scheme:
        # Default to https if no scheme provided
        base_url = "https://" + base_url
    # Strip any trailing slash for consistency
    return base_url.rstrip("/")


def _build_headers(api_token: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "x-pan-token": api_token,
    }


def _request_json(
    *,
    method: str,
    base_url: str,
    path: str,
    headers: Mapping[str, str],
    session: Optional[requests.Session],
    timeout: float,
    payload: Optional[bytes] = None,
    params: Optional[Mapping[str, str]] = None,
) -> _Outcome:
    url = f"{base_url}{path}"

    logger.debug("AIRS %s %s params=%s", method, path, params)

    sess = session or requests.Session()
    try:
        resp = sess.request(
            method,
            url,
            data=payload,
            params=params,
            headers=dict(headers),
            timeout=timeout,
        )
    except requests.RequestException as exc:
        return TransportFailure(f"http request failed: {exc}")
    finally:
        if session is None:
            sess.close()

    if resp.status_code < 200 or resp.status_code >= 300:
        return ApiFailure(resp.status_code, _decode_error_body(resp))

    try:
        data = resp.json()
    except ValueError:
        # Non-JSON (or empty, e.g. 204) bodies are passed through as text.
        return Success(resp.text or None)

    return Success(data)


def _decode_error_body(resp: requests.Response) -> Mapping[str, Any]:
    # Error bodies are best effort: anything but a JSON object counts as empty.
    try:
        data = resp.json()
    except ValueError:
        return {}
    if not isinstance(data, Mapping):
        return {}
    return data


def _encode_body(body: Any) -> bytes:
    try:
        return json.dumps(body).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise TypeError(f"request body is not JSON serializable: {exc}") from exc
