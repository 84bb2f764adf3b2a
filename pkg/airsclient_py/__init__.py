"""airsclient-py – Python client for Palo Alto Networks AI Runtime Security (AIRS).

Lightweight Python helper for the AIRS scan API: synchronous and
asynchronous prompt/response scans, scan result lookups and threat reports.

Every failed call raises a single :class:`APIError`; ID batches outside
1–5 entries raise :class:`BatchSizeError` before anything is sent.
"""

from .client import (
    AIRSConfig,
    AIRSClient,
    DEFAULT_BASE_URL,
)
from .errors import APIError, BatchSizeError
from .types import (
    AiProfile,
    Metadata,
    ScanContent,
    ScanRequest,
    ScanResponse,
    AsyncScanObject,
    AsyncScanResponse,
    ScanIdResult,
    ThreatScanReportObject,
    DetectionServiceResultObject,
    ApiErrorResponse,
)

__all__ = [
    "AIRSConfig",
    "AIRSClient",
    "DEFAULT_BASE_URL",
    "APIError",
    "BatchSizeError",
    "AiProfile",
    "Metadata",
    "ScanContent",
    "ScanRequest",
    "ScanResponse",
    "AsyncScanObject",
    "AsyncScanResponse",
    "ScanIdResult",
    "ThreatScanReportObject",
    "DetectionServiceResultObject",
    "ApiErrorResponse",
]
