"""Wire shapes of the AIRS scan API.

These are type hints only. Request bodies are sent as given and response
bodies are returned exactly as decoded from JSON.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TypedDict


class AiProfile(TypedDict, total=False):
    # Either profile_id or profile_name must be set.
    profile_id: str
    profile_name: str


class Metadata(TypedDict, total=False):
    app_name: str
    app_user: str
    ai_model: str


class ScanContent(TypedDict, total=False):
    prompt: str
    response: str


class _ScanRequestBase(TypedDict):
    ai_profile: AiProfile
    contents: List[ScanContent]


class ScanRequest(_ScanRequestBase, total=False):
    tr_id: str
    metadata: Metadata


class AsyncScanObject(TypedDict):
    req_id: int
    scan_req: ScanRequest


class PromptDetected(TypedDict, total=False):
    url_cats: bool
    dlp: bool
    injection: bool


class ResponseDetected(TypedDict, total=False):
    url_cats: bool
    dlp: bool


class _ScanResponseBase(TypedDict):
    report_id: str
    scan_id: str
    category: str  # "malicious" | "benign"
    action: str  # "block" | "allow"


class ScanResponse(_ScanResponseBase, total=False):
    tr_id: str
    profile_id: str
    profile_name: str
    prompt_detected: PromptDetected
    response_detected: ResponseDetected
    created_at: str
    completed_at: str


class _AsyncScanResponseBase(TypedDict):
    received: str
    scan_id: str


class AsyncScanResponse(_AsyncScanResponseBase, total=False):
    report_id: str


class _ScanIdResultBase(TypedDict):
    scan_id: str


class ScanIdResult(_ScanIdResultBase, total=False):
    req_id: int
    status: str  # "complete" | "pending"
    result: ScanResponse


class UrlfEntryObject(TypedDict, total=False):
    url: str
    risk_level: str
    categories: List[str]


class DlpReportObject(TypedDict, total=False):
    dlp_report_id: str
    dlp_profile_name: str
    dlp_profile_id: str
    dlp_profile_version: int
    data_pattern_rule1_verdict: str
    data_pattern_rule2_verdict: str


class DSDetailResultObject(TypedDict, total=False):
    urlf_report: List[List[UrlfEntryObject]]
    dlp_report: DlpReportObject


class DetectionServiceResultObject(TypedDict, total=False):
    data_type: str  # "prompt" | "response"
    detection_service: str  # "urlf" | "dlp" | "pi"
    verdict: str
    action: str
    result_detail: DSDetailResultObject


class _ThreatScanReportBase(TypedDict):
    report_id: str
    scan_id: str


class ThreatScanReportObject(_ThreatScanReportBase, total=False):
    req_id: int
    transaction_id: str
    detection_results: List[DetectionServiceResultObject]


class RetryAfter(TypedDict, total=False):
    interval: int
    unit: str


class ApiErrorResponse(TypedDict, total=False):
    status_code: int
    message: str
    error: Optional[Dict[str, Any]]
    retry_after: RetryAfter
