from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, Dict, Any
from enum import Enum
import math
import time

class ComponentType(str, Enum):
    VERIFIER = "SiteVerifier"

class EventType(str, Enum):
    VERIFY_REQUESTED = "Verify_Requested"
    RESPONSE_PARSED = "Response_Parsed"
    EXPECTATION_FAILED = "Expectation_Failed"
    VERIFY_COMPLETED = "Verify_Completed"
    CONNECTION_FAILED = "Connection_Failed"

class LogEntry(BaseModel):
    trace_id: str
    timestamp: float = Field(default_factory=time.time)
    component: ComponentType
    event_type: EventType
    payload_hash: Optional[str] = None
    metrics: Dict[str, Any] = Field(default_factory=dict)
    message: Optional[str] = None


class SiteVerifyPayload(BaseModel):
    """
    Wire schema of a siteverify response body.

    Every optional field has an explicit default. `success` and `error-codes`
    are kept as received; ResponseParser decides what counts as a success
    and what counts as a usable error code list.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    success: Any = None
    error_codes: Any = Field(None, alias="error-codes")
    hostname: str = ""
    challenge_ts: str = ""
    apk_package_name: str = ""
    score: Optional[float] = None
    action: str = ""

    @field_validator("hostname", "challenge_ts", "apk_package_name", "action", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return str(value)

    @field_validator("score", mode="before")
    @classmethod
    def _coerce_score(cls, value: Any) -> Optional[float]:
        if value is None:
            return None
        try:
            score = float(value)
        except (TypeError, ValueError, OverflowError):
            return None
        # NaN and infinities never compare as below a threshold
        return score if math.isfinite(score) else None
