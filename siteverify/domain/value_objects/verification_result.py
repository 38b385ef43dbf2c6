"""
Value object representing a parsed siteverify response.

This is a pure data structure with no I/O dependencies.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class VerificationResult:
    """
    Outcome of a human-verification check.

    Attributes:
        success: Whether the service reported success
        error_codes: Error tokens, empty on success and non-empty otherwise
        hostname: Hostname of the site where the challenge was solved
        challenge_ts: Challenge load timestamp (ISO format yyyy-MM-dd'T'HH:mm:ssZZ)
        apk_package_name: Android package name where the challenge was solved
        score: Score assigned to the request, None when not reported
        action: Action name as specified by the page
    """
    success: bool
    error_codes: Tuple[str, ...] = ()
    hostname: str = ""
    challenge_ts: str = ""
    apk_package_name: str = ""
    score: Optional[float] = None
    action: str = ""

    STRING_FIELDS = ("hostname", "challenge_ts", "apk_package_name", "action")

    def __post_init__(self):
        """Validate invariants."""
        if isinstance(self.error_codes, str):
            raise ValueError(
                f"error_codes must be a sequence of strings, got {self.error_codes!r}"
            )
        object.__setattr__(self, "error_codes", tuple(self.error_codes))

        if self.success and self.error_codes:
            raise ValueError("error_codes must be empty when success is True")

        if not self.success and not self.error_codes:
            raise ValueError("error_codes must be non-empty when success is False")

        for name in self.STRING_FIELDS:
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string, got {getattr(self, name)!r}")

    @classmethod
    def failure(cls, error_codes: Iterable[str], **fields: Any) -> "VerificationResult":
        """Build a failed result carrying the given error codes."""
        return cls(success=False, error_codes=error_codes, **fields)

    def to_mapping(self) -> Dict[str, Any]:
        """Render the result with the service's wire key names."""
        return {
            "success": self.success,
            "hostname": self.hostname,
            "challenge_ts": self.challenge_ts,
            "apk_package_name": self.apk_package_name,
            "score": self.score,
            "action": self.action,
            "error-codes": list(self.error_codes),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_mapping())
