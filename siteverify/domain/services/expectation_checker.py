"""
Domain Service: Expectation Checker

Checks a parsed VerificationResult against caller-supplied expectations
(hostname, APK package name, action, score threshold, challenge age).
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from siteverify.config import get_siteverify_config
from ..value_objects import ErrorCode, VerificationResult


@dataclass(frozen=True)
class ResponseExpectations:
    """
    Optional constraints on a verification result. None disables a check.

    Attributes:
        hostname: Expected hostname, compared case-insensitively
        apk_package_name: Expected APK package name, compared case-insensitively
        action: Expected action, compared exactly
        score_threshold: Minimum acceptable score
        challenge_timeout: Maximum challenge age in seconds
    """
    hostname: Optional[str] = None
    apk_package_name: Optional[str] = None
    action: Optional[str] = None
    score_threshold: Optional[float] = None
    challenge_timeout: Optional[int] = None

    def __post_init__(self):
        """Validate invariants."""
        if self.challenge_timeout is not None and self.challenge_timeout <= 0:
            raise ValueError(
                f"challenge_timeout must be positive, got {self.challenge_timeout}"
            )

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> "ResponseExpectations":
        """Build expectations from the `expectations` config section."""
        if config is None:
            config = get_siteverify_config().get('expectations', {}) or {}
        return cls(
            hostname=config.get('hostname'),
            apk_package_name=config.get('apk_package_name'),
            action=config.get('action'),
            score_threshold=config.get('score_threshold'),
            challenge_timeout=config.get('challenge_timeout'),
        )


def parse_challenge_ts(challenge_ts: str) -> Optional[datetime]:
    """
    Parse an ISO-8601 challenge timestamp.

    Returns None for empty or unparseable text. Naive timestamps are
    taken as UTC.
    """
    if not challenge_ts:
        return None
    text = challenge_ts.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class ExpectationChecker:
    """Domain service returning the error codes of failed expectations."""

    def __init__(self, expectations: Optional[ResponseExpectations] = None):
        self.expectations = expectations or ResponseExpectations()

    def check(
        self,
        result: VerificationResult,
        now: Optional[datetime] = None,
    ) -> List[str]:
        """
        Check result against the configured expectations.

        Args:
            result: Parsed verification result
            now: Reference time for the challenge timeout (defaults to now, UTC)

        Returns:
            Error codes in check order; empty when every expectation holds
        """
        expected = self.expectations
        errors: List[str] = []

        if expected.hostname is not None and \
                expected.hostname.casefold() != result.hostname.casefold():
            errors.append(ErrorCode.HOSTNAME_MISMATCH.value)

        if expected.apk_package_name is not None and \
                expected.apk_package_name.casefold() != result.apk_package_name.casefold():
            errors.append(ErrorCode.APK_PACKAGE_NAME_MISMATCH.value)

        if expected.action is not None and expected.action != result.action:
            errors.append(ErrorCode.ACTION_MISMATCH.value)

        # A missing score never meets a threshold
        if expected.score_threshold is not None and (
            result.score is None or result.score < expected.score_threshold
        ):
            errors.append(ErrorCode.SCORE_THRESHOLD_NOT_MET.value)

        if expected.challenge_timeout is not None:
            challenge_time = parse_challenge_ts(result.challenge_ts)
            if challenge_time is not None:
                now = now or datetime.now(timezone.utc)
                if now.tzinfo is None:
                    now = now.replace(tzinfo=timezone.utc)
                elapsed = (now - challenge_time).total_seconds()
                if elapsed > expected.challenge_timeout:
                    errors.append(ErrorCode.CHALLENGE_TIMEOUT.value)

        return errors
