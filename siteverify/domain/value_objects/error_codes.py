"""
Error code tokens reported in VerificationResult.error_codes.

The calling verification subsystem matches on these exact strings, so the
values must not change. Codes supplied by the service itself are passed
through untouched and are not listed here.
"""

from enum import Enum


class ErrorCode(str, Enum):
    # Payload was not a decodable, non-empty JSON object
    INVALID_JSON = "invalid-input-response"
    # Service reported failure without usable error codes
    UNKNOWN_ERROR = "unknown-error"
    MISSING_INPUT_RESPONSE = "missing-input-response"
    CONNECTION_FAILED = "connection-failed"
    BAD_RESPONSE = "bad-response"
    HOSTNAME_MISMATCH = "hostname-mismatch"
    APK_PACKAGE_NAME_MISMATCH = "apk_package_name-mismatch"
    ACTION_MISMATCH = "action-mismatch"
    SCORE_THRESHOLD_NOT_MET = "score-threshold-not-met"
    CHALLENGE_TIMEOUT = "challenge-timeout"
