"""
Domain Service: Response Parser

Parses siteverify response bodies into VerificationResult values.
Every outcome, including malformed input, is returned as data.
"""

import json
import logging
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from siteverify.models import SiteVerifyPayload
from ..value_objects import ErrorCode, VerificationResult


class ResponseParser:
    """
    Domain service for parsing siteverify responses.

    Outcomes:
    - success: payload "success" is the literal boolean true
    - structured failure: a non-empty "error-codes" array is surfaced verbatim
    - unknown failure: anything else gets a single "unknown-error"
    - malformed input: undecodable, non-object or empty payloads get
      a single "invalid-input-response"
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def parse(self, raw_json: Union[str, bytes]) -> VerificationResult:
        """
        Parse a raw response body.

        Args:
            raw_json: JSON text as returned by the service

        Returns:
            VerificationResult; this method never raises
        """
        data = self._decode(raw_json)
        if not data:
            return VerificationResult.failure([ErrorCode.INVALID_JSON.value])

        try:
            payload = SiteVerifyPayload.model_validate(data)
        except ValidationError as e:
            self.logger.warning(f"siteverify payload failed validation: {e}")
            return VerificationResult.failure([ErrorCode.INVALID_JSON.value])

        fields = {
            "hostname": payload.hostname,
            "challenge_ts": payload.challenge_ts,
            "apk_package_name": payload.apk_package_name,
            "score": payload.score,
            "action": payload.action,
        }

        # Strict: 1, "true" and other truthy values are not a success
        if payload.success is True:
            return VerificationResult(success=True, **fields)

        error_codes = payload.error_codes
        if isinstance(error_codes, list) and error_codes:
            return VerificationResult.failure(
                [code if isinstance(code, str) else str(code) for code in error_codes],
                **fields,
            )

        return VerificationResult.failure([ErrorCode.UNKNOWN_ERROR.value], **fields)

    def _decode(self, raw_json: Union[str, bytes]) -> Optional[Dict[str, Any]]:
        """Decode to a JSON object, or None when the body is not one."""
        try:
            data = json.loads(raw_json)
        except (TypeError, ValueError, RecursionError):
            self.logger.debug("siteverify response is not valid JSON")
            return None

        if not isinstance(data, dict):
            self.logger.debug(
                f"siteverify response is {type(data).__name__}, expected an object"
            )
            return None

        return data


_default_parser = ResponseParser()


def parse_response(raw_json: Union[str, bytes]) -> VerificationResult:
    """Parse a response body with the shared ResponseParser."""
    return _default_parser.parse(raw_json)
