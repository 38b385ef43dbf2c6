"""
VerifyResponseUseCase

Verifies a user response token against the siteverify service:
1. Reject empty tokens without calling the service
2. Submit request parameters through the injected client
3. Parse the response body
4. Check expectations (hostname, APK package name, action, score, challenge age)

Service-side problems are reported as error codes on the returned
VerificationResult; this use case does not raise for them.
"""

import uuid
from typing import Optional

from siteverify import __version__
from siteverify.application.dtos import SiteVerifyRequest
from siteverify.application.interfaces import ISiteVerifyClient, SiteVerifyConnectionError
from siteverify.config import get_siteverify_config
from siteverify.domain.services import (
    ExpectationChecker,
    ResponseExpectations,
    ResponseParser,
)
from siteverify.domain.value_objects import ErrorCode, VerificationResult
from siteverify.logging_utils import StructuredLogger, ComponentType, EventType


def default_version() -> str:
    prefix = get_siteverify_config().get('service', {}).get('version_prefix', 'python')
    return f"{prefix}_{__version__}"


class VerifyResponseUseCase:
    """
    Use case for verifying a response token.

    Design Principles:
    - Pure orchestration (no HTTP, no framework dependencies)
    - Dependency injection for the transport client
    - Testable in isolation
    """

    def __init__(
        self,
        client: ISiteVerifyClient,
        secret: str,
        parser: Optional[ResponseParser] = None,
        expectations: Optional[ResponseExpectations] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Initialize the use case with injected dependencies.

        Args:
            client: Transport used to reach the service
            secret: Shared site secret sent with every request
            parser: Response parser (creates default if None)
            expectations: Expectations to enforce (loaded from config if None)
            logger: Optional structured logger (creates default if None)
        """
        self._client = client
        self._secret = secret
        self._parser = parser or ResponseParser()
        self._checker = ExpectationChecker(
            expectations if expectations is not None else ResponseExpectations.from_config()
        )
        self._logger = logger or StructuredLogger(ComponentType.VERIFIER)

    def execute(
        self,
        response_token: Optional[str],
        remote_ip: Optional[str] = None,
    ) -> VerificationResult:
        """
        Verify a user response token.

        Args:
            response_token: Token produced by the client-side widget
            remote_ip: End user's IP address, already validated by the caller

        Returns:
            VerificationResult; failures carry their error codes
        """
        trace_id = str(uuid.uuid4())

        if not response_token:
            result = VerificationResult.failure([ErrorCode.MISSING_INPUT_RESPONSE.value])
            self._log_outcome(trace_id, result)
            return result

        request = SiteVerifyRequest(
            secret=self._secret,
            response=response_token,
            remote_ip=remote_ip,
            version=default_version(),
        )
        self._logger.log_event(trace_id, EventType.VERIFY_REQUESTED, {
            "remote_ip": remote_ip,
        })
        self._logger.log_message(
            trace_id=trace_id,
            direction="request",
            message_type="siteverify_submit",
            payload=request.to_form_data(),
        )

        try:
            raw_response = self._client.submit(request)
        except SiteVerifyConnectionError as e:
            self._logger.log_event(trace_id, EventType.CONNECTION_FAILED, {"error": str(e)})
            result = VerificationResult.failure([ErrorCode.CONNECTION_FAILED.value])
            self._log_outcome(trace_id, result)
            return result

        if not raw_response:
            result = VerificationResult.failure([ErrorCode.BAD_RESPONSE.value])
            self._log_outcome(trace_id, result)
            return result

        initial = self._parser.parse(raw_response)
        self._logger.log_event(trace_id, EventType.RESPONSE_PARSED, initial.to_mapping())

        validation_errors = self._checker.check(initial)
        if initial.success and not validation_errors:
            self._log_outcome(trace_id, initial)
            return initial

        if validation_errors:
            self._logger.log_event(
                trace_id,
                EventType.EXPECTATION_FAILED,
                {"error_codes": validation_errors},
            )

        result = VerificationResult.failure(
            list(initial.error_codes) + validation_errors,
            hostname=initial.hostname,
            challenge_ts=initial.challenge_ts,
            apk_package_name=initial.apk_package_name,
            score=initial.score,
            action=initial.action,
        )
        self._log_outcome(trace_id, result)
        return result

    def _log_outcome(self, trace_id: str, result: VerificationResult) -> None:
        self._logger.log_event(
            trace_id,
            EventType.VERIFY_COMPLETED,
            {"success": result.success, "error_codes": list(result.error_codes)},
            metrics={"error_count": len(result.error_codes)},
        )
