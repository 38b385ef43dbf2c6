"""Value objects for the siteverify domain."""

from .error_codes import ErrorCode
from .verification_result import VerificationResult

__all__ = ["ErrorCode", "VerificationResult"]
