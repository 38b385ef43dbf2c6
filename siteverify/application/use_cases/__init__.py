"""Use cases orchestrating the domain services."""
from .verify_response_use_case import VerifyResponseUseCase, default_version

__all__ = ["VerifyResponseUseCase", "default_version"]
