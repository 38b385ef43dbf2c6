"""
ISiteVerifyClient Interface

Interface for submitting a SiteVerifyRequest to the verification service.
Transport (HTTP, retries, TLS) lives in the implementation.
"""

from abc import ABC, abstractmethod

from siteverify.application.dtos import SiteVerifyRequest


class SiteVerifyConnectionError(Exception):
    """Raised when the verification service cannot be reached."""
    pass


class ISiteVerifyClient(ABC):
    """
    Interface for the siteverify transport.

    This interface enables dependency inversion: the use case depends
    on this abstraction, not on a concrete HTTP client.
    """

    @abstractmethod
    def submit(self, request: SiteVerifyRequest) -> str:
        """
        Submit request parameters to the service.

        Args:
            request: Parameters to send

        Returns:
            Raw response body text

        Raises:
            SiteVerifyConnectionError: When the service cannot be reached
        """
        pass
