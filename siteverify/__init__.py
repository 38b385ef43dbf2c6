"""
siteverify Core Package

Parsing and verification of human-verification ("siteverify") service
responses.

Architecture:
- Domain: VerificationResult value object, ResponseParser, ExpectationChecker
- Application: SiteVerifyRequest DTO, ISiteVerifyClient port, VerifyResponseUseCase
- Transport is supplied by the caller through ISiteVerifyClient
"""

__version__ = "0.1.0"

from .domain.value_objects import ErrorCode, VerificationResult
from .domain.services import (
    ResponseParser, parse_response, ExpectationChecker, ResponseExpectations
)
from .application.dtos import SiteVerifyRequest
from .application.interfaces import ISiteVerifyClient, SiteVerifyConnectionError
from .application.use_cases import VerifyResponseUseCase
