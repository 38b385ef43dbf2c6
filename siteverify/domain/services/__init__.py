"""
Domain Services for siteverify

These services contain pure business logic with no infrastructure dependencies.
"""

from .response_parser import ResponseParser, parse_response
from .expectation_checker import (
    ExpectationChecker,
    ResponseExpectations,
    parse_challenge_ts,
)

__all__ = [
    "ResponseParser",
    "parse_response",
    "ExpectationChecker",
    "ResponseExpectations",
    "parse_challenge_ts",
]
