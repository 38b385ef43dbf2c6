"""
Unit tests for ResponseParser

Covers the four outcomes: success, structured failure, unknown failure
and malformed input.
"""

import json

import pytest

from siteverify.domain.services import ResponseParser, parse_response
from siteverify.domain.value_objects import ErrorCode, VerificationResult


class TestResponseParserSuccess:
    """Payloads reporting success."""

    def test_parse_full_success_payload(self, parser, success_body):
        """All optional fields are carried into the result."""
        result = parser.parse(json.dumps(success_body))

        assert result.success is True
        assert result.error_codes == ()
        assert result.hostname == "example.com"
        assert result.challenge_ts == "2024-01-01T00:00:00Z"
        assert result.score == 0.9
        assert result.action == "login"
        assert result.apk_package_name == ""

    def test_success_ignores_error_codes(self, parser):
        """A success never carries error codes, even if the service sent some."""
        result = parser.parse('{"success": true, "error-codes": ["timeout-or-duplicate"]}')

        assert result.success is True
        assert result.error_codes == ()

    def test_success_defaults_missing_strings_to_empty(self, parser):
        result = parser.parse('{"success": true}')

        assert result.hostname == ""
        assert result.challenge_ts == ""
        assert result.apk_package_name == ""
        assert result.action == ""
        assert result.score is None

    def test_numeric_string_score_is_converted(self, parser):
        result = parser.parse('{"success": true, "score": "0.7"}')

        assert result.score == pytest.approx(0.7)
        assert isinstance(result.score, float)

    def test_integer_score_is_converted(self, parser):
        result = parser.parse('{"success": true, "score": 1}')

        assert result.score == 1.0
        assert isinstance(result.score, float)

    def test_non_numeric_score_is_dropped(self, parser):
        result = parser.parse('{"success": true, "score": "high"}')

        assert result.score is None

    @pytest.mark.parametrize("score", [
        '"NaN"', '"inf"', '"-Infinity"', "NaN", "Infinity", "1" + "0" * 400,
    ])
    def test_non_finite_score_is_dropped(self, parser, score):
        result = parser.parse('{"success": true, "score": %s}' % score)

        assert result.success is True
        assert result.score is None
        json.loads(result.to_json())

    def test_null_string_fields_default_to_empty(self, parser):
        result = parser.parse('{"success": true, "hostname": null, "action": null}')

        assert result.hostname == ""
        assert result.action == ""

    def test_apk_package_name_is_extracted(self, parser):
        result = parser.parse('{"success": true, "apk_package_name": "com.example.app"}')

        assert result.apk_package_name == "com.example.app"

    def test_bytes_body_is_accepted(self, parser):
        result = parser.parse(b'{"success": true, "hostname": "example.com"}')

        assert result.success is True
        assert result.hostname == "example.com"


class TestResponseParserStrictSuccess:
    """Only the literal boolean true counts as success."""

    @pytest.mark.parametrize("value", ['1', '"true"', '"1"', '[1]', '{"a": 1}'])
    def test_truthy_non_boolean_is_not_success(self, parser, value):
        result = parser.parse('{"success": %s}' % value)

        assert result.success is False
        assert result.error_codes == (ErrorCode.UNKNOWN_ERROR.value,)


class TestResponseParserStructuredFailure:
    """Failures with an error-codes array."""

    def test_error_codes_surfaced_verbatim(self, parser):
        result = parser.parse('{"success": false, "error-codes": ["bad-secret"]}')

        assert result.success is False
        assert result.error_codes == ("bad-secret",)

    def test_error_code_order_is_preserved(self, parser):
        result = parser.parse(
            '{"success": false, "error-codes": ["missing-input-secret", "invalid-input-response"]}'
        )

        assert result.error_codes == ("missing-input-secret", "invalid-input-response")

    def test_failure_keeps_optional_fields(self, parser):
        result = parser.parse(
            '{"success": false, "error-codes": ["timeout-or-duplicate"], '
            '"hostname": "example.com", "score": 0.1, "action": "signup"}'
        )

        assert result.hostname == "example.com"
        assert result.score == 0.1
        assert result.action == "signup"

    def test_non_string_error_codes_rendered_as_text(self, parser):
        result = parser.parse('{"success": false, "error-codes": ["bad-secret", 42]}')

        assert result.error_codes == ("bad-secret", "42")


class TestResponseParserUnknownFailure:
    """Failures without a usable error-codes array."""

    def test_missing_error_codes(self, parser):
        result = parser.parse('{"success": false}')

        assert result.success is False
        assert result.error_codes == (ErrorCode.UNKNOWN_ERROR.value,)

    def test_empty_error_codes(self, parser):
        result = parser.parse('{"success": false, "error-codes": []}')

        assert result.error_codes == ("unknown-error",)

    def test_underscored_error_codes_key_is_ignored(self, parser):
        result = parser.parse('{"success": false, "error_codes": ["bad-secret"]}')

        assert result.error_codes == ("unknown-error",)

    def test_error_codes_not_an_array(self, parser):
        result = parser.parse('{"success": false, "error-codes": "bad-secret"}')

        assert result.error_codes == ("unknown-error",)

    def test_missing_success_key(self, parser):
        result = parser.parse('{"hostname": "example.com"}')

        assert result.success is False
        assert result.error_codes == ("unknown-error",)
        assert result.hostname == "example.com"


class TestResponseParserMalformedInput:
    """Payloads that are not a non-empty JSON object."""

    @pytest.mark.parametrize("raw", [
        "not json",
        "",
        "{}",
        "null",
        "false",
        "[]",
        '["success"]',
        "42",
        '"success"',
        '{"success": true',
    ])
    def test_malformed_payload(self, parser, raw):
        result = parser.parse(raw)

        assert result.success is False
        assert result.error_codes == ("invalid-input-response",)
        assert result.hostname == ""
        assert result.challenge_ts == ""
        assert result.apk_package_name == ""
        assert result.score is None
        assert result.action == ""

    @pytest.mark.parametrize("raw", [
        "[" * 100000 + "]" * 100000,
        '{"a": ' * 100000 + "1" + "}" * 100000,
    ])
    def test_deeply_nested_payload_is_malformed(self, parser, raw):
        result = parser.parse(raw)

        assert result.error_codes == ("invalid-input-response",)

    def test_none_input_is_malformed(self, parser):
        result = parser.parse(None)

        assert result.error_codes == (ErrorCode.INVALID_JSON.value,)


class TestParseResponse:
    """Module-level convenience function."""

    def test_parse_response_uses_default_parser(self):
        result = parse_response('{"success": true}')

        assert isinstance(result, VerificationResult)
        assert result.success is True

    def test_parse_response_matches_parser(self, parser):
        raw = '{"success": false, "error-codes": ["invalid-input-secret"]}'

        assert parse_response(raw) == parser.parse(raw)


class TestParserMappingRoundTrip:
    """to_mapping() on parsed results."""

    @pytest.mark.parametrize("raw", [
        '{"success": true, "challenge_ts": "2024-01-01T00:00:00Z", "hostname": "example.com"}',
        '{"success": false, "error-codes": ["bad-secret"]}',
        '{"success": false}',
        "not json",
    ])
    def test_mapping_has_all_keys(self, parser, raw):
        result = parser.parse(raw)
        mapping = result.to_mapping()

        assert set(mapping) == {
            "success", "hostname", "challenge_ts", "apk_package_name",
            "score", "action", "error-codes",
        }
        assert mapping["error-codes"] == list(result.error_codes)
        assert mapping["challenge_ts"] == result.challenge_ts
