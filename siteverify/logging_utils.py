import logging
import json
import os
import hashlib
import time
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger
from .config import get_siteverify_config
from .models import LogEntry, ComponentType, EventType

# Configuration for full payload logging
ENABLE_FULL_PAYLOAD_LOGGING = os.getenv("ENABLE_FULL_PAYLOAD_LOGGING", "true").lower() == "true"
MAX_PAYLOAD_SIZE_BYTES = int(os.getenv("MAX_PAYLOAD_SIZE_BYTES", "100000"))

# Never written to logs, even with full payload logging on
REDACTED_KEYS = {"secret"}


class SiteVerifyJSONFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(SiteVerifyJSONFormatter, self).add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = time.time()
        if log_record.get('level'):
            log_record['level'] = log_record['level'].upper()
        else:
            log_record['level'] = record.levelname


def get_logger(name: str):
    logger = logging.getLogger(name)
    # getLogger returns the same object per name; attach the handler once
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = SiteVerifyJSONFormatter('%(timestamp)s %(level)s %(name)s %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    level = get_siteverify_config().get('logging', {}).get('level', 'INFO')
    logger.setLevel(level)
    logger.propagate = False
    return logger


def redact(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of payload with secret-bearing keys masked."""
    return {
        key: ("***" if key in REDACTED_KEYS else value)
        for key, value in payload.items()
    }


class StructuredLogger:
    def __init__(self, component: ComponentType):
        self.logger = get_logger(component.value)
        self.component = component

    def hash_payload(self, payload: Any) -> str:
        """Create a hash of the payload for audit."""
        dumped = json.dumps(payload, sort_keys=True, default=str)
        return hashlib.md5(dumped.encode()).hexdigest()[:16]

    def log_event(self,
                  trace_id: str,
                  event_type: EventType,
                  payload: Any,
                  metrics: Dict[str, Any] = None):

        if isinstance(payload, dict):
            payload = redact(payload)
        payload_hash = self.hash_payload(payload)

        entry = LogEntry(
            trace_id=trace_id,
            component=self.component,
            event_type=event_type,
            payload_hash=payload_hash,
            metrics=metrics or {},
            message=str(payload)[:200]  # Log a snippet for debug
        )

        self.logger.info(json.dumps(entry.model_dump(), default=str))

    def log_message(self,
                    trace_id: str,
                    direction: str,
                    message_type: str,
                    payload: Dict[str, Any],
                    metadata: Optional[Dict] = None):
        """
        Log full message content with trace correlation.

        Args:
            trace_id: Trace ID for correlation
            direction: "request" | "response" | "internal"
            message_type: Descriptive message type (e.g., "siteverify_submit")
            payload: Full message payload (request or response)
            metadata: Additional metadata (e.g., remote_ip, timing)
        """
        payload = redact(payload)

        if not ENABLE_FULL_PAYLOAD_LOGGING:
            # Fall back to hash-only logging
            self.logger.info(json.dumps({
                "trace_id": trace_id,
                "component": self.component.value,
                "direction": direction,
                "message_type": message_type,
                "payload_hash": self.hash_payload(payload),
                "metadata": metadata or {}
            }, default=str))
            return

        payload_str = json.dumps(payload, default=str)
        payload_size = len(payload_str.encode('utf-8'))

        # Oversized payloads are replaced by a truncated text rendering
        truncated = payload_size > MAX_PAYLOAD_SIZE_BYTES
        logged_payload: Any = payload_str[:MAX_PAYLOAD_SIZE_BYTES] if truncated else payload

        log_entry = {
            "trace_id": trace_id,
            "component": self.component.value,
            "direction": direction,
            "message_type": message_type,
            "content_size_bytes": payload_size,
            "truncated": truncated,
            "metadata": metadata or {}
        }

        if direction == "request":
            log_entry["request_payload"] = logged_payload
        elif direction == "response":
            log_entry["response_payload"] = logged_payload
        else:  # internal
            log_entry["internal_payload"] = logged_payload

        self.logger.info(json.dumps(log_entry, default=str))
