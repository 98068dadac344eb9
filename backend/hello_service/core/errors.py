"""Error Vocabulary — severity and category enums plus the JSON error envelope.

Invariants:
    - Enum values are the wire strings (str, Enum)
    - Envelope never carries tracebacks or exception text

Design Decisions:
    - No exception hierarchy: handlers perform no fallible work, only the
      catch-all handler needs an envelope
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    INTERNAL = "internal"


def build_error_envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity = ErrorSeverity.ERROR,
) -> dict:
    """Standardized REST error body."""
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
        },
    }
