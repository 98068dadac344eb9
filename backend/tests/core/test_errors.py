"""Error Vocabulary — verifies enum wire values and envelope shape."""

from hello_service.core.errors import (
    ErrorCategory, ErrorSeverity, build_error_envelope,
)


def test_severity_values_are_wire_strings():
    assert ErrorSeverity.CRITICAL.value == "critical"
    assert ErrorSeverity.ERROR == "error"


def test_envelope_defaults_to_error_severity():
    assert build_error_envelope("X", "msg", ErrorCategory.INTERNAL) == {
        "error": {
            "code": "X",
            "message": "msg",
            "category": "internal",
            "severity": "error",
        },
    }
