"""
Exception taxonomy for the accessibility report bridge.

Only these errors reach the caller. Per-finding irregularities (unresolvable
paths, suppressed rules, root-level nodes) are skipped without raising.
"""


class A11yBridgeError(Exception):
    """Base bridge exception with a semantic error code."""

    def __init__(self, detail: str, code: str = "A11Y_BRIDGE_ERROR"):
        self.detail = detail
        self.code = code
        super().__init__(detail)


class ParseError(A11yBridgeError):
    """Raised when the markup parser cannot produce any document tree."""

    def __init__(self, detail: str = "Unable to parse HTML content", code: str = "PARSE_ERROR"):
        super().__init__(detail, code)


class MalformedEngineResponseError(A11yBridgeError):
    """Raised when the audit engine response is not the expected structure."""

    def __init__(
        self,
        detail: str = "Audit engine returned a malformed response",
        code: str = "MALFORMED_ENGINE_RESPONSE",
    ):
        super().__init__(detail, code)


class AuditEngineUnavailableError(A11yBridgeError):
    """Raised when the audit engine cannot be reached or answers with an error status."""

    def __init__(
        self,
        detail: str = "Audit engine is unavailable",
        code: str = "AUDIT_ENGINE_UNAVAILABLE",
    ):
        super().__init__(detail, code)
