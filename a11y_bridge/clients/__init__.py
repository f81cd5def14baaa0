"""HTTP clients for external services."""

from .audit_engine import AuditEngineClient, close_audit_engine_client, get_audit_engine_client

__all__ = ["AuditEngineClient", "close_audit_engine_client", "get_audit_engine_client"]
