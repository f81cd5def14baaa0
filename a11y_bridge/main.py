"""
Accessibility Report Bridge - FastMCP Server.

Exposes HTML accessibility scanning as an MCP tool. The heavy lifting is
done by the external audit engine; this server shapes its findings into a
UDOIT-style report.

Usage:
    python -m a11y_bridge

Environment Variables:
    AUDIT_ENGINE_URL: Base URL of the audit engine (default: http://host.docker.internal:3000)
    SERVICE_NAME: Server name (default: a11y-bridge)
    LOG_LEVEL: Log level (default: INFO)
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional
from uuid import uuid4

import structlog
from fastmcp import FastMCP

from .clients.audit_engine import AuditEngineClient, close_audit_engine_client, get_audit_engine_client
from .config import get_settings
from .core.exceptions import A11yBridgeError
from .core.logging import setup_logging
from .services.scan_service import ScanService

logger = structlog.get_logger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(server: FastMCP):
    """Server lifespan - releases the engine connection pool on shutdown."""
    logger.info("Starting accessibility report bridge", service=settings.service_name)
    try:
        yield
    finally:
        logger.info("Shutting down accessibility report bridge")
        await close_audit_engine_client()


mcp = FastMCP(
    name=settings.service_name,
    instructions="""
    Accessibility Report Bridge.

    Scans an HTML fragment with the configured accessibility audit engine and
    returns a report with:
    - issues: offending node, parent preview and rule metadata, in engine order
    - issueCounts: occurrences per rule
    - errors: reserved, always empty

    Elements carrying the ignore class and rules in the skip list are never
    reported.
    """,
    lifespan=lifespan,
)

# Singleton instance
_service: Optional[ScanService] = None


def get_scan_service() -> ScanService:
    """Get the shared ScanService, creating it on first call."""
    global _service
    if _service is None:
        _service = ScanService(client=get_audit_engine_client())
    return _service


async def engine_status(client: Optional[AuditEngineClient] = None) -> str:
    """Return "OK" when the audit engine answers its health check, else "DEGRADED: <reason>"."""
    client = client or get_audit_engine_client()
    try:
        await client.health_check()
    except A11yBridgeError as e:
        return f"DEGRADED: {e.detail}"
    return "OK"


async def run_scan(html: str, service: Optional[ScanService] = None) -> Dict[str, Any]:
    """
    Scan ``html`` and wrap the outcome in a status envelope.

    Fatal failures (unparseable markup, unreachable engine, malformed engine
    answer) come back as ``status="error"`` with the error code.
    """
    start_time = time.time()
    scan_id = str(uuid4())
    service = service or get_scan_service()

    logger.info("Starting HTML scan", scan_id=scan_id, html_length=len(html or ""))

    try:
        report = await service.scan_html(html)
    except A11yBridgeError as e:
        logger.error("HTML scan failed", scan_id=scan_id, code=e.code, error=e.detail)
        return {
            "scan_id": scan_id,
            "status": "error",
            "error": {"code": e.code, "message": e.detail},
            "report": None,
            "duration_ms": int((time.time() - start_time) * 1000),
        }

    duration_ms = int((time.time() - start_time) * 1000)
    logger.info(
        "HTML scan completed",
        scan_id=scan_id,
        total_issues=len(report.issues) if report else 0,
        duration_ms=duration_ms,
    )

    return {
        "scan_id": scan_id,
        "status": "completed",
        "error": None,
        "report": report.to_dict() if report else None,
        "duration_ms": duration_ms,
    }


# ============================================================================
# MCP Tools
# ============================================================================


@mcp.tool()
async def scan_html(html: str) -> Dict[str, Any]:
    """
    Scan an HTML fragment for accessibility issues.

    Args:
        html: HTML fragment (typically a page body)

    Returns:
        Envelope with scan_id, status and the report (issues, issueCounts, errors)
    """
    return await run_scan(html)


@mcp.resource("health://status")
async def health_check() -> str:
    """Health check resource; reports the audit engine as well."""
    return await engine_status()


def run():
    """Entry point for running the server."""
    setup_logging(get_settings().log_level)
    mcp.run()


if __name__ == "__main__":
    run()
