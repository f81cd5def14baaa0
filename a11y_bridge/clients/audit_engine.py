"""
HTTP client for the accessibility audit engine sidecar.

The engine accepts a full HTML document on POST /check and answers with
JSON: ``{"results": [...]}``.

Usage:
    client = get_audit_engine_client()
    payload = await client.check(html)
"""

from typing import Any, Dict, Optional

import httpx
import structlog

from ..config import Settings, get_settings
from ..core.exceptions import AuditEngineUnavailableError, MalformedEngineResponseError

logger = structlog.get_logger(__name__)


class AuditEngineClient:
    """
    HTTP client for the audit engine.

    Holds one pooled ``httpx.AsyncClient``; call ``close()`` when done.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the audit engine client.

        Args:
            base_url: Base URL of the engine. Defaults to AUDIT_ENGINE_URL.
            settings: Settings instance (defaults to the cached settings)
            transport: Optional httpx transport, used by tests
        """
        self.settings = settings or get_settings()
        self.base_url = (base_url or self.settings.audit_engine_url).rstrip("/")
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        logger.info("AuditEngineClient initialized", base_url=self.base_url)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(
                    self.settings.audit_engine_timeout_seconds,
                    connect=self.settings.audit_engine_connect_timeout_seconds,
                ),
                transport=self._transport,
            )
        return self._client

    async def check(self, html: str) -> Dict[str, Any]:
        """
        Submit a document to the engine.

        Args:
            html: Serialized HTML document

        Returns:
            Decoded JSON payload

        Raises:
            AuditEngineUnavailableError: On transport failure or error status
            MalformedEngineResponseError: If the body is not JSON
        """
        client = await self._get_client()

        logger.info("Submitting document to audit engine", document_length=len(html))

        try:
            response = await client.post(
                "/check",
                content=html.encode("utf-8"),
                headers={"Content-Type": "text/html; charset=utf-8"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Audit engine returned an error status",
                status_code=e.response.status_code,
                base_url=self.base_url,
            )
            raise AuditEngineUnavailableError(
                f"Audit engine returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error("Audit engine request failed", error=str(e), base_url=self.base_url)
            raise AuditEngineUnavailableError(f"Audit engine request failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            logger.error("Audit engine response is not JSON", body_length=len(response.content))
            raise MalformedEngineResponseError("Audit engine response is not valid JSON") from e

    async def health_check(self) -> dict:
        """
        Check audit engine health status.

        Raises the same errors as ``check()``.
        """
        client = await self._get_client()

        try:
            response = await client.get("/health")
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("Audit engine health check failed", status_code=e.response.status_code)
            raise AuditEngineUnavailableError(
                f"Audit engine health check returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Audit engine unreachable", error=str(e), base_url=self.base_url)
            raise AuditEngineUnavailableError(f"Audit engine health check failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise MalformedEngineResponseError("Audit engine health response is not valid JSON") from e

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None


# Singleton instance
_client: Optional[AuditEngineClient] = None


def get_audit_engine_client() -> AuditEngineClient:
    """
    Get the global AuditEngineClient instance.

    Creates a new instance on first call.
    """
    global _client
    if _client is None:
        _client = AuditEngineClient()
    return _client


async def close_audit_engine_client() -> None:
    """Close the global AuditEngineClient."""
    global _client
    if _client:
        await _client.close()
        _client = None
