"""
Shared fixtures for the accessibility bridge tests.

No network access: the audit engine is replaced by httpx.MockTransport.
"""

from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from a11y_bridge.clients.audit_engine import AuditEngineClient
from a11y_bridge.config import Settings


def make_result(
    rule_id: str,
    dom: str,
    reason_id: str = "r1",
    message: str = "m",
    message_args: Optional[List[Any]] = None,
) -> Dict[str, Any]:
    """Build one audit engine result entry as the engine sends it."""
    return {
        "ruleId": rule_id,
        "path": {"dom": dom},
        "reasonId": reason_id,
        "message": message,
        "messageArgs": message_args or [],
    }


@pytest.fixture
def result_factory() -> Callable[..., Dict[str, Any]]:
    return make_result


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        audit_engine_url="http://engine.test",
        background_color="#fafafa",
        text_color="#2d3b45",
    )


@pytest.fixture
def engine_client_factory(settings):
    """
    Build an AuditEngineClient whose transport answers with ``handler``.

    Requests seen by the transport are appended to ``client.requests``.
    """

    def _factory(handler: Callable[[httpx.Request], httpx.Response]) -> AuditEngineClient:
        seen: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        client = AuditEngineClient(settings=settings, transport=httpx.MockTransport(_record))
        client.requests = seen
        return client

    return _factory
