"""Pytest configuration and fixtures for fetch_compose_cache_control tests."""
import httpx
import pytest

from cache_control_policy import CacheControlPolicyConfig


class MockAsyncTransport(httpx.AsyncBaseTransport):
    """Mock async transport for testing."""

    def __init__(
        self,
        response_status: int = 200,
        response_content: bytes = b'{"success": true}',
        response_headers: dict | None = None,
    ) -> None:
        self.response_status = response_status
        self.response_content = response_content
        self.response_headers = (
            response_headers if response_headers is not None else {"content-type": "application/json"}
        )
        self.requests: list[httpx.Request] = []
        self.closed = False

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Handle the async request and return a mock response."""
        self.requests.append(request)
        return httpx.Response(
            status_code=self.response_status,
            headers=self.response_headers,
            content=self.response_content,
        )

    async def aclose(self) -> None:
        """Close the transport."""
        self.closed = True


class MockSyncTransport(httpx.BaseTransport):
    """Mock sync transport for testing."""

    def __init__(
        self,
        response_status: int = 200,
        response_content: bytes = b'{"success": true}',
        response_headers: dict | None = None,
    ) -> None:
        self.response_status = response_status
        self.response_content = response_content
        self.response_headers = (
            response_headers if response_headers is not None else {"content-type": "application/json"}
        )
        self.requests: list[httpx.Request] = []
        self.closed = False

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Handle the sync request and return a mock response."""
        self.requests.append(request)
        return httpx.Response(
            status_code=self.response_status,
            headers=self.response_headers,
            content=self.response_content,
        )

    def close(self) -> None:
        """Close the transport."""
        self.closed = True


class ErrorMockAsyncTransport(httpx.AsyncBaseTransport):
    """Mock async transport that raises."""

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)


@pytest.fixture
def scenario_config():
    return CacheControlPolicyConfig(
        rules=[("text/html", "no-cache"), ("image/*", "public, max-age=86400")],
        default="no-store",
    )


@pytest.fixture
def mock_async_transport_factory():
    return MockAsyncTransport


@pytest.fixture
def mock_sync_transport_factory():
    return MockSyncTransport


@pytest.fixture
def error_async_transport():
    return ErrorMockAsyncTransport()
