"""Pytest configuration and shared fixtures."""
import asyncio
import contextlib
import json
import os

import httpx
import pytest

from edupath.assistant import GatewaySettings, GeminiGatewayClient, GenerationClient


class GatedClient(GenerationClient):
    """Generation client whose reply is held until `release()` is called."""

    def __init__(self, reply: str = "Entropy measures disorder.") -> None:
        self.reply = reply
        self.calls: list[str] = []
        self._gate = asyncio.Event()

    def release(self) -> None:
        self._gate.set()

    async def generate(self, user_text: str) -> str:
        self.calls.append(user_text)
        await self._gate.wait()
        return self.reply

    async def close(self) -> None:
        pass


class FailingClient(GenerationClient):
    """Generation client that breaks the contract by raising."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def generate(self, user_text: str) -> str:
        self.calls.append(user_text)
        raise RuntimeError("client bug")

    async def close(self) -> None:
        pass


class RecordingCallback:
    """Debug callback that stores (level, component, message) tuples."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, str]] = []

    def __call__(self, level: str, component: str, message: str) -> None:
        self.records.append((level, component, message))

    def levels(self, component: str | None = None) -> list[str]:
        return [level for level, comp, _ in self.records if component in (None, comp)]


@pytest.fixture
def settings():
    """Settings with a credential and the default endpoint."""
    return GatewaySettings(api_key="test-key")


@pytest.fixture
def offline_settings():
    """Settings without a credential."""
    return GatewaySettings(api_key=None)


@pytest.fixture
def gateway(settings):
    """Build a gateway client whose HTTP traffic goes to `handler`.

    Usage:
        client, requests = gateway(lambda request: httpx.Response(200, json={...}))
    """
    clients = []

    def _build(handler, client_settings=None):
        requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        clients.append(http_client)
        client = GeminiGatewayClient(client_settings or settings, http_client=http_client)
        return client, requests

    return _build


@pytest.fixture
async def delayed_gateway(monkeypatch):
    """Start a local HTTP server that answers every request after a delay.

    Usage:
        base_url = await delayed_gateway(0.5, gemini_reply("answer"))
    """
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)
    servers = []

    async def _start(delay: float, body: dict) -> str:
        async def _handle(reader, writer):
            head = await reader.readuntil(b"\r\n\r\n")
            length = 0
            for line in head.decode("latin-1").split("\r\n"):
                name, _, value = line.partition(":")
                if name.strip().lower() == "content-length":
                    length = int(value)
            await reader.readexactly(length)
            await asyncio.sleep(delay)

            payload = json.dumps(body).encode()
            head = (
                "HTTP/1.1 200 OK\r\n"
                "Content-Type: application/json\r\n"
                f"Content-Length: {len(payload)}\r\n"
                "Connection: close\r\n\r\n"
            )
            # The client may have given up already
            with contextlib.suppress(ConnectionError):
                writer.write(head.encode() + payload)
                await writer.drain()
            writer.close()

        server = await asyncio.start_server(_handle, "127.0.0.1", 0)
        servers.append(server)
        port = server.sockets[0].getsockname()[1]
        return f"http://127.0.0.1:{port}"

    yield _start

    for server in servers:
        server.close()
        await server.wait_closed()


@pytest.fixture
def gated_client():
    return GatedClient()


@pytest.fixture
def failing_client():
    return FailingClient()


@pytest.fixture
def debug_records():
    return RecordingCallback()


@pytest.fixture(scope="session")
def api_key():
    """Return the real gateway key from environment, if any."""
    return os.getenv("GEMINI_API_KEY")


def gemini_reply(text: str) -> dict:
    """Build a well-formed generateContent response body."""
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}
