"""
Shared fixtures: a local stand-in for the Pwned Passwords range API.
"""

import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from passeval.hibp.models import BreachReport

PASSWORD = "password"
PASSWORD_SHA1 = "5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8"
PASSWORD_PREFIX = "5BAA6"
PASSWORD_SUFFIX = "1E4C9B93F3F0682250B6CF8331B7EE68FD8"


class RangeStub:
    """Records every request and answers with a canned body."""

    def __init__(self):
        self.requests: list[dict] = []
        self.status = 200
        self.body = ""
        self.delay = 0.0
        self.base_url = ""

    async def handle(self, request: web.Request) -> web.Response:
        self.requests.append({
            "method": request.method,
            "path": request.path,
            "query": dict(request.query),
            "headers": dict(request.headers),
            "body": await request.read(),
        })
        if self.delay:
            await asyncio.sleep(self.delay)
        return web.Response(status=self.status, text=self.body)


@pytest.fixture
async def range_stub():
    stub = RangeStub()
    app = web.Application()
    app.router.add_get("/range/{prefix}", stub.handle)
    async with TestServer(app) as server:
        stub.base_url = f"http://{server.host}:{server.port}"
        yield stub


class StubEvaluator:
    """Evaluator double for the HTTP and CLI adapters."""

    def __init__(self, report: BreachReport | None = None, error: Exception | None = None):
        from passeval.config import EvaluatorConfig

        self.config = EvaluatorConfig()
        self.report = report or BreachReport(count=0, hash_prefix=PASSWORD_PREFIX)
        self.error = error
        self.calls = 0

    def evaluate(self, password):
        from passeval.strength.analyzer import analyze

        return analyze(password or "")

    async def verify(self, password):
        self.calls += 1
        if self.error:
            raise self.error
        return self.report

    def verify_sync(self, password):
        return asyncio.run(self.verify(password))
