import asyncio

import httpx
import pytest

from conftest import HEALTH_BODY, HELLO_BODY
from status_api.core.config import AppSettings
from status_api.main import create_app

EXPECTED = {"/api/health": HEALTH_BODY, "/api/hello": HELLO_BODY}


@pytest.mark.asyncio
async def test_interleaved_concurrent_requests_match_contracts() -> None:
    application = create_app(AppSettings(_env_file=None))
    paths = [("/api/health", "/api/hello")[index % 2] for index in range(100)]

    transport = httpx.ASGITransport(app=application)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        responses = await asyncio.gather(*(client.get(path) for path in paths))

    assert len(responses) == 100
    for path, response in zip(paths, responses):
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == EXPECTED[path]
