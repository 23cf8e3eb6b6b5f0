"""Tests for the custom middleware example."""

import asyncio

from lizard.testing import TestClient


class TestCustomMiddleware:
    """Verify timing, rate limit and route middleware."""

    async def test_index_returns_ok(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/")
            assert response.status == 200
            assert response.text == "OK"

    async def test_slow_route_has_timing(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/slow")
            assert response.text == "OK"
            value = response.header("x-response-time")
            assert value is not None
            assert value.endswith("s")
            assert float(value[:-1]) >= 0.1

    async def test_rate_limit_exceeded_returns_429(self, example_app) -> None:
        async with TestClient(example_app) as client:
            # Exhaust the limit (5 requests per 60s)
            for _ in range(5):
                response = await client.get("/")
                assert response.status == 200
            response = await client.get("/")
            assert response.status == 429
            assert response.text == "Too Many Requests"
            # The short-circuit ends the chain before timing post-processes
            assert response.header("x-response-time") is None

    async def test_api_key_rejected(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/keyed", headers={"X-Api-Key": "wrong"})
            assert response.status == 403
            assert response.json() == {"error": "bad api key"}

    async def test_api_key_accepted(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/keyed", headers={"X-Api-Key": "letmein"})
            assert response.json() == {"client": "letmein"}


class TestRateLimiterMemory:
    async def test_idle_clients_are_forgotten(self, example_module) -> None:
        limiter = example_module.RateLimiter(max_requests=5, window=0.05)
        app = example_module.App()
        app.use(limiter)
        app.get("/", example_module.index)

        async with TestClient(app) as client:
            await client.get("/", headers={"X-Forwarded-For": "1.1.1.1"})
            assert set(limiter._counts) == {"1.1.1.1"}
            await asyncio.sleep(0.06)
            await client.get("/", headers={"X-Forwarded-For": "2.2.2.2"})

        assert set(limiter._counts) == {"2.2.2.2"}
