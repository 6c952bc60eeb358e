"""
RouteDemo Backend — Middleware & Health Tests
==============================================

What:  Request ID propagation, access logging, CORS and the /health route.
"""

import logging

import pytest


class TestRequestID:

    @pytest.mark.asyncio
    async def test_generated_when_absent(self, test_client):
        response = await test_client.get("/")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_client_id_is_echoed(self, test_client):
        response = await test_client.get("/", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"

    @pytest.mark.asyncio
    async def test_present_on_error_pages(self, test_client):
        response = await test_client.get("/blog/show/999", headers={"X-Request-ID": "err-1"})
        assert response.status_code == 404
        assert response.headers["X-Request-ID"] == "err-1"


class TestAccessLog:

    @pytest.mark.asyncio
    async def test_logs_request_line(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="routedemo.access"):
            await test_client.get("/hello/World", headers={"X-Request-ID": "log-1"})

        records = [r for r in caplog.records if r.name == "routedemo.access"]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert records[0].path == "/hello/World"
        assert records[0].request_id == "log-1"

    @pytest.mark.asyncio
    async def test_failures_logged_as_errors(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="routedemo.access"):
            await test_client.post("/feedback", data={"message": ""})

        records = [r for r in caplog.records if r.name == "routedemo.access"]
        assert records[0].levelno == logging.ERROR
        assert records[0].status == 500

    @pytest.mark.asyncio
    async def test_health_is_not_logged(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="routedemo.access"):
            await test_client.get("/health")

        assert not [r for r in caplog.records if r.name == "routedemo.access"]


class TestCORS:

    @pytest.mark.asyncio
    async def test_preflight_from_allowed_origin(self, test_client):
        response = await test_client.options(
            "/feedback",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy(self, test_client):
        response = await test_client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["storage"] == "writable"
        assert body["debug"] is False
        assert body["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_reports_debug_flag(self, debug_client):
        response = await debug_client.get("/health")
        assert response.json()["debug"] is True

    @pytest.mark.asyncio
    async def test_degraded_when_storage_missing(self, app, test_client, storage_dir):
        storage_dir.rmdir()
        response = await test_client.get("/health")
        body = response.json()
        assert body["status"] == "degraded"
        assert body["storage"] == "unwritable"
