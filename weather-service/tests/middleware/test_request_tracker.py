"""
Tests for the request tracker middleware.
"""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from cwa_weather.middleware.request_tracker import RequestTrackerMiddleware


def build_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestTrackerMiddleware)

    @app.get("/ok")
    async def ok():
        return {"ok": True}

    @app.get("/fail")
    async def fail():
        raise ValueError("something broke")

    return app


class TestRequestTrackerMiddleware:
    """Test cases for RequestTrackerMiddleware."""

    def test_adds_tracking_headers(self):
        """Test request ID and processing time headers are set."""
        response = TestClient(build_app()).get("/ok")

        assert response.status_code == 200
        assert response.headers["X-Request-ID"].startswith("req_")
        assert float(response.headers["X-Process-Time"]) >= 0

    def test_unhandled_exception_envelope(self):
        """Test uncaught errors are turned into a JSON 500."""
        response = TestClient(build_app()).get("/fail")

        assert response.status_code == 500
        assert response.json() == {
            "error": "Internal server error",
            "message": "something broke",
        }
        assert response.headers["X-Request-ID"].startswith("req_")
