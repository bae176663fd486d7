"""
Test Request Pipeline
Checks stage ordering, the request log line and error containment.
"""
import logging
import httpx
import pytest
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from techhive.modules.pipeline import error_containment, install_pipeline

INTERNAL_ERROR = {"error": "Internal server error."}


def test_throw_endpoint_is_contained(client, auth_headers, caplog):
    caplog.set_level(logging.INFO)

    response = client.get("/api/test/throw", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == INTERNAL_ERROR
    assert "test exception" not in response.text

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].getMessage() == "Unhandled exception occurred while processing GET /api/test/throw"
    assert errors[0].exc_info is not None
    # the faulting request never reaches the success log line
    assert not any(r.getMessage().startswith("HTTP GET /api/test/throw") for r in caplog.records)


def test_throw_endpoint_still_requires_token(client):
    assert client.get("/api/test/throw").status_code == 401


def test_request_log_line(client, auth_headers, caplog):
    caplog.set_level(logging.INFO, logger="techhive.pipeline")

    client.get("/api/users/1", headers=auth_headers)
    client.get("/api/users/77", headers=auth_headers)

    messages = [r.getMessage() for r in caplog.records if r.name == "techhive.pipeline"]
    assert "HTTP GET /api/users/1 => 200" in messages
    assert "HTTP GET /api/users/77 => 404" in messages


def test_validation_errors_logged_not_contained(client, auth_headers, caplog):
    caplog.set_level(logging.INFO, logger="techhive.pipeline")

    response = client.post("/api/users", json={}, headers=auth_headers)

    assert response.status_code == 400
    messages = [r.getMessage() for r in caplog.records if r.name == "techhive.pipeline"]
    assert messages == ["HTTP POST /api/users => 400"]


@pytest.mark.asyncio
async def test_stages_run_outermost_first():
    calls = []
    app = FastAPI()

    def recording(name, short_circuit=False):
        async def stage(request, call_next):
            calls.append(f"{name}:before")
            if short_circuit:
                return JSONResponse(status_code=418, content={"error": name})
            response = await call_next(request)
            calls.append(f"{name}:after")
            return response
        return stage

    @app.get("/ping")
    async def ping():
        calls.append("handler")
        return {"ok": True}

    install_pipeline(app, [recording("outer"), recording("middle", short_circuit=True), recording("inner")])

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        response = await http.get("/ping")

    assert response.status_code == 418
    assert calls == ["outer:before", "middle:before", "outer:after"]


@pytest.mark.asyncio
async def test_containment_catches_faults_from_inner_stages(caplog):
    app = FastAPI()

    async def broken_stage(request, call_next):
        raise RuntimeError("stage blew up")

    @app.get("/ping")
    async def ping():
        return {"ok": True}

    install_pipeline(app, [error_containment, broken_stage])

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        response = await http.get("/ping")

    assert response.status_code == 500
    assert response.json() == INTERNAL_ERROR
    assert "stage blew up" not in response.text
