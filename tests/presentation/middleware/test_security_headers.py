"""Test security headers"""

import pytest

from src.presentation.middleware.security import API_CSP, DOCS_CSP


@pytest.mark.asyncio
async def test_api_responses_get_security_headers(client):
    response = await client.get("/")

    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "DENY"
    assert response.headers["referrer-policy"] == "no-referrer"
    assert response.headers["content-security-policy"] == API_CSP
    assert "permissions-policy" in response.headers
    assert "server" not in response.headers


@pytest.mark.asyncio
async def test_hsts_only_for_https_outside_production(client):
    response = await client.get("/")

    assert "strict-transport-security" not in response.headers


@pytest.mark.asyncio
async def test_docs_get_relaxed_csp(client):
    response = await client.get("/docs")

    assert response.status_code == 200
    assert response.headers["content-security-policy"] == DOCS_CSP
