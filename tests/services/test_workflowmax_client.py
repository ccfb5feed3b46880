# -*- coding: utf-8 -*-
"""
Tests for the WorkflowMax client.

HTTP is stubbed with unittest.mock; no request leaves the test.

Tests cover:
- Read-only enforcement before any side effect
- Authorization state and token storage
- Error mapping (401, other non-2xx, transport failures)
- OAuth authorize / code exchange / refresh
- Job queries and sync into the local database
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch
from urllib.parse import parse_qs, urlparse

import pytest
import requests

from repositories.collection_repository import ProjectRepository
from services.exceptions import (
    ApiException,
    AuthorizationError,
    NetworkException,
    ReadOnlyViolationError,
)
from services.pkce import generate_code_challenge
from services.workflowmax_client import WorkflowMaxClient, WorkflowMaxConfig
from utils.datetime_utils import to_epoch_ms


NOW = datetime(2025, 1, 15, 9, 0, tzinfo=timezone.utc)
API_BASE = "https://api.example.test/workflowmax/3.0"
TOKEN_ENDPOINT = "https://identity.example.test/connect/token"


def fixed_clock():
    return NOW


def make_response(status_code=200, payload=None, text=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if payload is None:
        response.json.side_effect = ValueError("No JSON")
        response.text = text or ""
    else:
        response.json.return_value = payload
        response.text = text or str(payload)
    return response


@pytest.fixture
def config():
    return WorkflowMaxConfig(
        client_id="client-123",
        redirect_uri="http://localhost:8888/oauth-callback.html",
        auth_endpoint="https://login.example.test/authorize",
        token_endpoint=TOKEN_ENDPOINT,
        api_base=API_BASE,
        scope="workflowmax offline_access",
        token_proxy_url="",
        timeout=5,
    )


@pytest.fixture
def client(store, session_store, config):
    return WorkflowMaxClient(store, session_store, config=config, clock=fixed_clock)


@pytest.fixture
def authorized_client(client, store):
    store.set("wfm_access_token", "access-1")
    store.set("wfm_refresh_token", "refresh-1")
    store.set("wfm_token_expires_at", str(to_epoch_ms(NOW) + 3600 * 1000))
    return client


class TestReadOnly:
    """Test that only GET requests are ever sent."""

    @pytest.mark.parametrize("method", ["POST", "PUT", "DELETE", "patch"])
    def test_non_get_rejected_without_side_effects(self, authorized_client, store, method):
        before = list(store)

        with patch("services.workflowmax_client.requests.get") as mock_get:
            with pytest.raises(ReadOnlyViolationError) as exc_info:
                authorized_client.api_request("/job.api/list", method=method)

        mock_get.assert_not_called()
        assert list(store) == before
        assert exc_info.value.method == method.upper()

    def test_read_only_checked_before_authorization(self, client):
        """Test an unauthorized write attempt still reports the write."""
        with pytest.raises(ReadOnlyViolationError):
            client.api_request("/job.api/list", method="POST")


class TestAuthorizationState:
    """Test token storage and authorization checks."""

    def test_not_authorized_without_token(self, client):
        assert client.is_authorized() is False

    def test_authorized_with_unexpired_token(self, authorized_client):
        assert authorized_client.is_authorized() is True

    def test_expired_token(self, client, store):
        store.set("wfm_access_token", "access-1")
        store.set("wfm_token_expires_at", str(to_epoch_ms(NOW) - 1))

        assert client.is_authorized() is False

    def test_save_tokens_computes_expiry(self, client, store):
        client.save_tokens({"access_token": "a", "refresh_token": "r", "expires_in": 1800})

        assert store.get("wfm_token_expires_at") == str(to_epoch_ms(NOW) + 1800 * 1000)
        assert client.refresh_token == "r"

    def test_save_tokens_without_refresh_keeps_old(self, authorized_client, store):
        authorized_client.save_tokens({"access_token": "a2", "expires_in": 60})

        assert store.get("wfm_refresh_token") == "refresh-1"
        assert store.get("wfm_access_token") == "a2"

    def test_clear_tokens(self, authorized_client, store, session_store):
        session_store.set("wfm_client_secret", "s3cret")
        session_store.set("wfm_code_verifier", "v")

        authorized_client.clear_tokens()

        assert store.get("wfm_access_token") is None
        assert store.get("wfm_refresh_token") is None
        assert store.get("wfm_token_expires_at") is None
        assert session_store.get("wfm_client_secret") is None
        assert session_store.get("wfm_code_verifier") is None
        assert authorized_client.is_authorized() is False

    def test_init_stores_secret_in_session(self, client, session_store, store):
        client.init("other-client", "s3cret")

        assert client.config.client_id == "other-client"
        assert session_store.get("wfm_client_secret") == "s3cret"
        assert store.get("wfm_client_secret") is None


class TestApiRequest:
    """Test GET requests and error mapping."""

    def test_unauthorized_request_fails_before_network(self, client):
        with patch("services.workflowmax_client.requests.get") as mock_get:
            with pytest.raises(AuthorizationError):
                client.api_request("/job.api/list")

        mock_get.assert_not_called()

    @patch("services.workflowmax_client.requests.get")
    def test_successful_get(self, mock_get, authorized_client):
        mock_get.return_value = make_response(200, {"Jobs": []})

        assert authorized_client.api_request("/job.api/list") == {"Jobs": []}

        url = mock_get.call_args[0][0]
        headers = mock_get.call_args[1]["headers"]
        assert url == f"{API_BASE}/job.api/list"
        assert headers["Authorization"] == "Bearer access-1"
        assert headers["Accept"] == "application/json"

    @patch("services.workflowmax_client.requests.get")
    def test_401_clears_tokens(self, mock_get, authorized_client, store):
        mock_get.return_value = make_response(401, {"message": "expired"})

        with pytest.raises(AuthorizationError) as exc_info:
            authorized_client.api_request("/job.api/list")

        assert "reconnect" in str(exc_info.value)
        assert exc_info.value.status_code == 401
        assert store.get("wfm_access_token") is None
        assert authorized_client.is_authorized() is False

    @patch("services.workflowmax_client.requests.get")
    def test_error_message_from_body(self, mock_get, authorized_client):
        mock_get.return_value = make_response(500, {"message": "Server exploded"})

        with pytest.raises(ApiException) as exc_info:
            authorized_client.api_request("/job.api/list")

        assert exc_info.value.message == "Server exploded"
        assert exc_info.value.status_code == 500

    @patch("services.workflowmax_client.requests.get")
    def test_error_without_body(self, mock_get, authorized_client, store):
        mock_get.return_value = make_response(404, text="Not Found")

        with pytest.raises(ApiException) as exc_info:
            authorized_client.api_request("/job.api/get/999")

        assert exc_info.value.message == "API request failed: 404"
        assert store.get("wfm_access_token") == "access-1"

    @patch("services.workflowmax_client.requests.get")
    def test_transport_error(self, mock_get, authorized_client):
        mock_get.side_effect = requests.exceptions.ConnectionError("unreachable")

        with pytest.raises(NetworkException):
            authorized_client.api_request("/job.api/list")

    @patch("services.workflowmax_client.requests.get")
    def test_extra_headers(self, mock_get, authorized_client):
        mock_get.return_value = make_response(200, {})

        authorized_client.api_request("/job.api/list", headers={"X-Trace": "1"})

        assert mock_get.call_args[1]["headers"]["X-Trace"] == "1"


class TestOAuthFlow:
    """Test authorize, code exchange and refresh."""

    def test_authorize_requires_client_id(self, client):
        client.config.client_id = ""

        with pytest.raises(AuthorizationError) as exc_info:
            client.authorize()
        assert "Client ID not configured" in str(exc_info.value)

    def test_authorize_builds_pkce_url(self, client, session_store):
        url = client.authorize()

        parsed = urlparse(url)
        params = {k: v[0] for k, v in parse_qs(parsed.query).items()}
        verifier = session_store.get("wfm_code_verifier")

        assert url.startswith("https://login.example.test/authorize?")
        assert params["response_type"] == "code"
        assert params["client_id"] == "client-123"
        assert params["scope"] == "workflowmax offline_access"
        assert params["state"] == session_store.get("wfm_oauth_state")
        assert params["code_challenge_method"] == "S256"
        assert params["code_challenge"] == generate_code_challenge(verifier)
        assert len(verifier) == 128
        assert client.validate_state(params["state"])
        assert not client.validate_state("forged")

    def test_exchange_requires_verifier(self, client):
        with pytest.raises(AuthorizationError) as exc_info:
            client.exchange_code_for_token("code-1")
        assert "Code verifier not found" in str(exc_info.value)

    @patch("services.workflowmax_client.requests.post")
    def test_exchange_success(self, mock_post, client, store, session_store):
        session_store.set("wfm_code_verifier", "verifier-1")
        session_store.set("wfm_client_secret", "s3cret")
        mock_post.return_value = make_response(
            200, {"access_token": "a", "refresh_token": "r", "expires_in": 1800})

        tokens = client.exchange_code_for_token("code-1")

        assert tokens["access_token"] == "a"
        assert mock_post.call_args[0][0] == TOKEN_ENDPOINT
        form = mock_post.call_args[1]["data"]
        assert form["grant_type"] == "authorization_code"
        assert form["code"] == "code-1"
        assert form["code_verifier"] == "verifier-1"
        assert form["client_secret"] == "s3cret"
        assert store.get("wfm_access_token") == "a"
        assert session_store.get("wfm_code_verifier") is None
        assert client.is_authorized()

    @patch("services.workflowmax_client.requests.post")
    def test_exchange_failure(self, mock_post, client, store, session_store):
        session_store.set("wfm_code_verifier", "verifier-1")
        mock_post.return_value = make_response(400, {"error": "invalid_grant",
                                                     "error_description": "Code expired"})

        with pytest.raises(ApiException) as exc_info:
            client.exchange_code_for_token("code-1")

        assert exc_info.value.message == "Code expired"
        assert store.get("wfm_access_token") is None
        assert session_store.get("wfm_code_verifier") == "verifier-1"

    @patch("services.workflowmax_client.requests.post")
    def test_exchange_failure_without_description(self, mock_post, client, session_store):
        session_store.set("wfm_code_verifier", "verifier-1")
        mock_post.return_value = make_response(502)

        with pytest.raises(ApiException) as exc_info:
            client.exchange_code_for_token("code-1")
        assert exc_info.value.message == "Token exchange failed"

    @patch("services.workflowmax_client.requests.post")
    def test_exchange_through_relay(self, mock_post, client, session_store):
        client.config.token_proxy_url = "https://relay.example.test/token-exchange"
        session_store.set("wfm_code_verifier", "verifier-1")
        mock_post.return_value = make_response(200, {"access_token": "a", "expires_in": 60})

        client.exchange_code_for_token("code-1")

        assert mock_post.call_args[0][0] == "https://relay.example.test/token-exchange"
        assert mock_post.call_args[1]["json"]["code"] == "code-1"

    def test_refresh_requires_token(self, client):
        with pytest.raises(AuthorizationError):
            client.refresh_access_token()

    @patch("services.workflowmax_client.requests.post")
    def test_refresh(self, mock_post, authorized_client, store):
        mock_post.return_value = make_response(200, {"access_token": "a2", "expires_in": 60})

        authorized_client.refresh_access_token()

        form = mock_post.call_args[1]["data"]
        assert form["grant_type"] == "refresh_token"
        assert form["refresh_token"] == "refresh-1"
        assert store.get("wfm_access_token") == "a2"


def job_payload(job_id, number):
    return {
        "ID": job_id,
        "Name": f"Job {number}",
        "Number": number,
        "Status": "InProgress",
        "CustomFields": [{"Name": "RIBA Stage (Current)", "Value": "Stage 2 - Concept"}],
    }


class TestJobs:
    """Test job queries and sync."""

    @patch("services.workflowmax_client.requests.get")
    def test_get_jobs_query(self, mock_get, authorized_client):
        mock_get.return_value = make_response(200, {"Jobs": []})

        authorized_client.get_jobs(status="InProgress", date_from="20250101", date_to="20250131")

        assert mock_get.call_args[0][0] == (
            f"{API_BASE}/job.api/list?status=InProgress&from=20250101&to=20250131")

    @patch("services.workflowmax_client.requests.get")
    def test_get_jobs_without_filters(self, mock_get, authorized_client):
        mock_get.return_value = make_response(200, {"Jobs": []})

        authorized_client.get_jobs()

        assert mock_get.call_args[0][0] == f"{API_BASE}/job.api/list"

    @patch("services.workflowmax_client.requests.get")
    def test_get_job_details_maps_job(self, mock_get, authorized_client):
        mock_get.return_value = make_response(200, job_payload("42", "BP-001"))

        project = authorized_client.get_job_details("42")

        assert mock_get.call_args[0][0] == f"{API_BASE}/job.api/get/42"
        assert project["projectNumber"] == "BP-001"
        assert project["projectPhase"] == "mobilisation"
        assert project["source"] == "WorkflowMax"

    @patch("services.workflowmax_client.requests.get")
    def test_sync_all_skips_failures(self, mock_get, authorized_client, store):
        def fake_get(url, **kwargs):
            if url.endswith("/job.api/list?status=InProgress"):
                return make_response(200, {"Jobs": [{"ID": "1"}, {"ID": "2"}, {"ID": "3"}]})
            if url.endswith("/job.api/get/2"):
                return make_response(500, {"message": "boom"})
            job_id = url.rsplit("/", 1)[-1]
            return make_response(200, job_payload(job_id, f"BP-00{job_id}"))

        mock_get.side_effect = fake_get

        synced = authorized_client.sync_all_active_jobs()

        assert [p["wfmJobId"] for p in synced] == ["1", "3"]
        stored = ProjectRepository(store).get_all()
        assert [p["projectNumber"] for p in stored] == ["BP-001", "BP-003"]

    @patch("services.workflowmax_client.requests.get")
    def test_resync_updates_existing_project(self, mock_get, authorized_client, store):
        mock_get.return_value = make_response(200, job_payload("7", "BP-007"))

        first = authorized_client.sync_job_to_local("7")
        second = authorized_client.sync_job_to_local("7")

        assert second["id"] == first["id"]
        assert len(ProjectRepository(store).get_all()) == 1

    def test_sync_status(self, authorized_client):
        status = authorized_client.get_sync_status()
        assert status == {"is_authorized": True, "last_sync": None, "has_credentials": True}

        authorized_client.update_last_sync()
        assert authorized_client.get_sync_status()["last_sync"] == NOW
