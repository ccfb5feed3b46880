# -*- coding: utf-8 -*-
"""
WorkflowMax API Client - read-only access to WorkflowMax job data.
==================================================================

Connects through Xero identity (OAuth 2.0 authorization code + PKCE) and
only ever issues GET requests against the WorkflowMax API. Jobs are mapped
to local project records and saved in the local database.

Usage:
    client = WorkflowMaxClient(store, session_store)
    client.init("client-id")
    url = client.authorize()          # send the user here
    client.exchange_code_for_token(code)
    client.sync_all_active_jobs()
"""

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import urlencode

import requests

from app.config import StorageKeys
from repositories.collection_repository import ProjectRepository
from repositories.key_value_store import InMemoryStore, KeyValueStore
from services.exceptions import (
    ApiException,
    AuthorizationError,
    NetworkException,
    ReadOnlyViolationError,
)
from services.job_mapping import map_job_to_project
from services.pkce import generate_code_challenge, generate_code_verifier, generate_state
from utils.datetime_utils import from_isoformat, to_epoch_ms, to_isoformat, utc_now
from utils.helpers import truncate_text
from utils.logger import get_logger

logger = get_logger(__name__)

JOB_STATUS_IN_PROGRESS = "InProgress"


@dataclass
class WorkflowMaxConfig:
    """
    WorkflowMax connection settings.

    Values left as None are loaded from Config (which reads from .env).
    """
    client_id: str = None
    redirect_uri: str = None
    auth_endpoint: str = None
    token_endpoint: str = None
    api_base: str = None
    scope: str = None
    token_proxy_url: Optional[str] = None
    timeout: int = None

    def __post_init__(self):
        """Load from Config if not provided."""
        from app.config import Config

        if self.client_id is None:
            self.client_id = Config.WFM_CLIENT_ID
        if self.redirect_uri is None:
            self.redirect_uri = Config.WFM_REDIRECT_URI
        if self.auth_endpoint is None:
            self.auth_endpoint = Config.WFM_AUTH_ENDPOINT
        if self.token_endpoint is None:
            self.token_endpoint = Config.WFM_TOKEN_ENDPOINT
        if self.api_base is None:
            self.api_base = Config.WFM_API_BASE
        if self.scope is None:
            self.scope = Config.WFM_SCOPE
        if self.token_proxy_url is None:
            self.token_proxy_url = Config.WFM_TOKEN_PROXY_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT


class WorkflowMaxClient:
    """
    Read-only WorkflowMax client.

    Tokens live in the durable ``store``; the client secret, OAuth state and
    PKCE verifier live in ``session_store`` and are gone when it is.
    """

    def __init__(
        self,
        store: KeyValueStore,
        session_store: Optional[KeyValueStore] = None,
        config: Optional[WorkflowMaxConfig] = None,
        projects: Optional[ProjectRepository] = None,
        clock: Callable[[], datetime] = utc_now
    ):
        self.store = store
        self.session_store = session_store if session_store is not None else InMemoryStore()
        self.config = config or WorkflowMaxConfig()
        self.projects = projects or ProjectRepository(store, clock=clock)
        self._clock = clock

        self.access_token: Optional[str] = None
        self.refresh_token: Optional[str] = None
        self.token_expires_at: int = 0

    # ==================== Authentication ====================

    def init(self, client_id: str, client_secret: Optional[str] = None) -> None:
        """Set the app credentials and load any stored tokens."""
        self.config.client_id = client_id
        if client_secret:
            self.session_store.set(StorageKeys.WFM_CLIENT_SECRET, client_secret)
        self.load_tokens()

    def authorize(self) -> str:
        """
        Start the authorization flow.

        Stores a fresh ``state`` and PKCE verifier in the session store.

        Returns:
            Authorization URL to send the user to

        Raises:
            AuthorizationError: if no client id is configured
        """
        if not self.config.client_id:
            raise AuthorizationError(
                "Client ID not configured. Please set up WorkflowMax app credentials."
            )

        state = generate_state()
        verifier = generate_code_verifier()
        self.session_store.set(StorageKeys.WFM_OAUTH_STATE, state)
        self.session_store.set(StorageKeys.WFM_CODE_VERIFIER, verifier)

        params = {
            "response_type": "code",
            "client_id": self.config.client_id,
            "redirect_uri": self.config.redirect_uri,
            "scope": self.config.scope,
            "state": state,
            "code_challenge": generate_code_challenge(verifier),
            "code_challenge_method": "S256",
        }
        return f"{self.config.auth_endpoint}?{urlencode(params)}"

    def validate_state(self, state: str) -> bool:
        """True if ``state`` matches the one issued by ``authorize``."""
        expected = self.session_store.get(StorageKeys.WFM_OAUTH_STATE)
        return bool(expected) and expected == state

    def exchange_code_for_token(self, code: str) -> Dict[str, Any]:
        """
        Exchange an authorization code for tokens.

        Raises:
            AuthorizationError: if no PKCE verifier is stored
            ApiException: if the identity provider rejects the exchange
            NetworkException: on transport failure
        """
        verifier = self.session_store.get(StorageKeys.WFM_CODE_VERIFIER)
        if not verifier:
            raise AuthorizationError(
                "Code verifier not found. Please restart the authorization process."
            )

        form = {
            "grant_type": "authorization_code",
            "client_id": self.config.client_id,
            "code": code,
            "redirect_uri": self.config.redirect_uri,
            "code_verifier": verifier,
        }
        tokens = self._request_tokens(form, "Token exchange failed")
        self.session_store.remove(StorageKeys.WFM_CODE_VERIFIER)
        logger.info("✅ Connected to WorkflowMax")
        return tokens

    def refresh_access_token(self) -> Dict[str, Any]:
        """
        Exchange the stored refresh token for a new access token.

        Raises:
            AuthorizationError: if no refresh token is stored
            ApiException: if the identity provider rejects the refresh
        """
        self.load_tokens()
        if not self.refresh_token:
            raise AuthorizationError("No refresh token available. Please reconnect to WorkflowMax.")

        form = {
            "grant_type": "refresh_token",
            "client_id": self.config.client_id,
            "refresh_token": self.refresh_token,
        }
        tokens = self._request_tokens(form, "Token refresh failed")
        logger.info("✅ Token refreshed")
        return tokens

    def _request_tokens(self, form: Dict[str, str], failure_message: str) -> Dict[str, Any]:
        client_secret = self.session_store.get(StorageKeys.WFM_CLIENT_SECRET)
        if client_secret:
            form["client_secret"] = client_secret

        try:
            if self.config.token_proxy_url:
                # The relay takes the same fields as JSON
                response = requests.post(
                    self.config.token_proxy_url,
                    json=form,
                    timeout=self.config.timeout
                )
            else:
                response = requests.post(
                    self.config.token_endpoint,
                    data=form,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                    timeout=self.config.timeout
                )
        except requests.exceptions.RequestException as e:
            logger.error(f"❌ Token request failed: {e}")
            raise NetworkException(message=str(e), original_error=e, context=form["grant_type"])

        data = self._json_or_empty(response)
        if not response.ok:
            logger.error(f"[API ERR] {response.status_code} token ({form['grant_type']}) | Response: {data}")
            raise ApiException(
                message=data.get("error_description") or failure_message,
                status_code=response.status_code,
                response_data=data,
                context=form["grant_type"]
            )

        self.save_tokens(data)
        return data

    # ==================== Token storage ====================

    def save_tokens(self, tokens: Dict[str, Any]) -> None:
        """Persist a token response (``access_token``, ``refresh_token``, ``expires_in``)."""
        self.store.set(StorageKeys.WFM_ACCESS_TOKEN, tokens["access_token"])
        if tokens.get("refresh_token"):
            self.store.set(StorageKeys.WFM_REFRESH_TOKEN, tokens["refresh_token"])
        if tokens.get("expires_in"):
            expires_at = to_epoch_ms(self._clock()) + int(tokens["expires_in"]) * 1000
            self.store.set(StorageKeys.WFM_TOKEN_EXPIRES_AT, str(expires_at))
        self.load_tokens()

    def load_tokens(self) -> None:
        self.access_token = self.store.get(StorageKeys.WFM_ACCESS_TOKEN)
        self.refresh_token = self.store.get(StorageKeys.WFM_REFRESH_TOKEN)
        self.token_expires_at = int(self.store.get(StorageKeys.WFM_TOKEN_EXPIRES_AT) or 0)

    def is_authorized(self) -> bool:
        """True when an unexpired access token is stored."""
        self.load_tokens()
        return bool(self.access_token) and self.token_expires_at > to_epoch_ms(self._clock())

    def clear_tokens(self) -> None:
        """Forget tokens and session credentials."""
        for key in (StorageKeys.WFM_ACCESS_TOKEN, StorageKeys.WFM_REFRESH_TOKEN,
                    StorageKeys.WFM_TOKEN_EXPIRES_AT):
            self.store.remove(key)
        for key in (StorageKeys.WFM_CLIENT_SECRET, StorageKeys.WFM_CODE_VERIFIER):
            self.session_store.remove(key)
        self.access_token = None
        self.refresh_token = None
        self.token_expires_at = 0

    # ==================== Requests ====================

    def api_request(self, endpoint: str, method: str = "GET",
                    headers: Optional[Dict[str, str]] = None) -> Any:
        """
        GET ``endpoint`` from the WorkflowMax API.

        Args:
            endpoint: Path below the API base (e.g. "/job.api/list")
            method: Must be GET
            headers: Extra request headers

        Returns:
            Decoded JSON response

        Raises:
            ReadOnlyViolationError: for any method other than GET
            AuthorizationError: when not connected, or on HTTP 401
            ApiException: for other non-2xx responses
            NetworkException: on transport failure
        """
        if (method or "GET").upper() != "GET":
            raise ReadOnlyViolationError(method, endpoint)

        if not self.is_authorized():
            raise AuthorizationError()

        url = f"{self.config.api_base}{endpoint}"
        request_headers = {
            "Authorization": f"Bearer {self.access_token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        request_headers.update(headers or {})

        logger.info(f"[API REQ] GET {endpoint}")
        try:
            response = requests.get(url, headers=request_headers, timeout=self.config.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e, context=endpoint)

        if response.status_code == 401:
            logger.warning(f"[API ERR] 401 GET {endpoint} | clearing tokens")
            self.clear_tokens()
            raise AuthorizationError(
                "Authorization expired. Please reconnect to WorkflowMax.",
                status_code=401,
                context=endpoint
            )

        if not response.ok:
            data = self._json_or_empty(response)
            logger.error(f"[API ERR] {response.status_code} GET {endpoint} | Response: {data or response.text[:500]}")
            raise ApiException(
                message=data.get("message") or f"API request failed: {response.status_code}",
                status_code=response.status_code,
                response_data=data,
                context=endpoint
            )

        try:
            result = response.json()
        except ValueError as e:
            raise ApiException(
                message=f"Invalid JSON response: {e}",
                status_code=response.status_code,
                context=endpoint
            )

        logger.info(f"[API RES] {response.status_code} {endpoint}")
        logger.debug(f"[API RES] Body: {truncate_text(json.dumps(result, ensure_ascii=False, default=str), 1000)}")
        return result

    @staticmethod
    def _json_or_empty(response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    # ==================== Jobs ====================

    def get_jobs(self, status: Optional[str] = None, date_from: Optional[str] = None,
                 date_to: Optional[str] = None) -> Dict[str, Any]:
        """List jobs, optionally filtered by status and date range."""
        params = {}
        if status:
            params["status"] = status
        if date_from:
            params["from"] = date_from
        if date_to:
            params["to"] = date_to

        query = f"?{urlencode(params)}" if params else ""
        return self.api_request(f"/job.api/list{query}")

    def get_job(self, job_id: str) -> Dict[str, Any]:
        return self.api_request(f"/job.api/get/{job_id}")

    def get_job_details(self, job_id: str) -> Dict[str, Any]:
        """Job mapped to a local project record."""
        return map_job_to_project(self.get_job(job_id), clock=self._clock)

    def get_active_jobs(self) -> Dict[str, Any]:
        return self.get_jobs(status=JOB_STATUS_IN_PROGRESS)

    def map_job_to_project(self, job: Dict[str, Any]) -> Dict[str, Any]:
        return map_job_to_project(job, clock=self._clock)

    # ==================== Sync ====================

    def sync_job_to_local(self, job_id: str) -> Dict[str, Any]:
        """
        Fetch one job and save it to the local database.

        A project already synced from the same job is updated in place.
        """
        project = self.get_job_details(job_id)
        existing = self.projects.find_first(
            lambda record: record.get("wfmJobId") == project.get("wfmJobId")
        )
        if existing:
            project["id"] = existing["id"]
        return self.projects.save(project)

    def sync_all_active_jobs(self) -> List[Dict[str, Any]]:
        """
        Sync every in-progress job. Jobs that fail are logged and skipped.

        Returns:
            The saved project records
        """
        jobs = self.get_active_jobs() or {}
        synced = []
        for job in jobs.get("Jobs", []):
            try:
                synced.append(self.sync_job_to_local(job["ID"]))
            except (ApiException, NetworkException) as e:
                logger.error(f"Failed to sync job {job.get('ID')}: {e}")
        logger.info(f"Synced {len(synced)} of {len(jobs.get('Jobs', []))} active jobs")
        return synced

    def get_sync_status(self) -> Dict[str, Any]:
        last_sync = self.store.get(StorageKeys.WFM_LAST_SYNC)
        return {
            "is_authorized": self.is_authorized(),
            "last_sync": from_isoformat(last_sync) if last_sync else None,
            "has_credentials": bool(self.config.client_id),
        }

    def update_last_sync(self) -> None:
        self.store.set(StorageKeys.WFM_LAST_SYNC, to_isoformat(self._clock()))
