# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# WorkflowMax (Xero identity) settings
_WFM_CLIENT_ID = os.getenv("WFM_CLIENT_ID", "")
_WFM_REDIRECT_URI = os.getenv(
    "WFM_REDIRECT_URI",
    "http://localhost:8888/BaileyISO19650Dashboard/oauth-callback.html"
)
_WFM_AUTH_ENDPOINT = os.getenv("WFM_AUTH_ENDPOINT", "https://login.xero.com/identity/connect/authorize")
_WFM_TOKEN_ENDPOINT = os.getenv("WFM_TOKEN_ENDPOINT", "https://identity.xero.com/connect/token")
_WFM_API_BASE = os.getenv("WFM_API_BASE", "https://api.xero.com/workflowmax/3.0")
_WFM_SCOPE = os.getenv("WFM_SCOPE", "workflowmax offline_access")
_WFM_TOKEN_PROXY_URL = os.getenv("WFM_TOKEN_PROXY_URL", None)
_WFM_PROXY_UPSTREAM = os.getenv("WFM_PROXY_UPSTREAM", "https://api.workflowmax.com")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))

# Local storage
_DATA_DIR = os.getenv("BEPGEN_DATA_DIR", None)
_STORE_NAME = os.getenv("BEPGEN_STORE_NAME", "bepgen.db")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "BEP Generator"
    APP_TITLE: str = "ISO 19650 BIM Execution Plan Generator"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Bailey Partnership"

    # WorkflowMax integration (read-only)
    WFM_CLIENT_ID: str = _WFM_CLIENT_ID
    WFM_REDIRECT_URI: str = _WFM_REDIRECT_URI
    WFM_AUTH_ENDPOINT: str = _WFM_AUTH_ENDPOINT
    WFM_TOKEN_ENDPOINT: str = _WFM_TOKEN_ENDPOINT
    WFM_API_BASE: str = _WFM_API_BASE
    WFM_SCOPE: str = _WFM_SCOPE
    # When set, token exchange goes through the relay instead of the identity provider
    WFM_TOKEN_PROXY_URL: Optional[str] = _WFM_TOKEN_PROXY_URL
    # Upstream host used by the GET relay
    WFM_PROXY_UPSTREAM: str = _WFM_PROXY_UPSTREAM
    API_TIMEOUT: int = _API_TIMEOUT

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    DATA_DIR: Path = Path(_DATA_DIR) if _DATA_DIR else PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Key-value store (SQLite)
    STORE_NAME: str = _STORE_NAME
    STORE_PATH: Path = DATA_DIR / STORE_NAME

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # Document defaults
    BEP_INITIAL_VERSION: str = "0.1"
    EMPTY_VALUE: str = "-"

    # Date/Time Formats
    DATE_FORMAT: str = "%Y-%m-%d"
    DATETIME_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    DATE_FORMAT_DISPLAY: str = "%d/%m/%Y"


# Storage keys shared with the browser build
class StorageKeys:
    PROJECTS = "bailey_projects"
    TEMPLATES = "bailey_templates"
    RACI_MATRICES = "bailey_raci_matrices"
    DRAFT_PREFIX = "bep_draft:"

    WFM_ACCESS_TOKEN = "wfm_access_token"
    WFM_REFRESH_TOKEN = "wfm_refresh_token"
    WFM_TOKEN_EXPIRES_AT = "wfm_token_expires_at"
    WFM_LAST_SYNC = "wfm_last_sync"

    # Session-scoped keys
    WFM_CLIENT_SECRET = "wfm_client_secret"
    WFM_OAUTH_STATE = "wfm_oauth_state"
    WFM_CODE_VERIFIER = "wfm_code_verifier"
