"""
FastAPI backend: find-or-create CRM contacts on behalf of a tenant.
Run with uvicorn: uvicorn api.main:app --reload  (or: python -m api)
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from neo4j import GraphDatabase
from pydantic import BaseModel

from leadsync.application import (
    ContactCreated,
    ContactFound,
    CreateFailed,
    CredentialLookupFailure,
    CredentialResolver,
    DuplicateContact,
    FindOrCreateRequest,
    FindOrCreateService,
    InvalidRequest,
    Outcome,
)
from leadsync.infrastructure import (
    LeadConnectorClient,
    Neo4jCredentialStore,
    normalize_phone,
)
from leadsync.infrastructure.crm_client import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
)
logger = logging.getLogger(__name__)

SERVICE_BANNER = "LeadSync contact bridge: POST /tools/find_or_create_contact"


def _get_driver():
    uri = os.environ.get("NEO4J_URI", "bolt://localhost:7687").strip()
    user = os.environ.get("NEO4J_USER", "neo4j").strip()
    password = os.environ.get("NEO4J_PASSWORD", "password").strip()
    return GraphDatabase.driver(uri, auth=(user, password))


def _get_crm_client() -> LeadConnectorClient:
    base_url = os.environ.get("CRM_BASE_URL", "").strip() or DEFAULT_BASE_URL
    api_version = os.environ.get("CRM_API_VERSION", "").strip() or DEFAULT_API_VERSION
    timeout = float(
        os.environ.get("CRM_TIMEOUT_SECONDS", "").strip() or DEFAULT_TIMEOUT_SECONDS
    )
    return LeadConnectorClient(base_url, api_version=api_version, timeout=timeout)


def _phone_default_region() -> str | None:
    return os.environ.get("PHONE_DEFAULT_REGION", "").strip().upper() or None


def build_service(store, gateway) -> FindOrCreateService:
    region = _phone_default_region()
    return FindOrCreateService(
        CredentialResolver(store),
        gateway,
        normalize_phone=lambda raw: normalize_phone(raw, default_region=region),
    )


def get_service(app: FastAPI) -> FindOrCreateService:
    """Return the process-wide service, building it (driver + CRM client) on first use."""
    if getattr(app.state, "service", None) is None:
        if getattr(app.state, "driver", None) is None:
            app.state.driver = _get_driver()
        if getattr(app.state, "crm_client", None) is None:
            app.state.crm_client = _get_crm_client()
        app.state.service = build_service(
            Neo4jCredentialStore(app.state.driver), app.state.crm_client
        )
    return app.state.service


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.driver = None
    app.state.crm_client = None
    app.state.service = None
    try:
        get_service(app)
        logger.info("Ready: POST /tools/find_or_create_contact")
        yield
    finally:
        if getattr(app.state, "crm_client", None) is not None:
            app.state.crm_client.close()
        if getattr(app.state, "driver", None) is not None:
            app.state.driver.close()


app = FastAPI(title="LeadSync API", lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def _invalid_body(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "invalid_request", "details": str(exc.errors())},
    )


# --- REST: health ---


@app.get("/health", response_class=PlainTextResponse)
def health():
    return "ok"


@app.get("/", response_class=PlainTextResponse)
def index():
    return SERVICE_BANNER


# --- REST: tools ---


class FindOrCreateContactBody(BaseModel):
    client_id: str | None = None
    phone: str | None = None
    email: str | None = None
    name: str | None = None


def _render(outcome: Outcome) -> JSONResponse:
    result = outcome.result
    if isinstance(result, InvalidRequest):
        return JSONResponse(
            status_code=400,
            content={"error": "invalid_request", "details": result.reason},
        )
    if isinstance(result, CredentialLookupFailure):
        return JSONResponse(status_code=400, content={"error": result.reason})
    if isinstance(result, CreateFailed):
        return JSONResponse(
            status_code=400,
            content={"error": result.body or f"Contact create failed (HTTP {result.status_code})"},
        )
    if isinstance(result, ContactFound):
        return JSONResponse(
            content={"contactId": result.contact_id, "existed": True, "contact": result.contact}
        )
    if isinstance(result, ContactCreated):
        return JSONResponse(
            content={"contactId": result.contact_id, "existed": False, "contact": result.contact}
        )
    if isinstance(result, DuplicateContact):
        return JSONResponse(
            content={
                "contactId": result.contact_id,
                "existed": True,
                "duplicate": True,
                "contact": None,
            }
        )
    raise TypeError(f"Unhandled outcome: {type(result).__name__}")


@app.post("/tools/find_or_create_contact")
def find_or_create_contact(body: FindOrCreateContactBody, request: Request):
    try:
        service = get_service(request.app)
        outcome = service.find_or_create(
            FindOrCreateRequest(
                client_id=body.client_id,
                phone=body.phone,
                email=body.email,
                name=body.name,
            )
        )
        logger.info(
            "find_or_create_contact client=%s path=%s",
            body.client_id,
            "->".join(stage.value for stage in outcome.path),
        )
        return _render(outcome)
    except Exception as exc:
        logger.exception("find_or_create_contact failed for client %s", body.client_id)
        return JSONResponse(
            status_code=500,
            content={"error": "server_error", "details": str(exc)},
        )
