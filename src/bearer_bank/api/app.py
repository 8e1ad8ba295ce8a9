"""
bearer_bank.api.app

FastAPI app factory for the bearer_bank service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Compose the principal directory, ledger, issuer and gate from settings.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bearer_bank import __version__
from bearer_bank.api.errors import install_error_handlers
from bearer_bank.api.routers.accounts import router as accounts_router
from bearer_bank.api.routers.auth import router as auth_router
from bearer_bank.api.routers.health import router as health_router
from bearer_bank.auth.gate import TokenGate
from bearer_bank.auth.issuer import CredentialIssuer
from bearer_bank.auth.jwt import JwtConfig
from bearer_bank.auth.models import Principal
from bearer_bank.auth.principals import InMemoryPrincipalDirectory, PrincipalDirectory
from bearer_bank.ledger.service import Ledger
from bearer_bank.observability.logging import configure_logging, get_logger
from bearer_bank.observability.middleware import RequestContextMiddleware
from bearer_bank.settings import Settings

log = get_logger(__name__)


def jwt_config(settings: Settings) -> JwtConfig:
    return JwtConfig(
        alg=settings.jwt_alg,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        secret=settings.jwt_secret,
        ttl=settings.token_ttl,
    )


def create_app(
    *,
    settings: Settings,
    principals: PrincipalDirectory | None = None,
    ledger: Ledger | None = None,
) -> FastAPI:
    # Configure structured logging once at process startup (before app serves requests).
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    if principals is None:
        principals = InMemoryPrincipalDirectory(
            [Principal(identity=settings.demo_identity, secret=settings.demo_secret)]
        )
    if ledger is None:
        ledger = Ledger()
        ledger.open_account(settings.demo_identity, settings.demo_balance)

    cfg = jwt_config(settings)

    app = FastAPI(
        title="Bearer Bank API",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.ledger = ledger
    app.state.issuer = CredentialIssuer(directory=principals, cfg=cfg)
    app.state.gate = TokenGate(cfg=cfg)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)
    install_error_handlers(app, settings=settings)
    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)
    app.include_router(accounts_router)

    @app.on_event("startup")
    async def _startup() -> None:
        # Secrets are never logged; only the shape of the config.
        log.info(
            "startup",
            env=settings.env,
            jwt_alg=settings.jwt_alg,
            token_ttl_seconds=int(settings.token_ttl.total_seconds()),
        )

    @app.on_event("shutdown")
    async def _shutdown() -> None:
        log.info("shutdown")

    return app


# --- Module Notes -----------------------------------------------------------
# Tests pass their own `principals`/`ledger` to start from a known state; the
# default seeds the single demo principal and account from settings.
