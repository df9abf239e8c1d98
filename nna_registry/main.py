"""
FastAPI application factory.

Uses a lifespan context manager to initialize the taxonomy once at startup;
the InitializationResult is kept on app.state.taxonomy for /health.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nna_registry import __version__
from nna_registry.routers import health, taxonomy
from nna_registry.services.taxonomy.initializer import initialize_taxonomy
from nna_registry.settings import settings

# ── Logging ───────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# ── Lifespan ──────────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logic."""
    logger.info("Starting NNA Registry taxonomy service [env=%s]", settings.environment)

    # Fail loudly in the logs but keep serving: /health reports "degraded"
    app.state.taxonomy = initialize_taxonomy()

    yield  # ── Application runs here ──

    logger.info("Shutting down NNA Registry taxonomy service")


# ── App factory ───────────────────────────────────────────────────────────────
def create_app() -> FastAPI:
    app = FastAPI(
        title="NNA Registry Taxonomy Service",
        description=(
            "Taxonomy lookups for the NNA asset registry: layer, category and "
            "subcategory enumeration, HFN validation, and conversion between "
            "Human-Friendly Names and Machine-Friendly Addresses."
        ),
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )

    # ── CORS ──────────────────────────────────────────────────────────────────
    # Dev: allow all origins. Staging/prod: explicit allowlist from ALLOWED_ORIGINS env var.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routers ───────────────────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(taxonomy.router)

    return app


app = create_app()
