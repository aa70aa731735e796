"""
PassVault Backend - FastAPI Application

A password manager API: user accounts with per-user saved website logins.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from passvault.config import get_settings
from passvault.core.exception_handlers import register_exception_handlers
from passvault.database.connections import create_mongo_client, get_vault_database
from passvault.database.databases.vault_db import create_vault_indexes
from passvault.routers import auth, health, vault

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Create the MongoDB client unless one was injected
    - Create indexes

    Shutdown:
    - Close the MongoDB client if this lifespan created it
    """
    logger.info("Starting up PassVault Backend...")

    owns_client = app.state.mongo_client is None
    if owns_client:
        app.state.mongo_client = create_mongo_client()

    try:
        await create_vault_indexes(get_vault_database(app.state.mongo_client))
        logger.info("Database indexes created")
    except PyMongoError as e:
        logger.warning("Database initialization warning: %s", e)

    yield

    logger.info("Shutting down PassVault Backend...")
    if owns_client:
        app.state.mongo_client.close()
        app.state.mongo_client = None
        logger.info("Database connection closed")


def create_app(mongo_client: Optional[AsyncIOMotorClient] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        mongo_client: Client to use instead of connecting from settings
    """
    settings = get_settings()

    app = FastAPI(
        title="PassVault API",
        description="""
## Password Manager API

Store website logins per user account.

### Authentication
Register with `POST /register`, then obtain a token via `POST /login`.
All vault endpoints and `/me` require the token in the Authorization header:
```
Authorization: Bearer your_jwt_token
```
Tokens expire after one hour.
        """,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.mongo_client = mongo_client

    # Registered first so CORSMiddleware wraps the 500 catch-all
    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(vault.router)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "PassVault API",
            "version": "0.1.0",
            "docs": "/docs",
            "health": "/health",
        }

    return app


configure_logging(get_settings().log_level)

app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
