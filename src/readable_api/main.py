# src/readable_api/main.py
"""Main entry point for the Readable API application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from readable_api.api.error_handlers import register_error_handlers
from readable_api.api.v1 import categories_router, comments_router, posts_router
from readable_api.core.observability import setup_logging
from readable_api.core.settings import Settings, settings
from readable_api.services import IdentitySpace, categories_from_config

logger = logging.getLogger(__name__)

USAGE = {
    "authorization": "Send an Authorization header; any value works and selects your own dataset.",
    "endpoints": [
        "GET /categories",
        "GET /:category/posts",
        "GET /posts",
        "POST /posts  {id, timestamp, title, body, author, category}",
        "GET /posts/:id",
        "POST /posts/:id  {option: 'upVote' | 'downVote'}",
        "PUT /posts/:id  {title?, body?}",
        "DELETE /posts/:id  (also flags its comments parentDeleted)",
        "GET /posts/:id/comments",
        "POST /comments  {id, timestamp, body, author, parentId}",
        "GET /comments/:id",
        "POST /comments/:id  {option: 'upVote' | 'downVote'}",
        "PUT /comments/:id  {timestamp?, body?}",
        "DELETE /comments/:id",
    ],
}


def build_identity_space(config: Settings) -> IdentitySpace:
    """Create the process-wide tenant map from settings."""
    return IdentitySpace(
        categories_from_config(config.default_categories),
        max_tenants=config.tenant_limit,
    )


# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Multi-tenant categories, posts and comments API",
    version=settings.app_version,
)

# One store per process, shared by every request
app.state.identity_space = build_identity_space(settings)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

register_error_handlers(app)

# /{category}/posts goes first so a category named "posts" or "comments"
# is not captured by /posts/{id} or /comments/{id}
app.include_router(categories_router, prefix=settings.api_prefix)
app.include_router(posts_router, prefix=settings.api_prefix)
app.include_router(comments_router, prefix=settings.api_prefix)


@app.on_event("startup")
async def on_startup() -> None:
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "%s %s ready (tenant limit: %s, strict votes: %s)",
        settings.app_name,
        settings.app_version,
        settings.tenant_limit or "none",
        settings.strict_vote_options,
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, object]:
    """Root endpoint with basic information and usage for the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "usage": USAGE,
    }


def run() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(
        "readable_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
