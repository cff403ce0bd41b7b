from __future__ import annotations

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auth import router as auth_router
from core import db, errors
from core.config import Settings, configure_logging, load_settings
from posts import router as posts_router


def create_app(settings: Settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(_: FastAPI):
        # Initialize the DB pool once per process.
        await db.init_pool(settings)
        try:
            yield
        finally:
            await db.close_pool()

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings

    # Allow the frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    errors.install_handlers(app)

    app.include_router(auth_router.router, prefix="/api/v1/user", tags=["user"])
    app.include_router(posts_router.router, prefix="/api/v1/blog", tags=["blog"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "blog api"}

    return app


def build_app() -> FastAPI:
    """
    Uvicorn factory entrypoint: `uvicorn main:build_app --factory`.
    """
    settings = load_settings()
    configure_logging(settings.log_level)
    return create_app(settings)


if __name__ == "__main__":
    uvicorn.run(build_app(), host="0.0.0.0", port=8000)
