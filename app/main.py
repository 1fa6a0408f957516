import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from app.app_logging import configure_logging
from app.config import Settings, settings as default_settings
from app.containers import build_container
from app.routers.projects import router as projects_router
from app.routers.results import router as results_router
from app.routers.sessions import router as sessions_router
from app.routers.uploads import router as uploads_router
from app.routers.votes import router as votes_router
from app.utils.exceptions import NotFoundError, register_exception_handlers
from app.utils.response import success_response

logger = logging.getLogger(__name__)

SERVICE_NAME = "photo-vote-api"
VERSION = "0.1.0"


def _page_route(app: FastAPI, path: str, page: str, public_dir: str) -> None:
    async def serve_page():
        page_path = os.path.join(public_dir, page)
        if not os.path.isfile(page_path):
            raise NotFoundError("Page not found")
        return FileResponse(page_path)

    app.add_api_route(path, serve_page, methods=["GET"], include_in_schema=False, name=page)


def create_app(settings: Settings | None = None) -> FastAPI:
    configure_logging()
    resolved = settings or default_settings
    container = build_container(resolved)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.container.session_store.load_all()
        yield

    app = FastAPI(
        title="Photo Vote API",
        description="Upload a batch of photos, collect votes, rank the results",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=resolved.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(sessions_router, prefix="/api")
    app.include_router(uploads_router, prefix="/api")
    app.include_router(votes_router, prefix="/api")
    app.include_router(results_router, prefix="/api")
    app.include_router(projects_router, prefix="/api")

    @app.get("/health")
    async def health_check():
        return success_response(data={"service": SERVICE_NAME, "version": VERSION})

    _page_route(app, "/", "index.html", resolved.public_dir)
    _page_route(app, "/admin", "admin.html", resolved.public_dir)
    _page_route(app, "/vote/{session_id}", "vote.html", resolved.public_dir)
    _page_route(app, "/results/{session_id}", "results.html", resolved.public_dir)

    app.mount("/uploads", StaticFiles(directory=resolved.uploads_dir, check_dir=False), name="uploads")
    if os.path.isdir(resolved.public_dir):
        app.mount("/", StaticFiles(directory=resolved.public_dir), name="public")
    else:
        logger.info("Public directory %s not found, static pages disabled", resolved.public_dir)

    return app


app = create_app()
