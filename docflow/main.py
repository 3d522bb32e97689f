
import logging
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from docflow.config import settings
from docflow.logging_setup import setup_logging
from docflow.db.session import init_db
from docflow.auth.deps import require_access
from docflow.auth.routes import router as auth_router
from docflow.users.routes import router as users_router
from docflow.documents.routes import router as documents_router
from docflow.ingestion.routes import router as ingestion_router
from docflow.ingestion.store import MemoryIngestionStatusStore

logger = logging.getLogger(__name__)

def create_app() -> FastAPI:
    setup_logging(settings.log_level)
    app = FastAPI(title=settings.app_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.ingestion_store = MemoryIngestionStatusStore()

    document_deps = [Depends(require_access)] if settings.documents_require_auth else []

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(documents_router, dependencies=document_deps)
    app.include_router(ingestion_router)

    @app.on_event("startup")
    def on_startup():
        init_db()
        logger.info("%s started (env=%s)", settings.app_name, settings.app_env)

    @app.get("/", tags=["root"])
    def root():
        return {"name": settings.app_name, "env": settings.app_env}

    @app.get("/health", tags=["root"])
    def health():
        return {"status": "ok"}

    return app

app = create_app()
