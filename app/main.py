from typing import Optional

from fastapi import FastAPI

from app.api.resources import ResourceRegistry, build_router
from app.core.config import settings
from app.core.http_hardening import install_http_hardening
from app.core.logger import configure_logging


def create_app(registry: Optional[ResourceRegistry] = None) -> FastAPI:
    configure_logging()
    application = FastAPI(title=settings.APP_NAME, version="0.1.0")
    install_http_hardening(application)
    application.state.registry = registry or ResourceRegistry()
    application.include_router(build_router(application.state.registry), prefix="/api/v1alpha3", tags=["Resources"])

    @application.get("/health")
    def health():
        return {"status": "ok"}

    return application


app = create_app()
