"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wallgeom.models import GeometryError
from wallgeom.api.routes import router

logger = logging.getLogger(__name__)


async def _geometry_error_handler(request: Request, exc: GeometryError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Wall Geometry Engine",
        description="Face segmentation, wall solids and planar outlines for sketched wall plans",
        version="0.1.0",
    )

    # CORS: allow the plan editor dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(GeometryError, _geometry_error_handler)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
