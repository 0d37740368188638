"""FastAPI application exposing the news controller to a user interface."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from . import catalog
from .client import NewsClient
from .controller import NewsController
from .models import ControllerState, FilterParameters
from .schemas import CatalogResponse, FilterRequest, StateResponse

LOGGER = logging.getLogger(__name__)


def _state_response(state: ControllerState) -> StateResponse:
    return StateResponse.model_validate(state.to_dict())


def create_app(client: NewsClient, default_language: str = "en") -> FastAPI:
    """Build the app; the controller is created on startup so it can issue its first fetch."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        controller = NewsController(client, FilterParameters(language=default_language))
        app.state.controller = controller
        LOGGER.info("News controller started")
        try:
            yield
        finally:
            await controller.aclose()
            await client.aclose()
            LOGGER.info("News controller stopped")

    app = FastAPI(title="News Reader", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def get_controller(request: Request) -> NewsController:
        return request.app.state.controller

    @app.get("/healthz", summary="Health check")
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/filters", response_model=CatalogResponse)
    async def list_filters() -> CatalogResponse:
        return CatalogResponse(**catalog.as_dict())

    @app.get("/articles", response_model=StateResponse)
    async def current_articles(
        controller: NewsController = Depends(get_controller),
    ) -> StateResponse:
        return _state_response(controller.state)

    @app.put("/parameters", response_model=StateResponse)
    async def set_parameters(
        request: FilterRequest,
        controller: NewsController = Depends(get_controller),
    ) -> StateResponse:
        controller.set_parameters(
            FilterParameters(
                category=request.category,
                language=request.language,
                country=request.country,
            )
        )
        return _state_response(await controller.wait())

    @app.post("/refresh", response_model=StateResponse)
    async def refresh(controller: NewsController = Depends(get_controller)) -> StateResponse:
        controller.refresh()
        return _state_response(await controller.wait())

    return app


__all__ = ["create_app"]
