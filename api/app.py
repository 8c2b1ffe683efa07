from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes.servers import router as servers_router
from api.routes.tools import router as tools_router


def create_app() -> FastAPI:
    app = FastAPI(title="MCP Server Catalog API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(servers_router)
    app.include_router(tools_router)

    @app.get("/healthz")
    def health() -> dict:
        return {"status": "ok"}

    return app

