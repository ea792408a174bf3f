from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shelfplace.factories import create_engine
from shelfplace.model import AllocationEngine
from shelfplace.routes import EngineProvider, placement_routes


def create_app(engine: Optional[AllocationEngine] = None) -> FastAPI:
    app = FastAPI(title="shelfplace")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.engine_provider = EngineProvider(engine if engine is not None else create_engine())
    app.include_router(placement_routes, prefix="/placement")
    return app


app = create_app()
