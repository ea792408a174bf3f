from .placement import router as placement_routes
from .placement import EngineProvider, get_provider

__all__ = [
    "placement_routes",
    "EngineProvider",
    "get_provider",
]
