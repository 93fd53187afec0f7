"""API routers for the engine's subsystems."""

from bullpen.api.routers.draft import router as draft_router
from bullpen.api.routers.finances import router as finances_router
from bullpen.api.routers.progression import router as progression_router
from bullpen.api.routers.season import router as season_router
from bullpen.api.routers.training import router as training_router

__all__ = [
    "draft_router",
    "finances_router",
    "progression_router",
    "season_router",
    "training_router",
]
