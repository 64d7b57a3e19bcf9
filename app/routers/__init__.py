from app.routers.all_data import router as all_data_router
from app.routers.cards import router as cards_router
from app.routers.db_status import router as db_status_router
from app.routers.health import router as health_router
from app.routers.teams import router as teams_router

__all__ = ["health_router", "db_status_router", "teams_router", "cards_router", "all_data_router"]
