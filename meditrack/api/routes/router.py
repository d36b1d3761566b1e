from fastapi import APIRouter

from meditrack.api.routes.auth import router as auth_router
from meditrack.api.routes.dashboard import router as dashboard_router
from meditrack.api.routes.goals import router as goals_router
from meditrack.api.routes.patients import router as patients_router
from meditrack.api.routes.reflections import router as reflections_router
from meditrack.api.routes.shell import router as shell_router

api_router = APIRouter()

# Identity and page routing
api_router.include_router(auth_router)
api_router.include_router(shell_router)

# Journal pages
api_router.include_router(dashboard_router)
api_router.include_router(patients_router)
api_router.include_router(reflections_router)
api_router.include_router(goals_router)
