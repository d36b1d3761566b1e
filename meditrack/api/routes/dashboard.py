from fastapi import APIRouter, Depends

from meditrack.api.deps import get_current_user, get_store, raise_for_view
from meditrack.views.dashboard import DashboardView

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/")
def dashboard(user=Depends(get_current_user), store=Depends(get_store)):
    """
    Clinician dashboard:
    - total consultations and minutes logged
    - most common consultation category
    - pending goals
    - consultations per day over the last week
    """
    view = DashboardView(store, user)
    view.load()
    raise_for_view(view)
    return view.stats.to_document()
