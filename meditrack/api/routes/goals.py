"""Professional goal routes."""
from fastapi import APIRouter, Body, Depends, HTTPException

from meditrack.api.deps import get_current_user, get_store, raise_for_view
from meditrack.models.goal import GoalIn, GoalUpdate
from meditrack.views.base import dump_records
from meditrack.views.goals import GoalsView

router = APIRouter(prefix="/goals", tags=["goals"])


def _partitioned(view: GoalsView) -> dict:
    return {
        "pending": dump_records(view.pending),
        "completed": dump_records(view.completed),
    }


@router.get("/")
def list_goals(user=Depends(get_current_user), store=Depends(get_store)):
    view = GoalsView(store, user)
    view.load()
    raise_for_view(view)
    return {"items": dump_records(view.records), **_partitioned(view)}


@router.post("/", status_code=201)
def create_goal(
    payload: GoalIn = Body(...),
    user=Depends(get_current_user),
    store=Depends(get_store),
):
    view = GoalsView(store, user)
    created = view.create(payload)
    raise_for_view(view)
    return {"message": view.notification.message, "item": created.to_document(), **_partitioned(view)}


@router.put("/{goal_id}")
def update_goal(
    goal_id: str,
    payload: GoalUpdate = Body(...),
    user=Depends(get_current_user),
    store=Depends(get_store),
):
    view = GoalsView(store, user)
    view.update(goal_id, payload)
    raise_for_view(view)
    return {"message": view.notification.message, "id": goal_id, **_partitioned(view)}


@router.post("/{goal_id}/toggle")
def toggle_goal(goal_id: str, user=Depends(get_current_user), store=Depends(get_store)):
    """Flip a goal between pending and completed."""
    view = GoalsView(store, user)
    status = view.toggle(goal_id)
    raise_for_view(view)
    return {"message": view.notification.message, "id": goal_id, "status": status, **_partitioned(view)}


@router.delete("/{goal_id}")
def delete_goal(
    goal_id: str,
    confirm: bool = False,
    user=Depends(get_current_user),
    store=Depends(get_store),
):
    view = GoalsView(store, user)
    if not view.delete(goal_id, confirmed=confirm):
        raise_for_view(view)
        raise HTTPException(status_code=409, detail=view.notification.message)
    return {"message": view.notification.message, "id": goal_id, **_partitioned(view)}
