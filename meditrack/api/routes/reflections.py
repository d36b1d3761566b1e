"""Daily reflection routes. Reflections can be written and deleted, not edited."""
from fastapi import APIRouter, Body, Depends, HTTPException

from meditrack.api.deps import get_current_user, get_store, raise_for_view
from meditrack.models.reflection import ReflectionIn
from meditrack.views.base import dump_records
from meditrack.views.reflections import ReflectionsView

router = APIRouter(prefix="/reflections", tags=["reflections"])


@router.get("/")
def list_reflections(user=Depends(get_current_user), store=Depends(get_store)):
    view = ReflectionsView(store, user)
    view.load()
    raise_for_view(view)
    return {"items": dump_records(view.records)}


@router.post("/", status_code=201)
def create_reflection(
    payload: ReflectionIn = Body(...),
    user=Depends(get_current_user),
    store=Depends(get_store),
):
    view = ReflectionsView(store, user)
    created = view.create(payload)
    raise_for_view(view)
    return {
        "message": view.notification.message,
        "item": created.to_document(),
        "items": dump_records(view.records),
    }


@router.delete("/{reflection_id}")
def delete_reflection(
    reflection_id: str,
    confirm: bool = False,
    user=Depends(get_current_user),
    store=Depends(get_store),
):
    view = ReflectionsView(store, user)
    if not view.delete(reflection_id, confirmed=confirm):
        raise_for_view(view)
        raise HTTPException(status_code=409, detail=view.notification.message)
    return {"message": view.notification.message, "id": reflection_id, "items": dump_records(view.records)}
