"""Patient consultation routes.

Every clinician only ever sees and edits the consultations they logged
(``ownerId`` = their Firebase UID).
"""
from fastapi import APIRouter, Body, Depends, HTTPException

from meditrack.api.deps import get_current_user, get_store, raise_for_view
from meditrack.models.patient import CATEGORIES, PatientIn, PatientUpdate
from meditrack.views.base import dump_records
from meditrack.views.patients import PatientsView

router = APIRouter(prefix="/patients", tags=["patients"])


@router.get("/")
def list_patients(q: str = "", user=Depends(get_current_user), store=Depends(get_store)):
    """List the caller's consultations, newest first. ``q`` filters by code, reason or diagnosis."""
    view = PatientsView(store, user)
    view.load()
    raise_for_view(view)

    items = view.search(q)
    return {"items": dump_records(items), "total": len(view.records)}


@router.get("/categories")
def list_categories():
    return {"items": list(CATEGORIES)}


@router.post("/", status_code=201)
def create_patient(
    payload: PatientIn = Body(...),
    user=Depends(get_current_user),
    store=Depends(get_store),
):
    view = PatientsView(store, user)
    created = view.create(payload)
    raise_for_view(view)

    return {
        "message": view.notification.message,
        "item": created.to_document(),
        "items": dump_records(view.records),
    }


@router.put("/{patient_id}")
def update_patient(
    patient_id: str,
    payload: PatientUpdate = Body(...),
    user=Depends(get_current_user),
    store=Depends(get_store),
):
    view = PatientsView(store, user)
    view.update(patient_id, payload)
    raise_for_view(view)

    return {
        "message": view.notification.message,
        "id": patient_id,
        "items": dump_records(view.records),
    }


@router.delete("/{patient_id}")
def delete_patient(
    patient_id: str,
    confirm: bool = False,
    user=Depends(get_current_user),
    store=Depends(get_store),
):
    view = PatientsView(store, user)
    if not view.delete(patient_id, confirmed=confirm):
        raise_for_view(view)
        raise HTTPException(status_code=409, detail=view.notification.message)

    return {
        "message": view.notification.message,
        "id": patient_id,
        "items": dump_records(view.records),
    }
