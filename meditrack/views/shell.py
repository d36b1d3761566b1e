"""
App shell: navigation rail, signed-in identity and page routing.

The shell follows the auth bridge. While nobody is signed in it renders
the sign-in landing; once an identity is known it renders the rail plus
the selected page's view.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from meditrack.core.config import settings
from meditrack.models.user import UserIdentity
from meditrack.services.auth_bridge import AuthBridge
from meditrack.services.record_store import RecordStore
from meditrack.views.base import BaseView, ViewState, dump_records
from meditrack.views.dashboard import DashboardView
from meditrack.views.goals import GoalsView
from meditrack.views.patients import PatientsView
from meditrack.views.reflections import ReflectionsView

log = logging.getLogger(__name__)

DEFAULT_PAGE = "dashboard"

# (page id, rail label)
PAGES = (
    ("dashboard", "Dashboard"),
    ("patients", "Pacientes"),
    ("reflections", "Reflexiones"),
    ("goals", "Metas"),
)

VIEWS = {
    "dashboard": DashboardView,
    "patients": PatientsView,
    "reflections": ReflectionsView,
    "goals": GoalsView,
}


class Shell:
    def __init__(self, bridge: AuthBridge, store: RecordStore, page: Optional[str] = None):
        self.bridge = bridge
        self.store = store
        self.identity: Optional[UserIdentity] = bridge.get_current_identity()
        self.page = DEFAULT_PAGE
        self.select(page)
        self._unsubscribe = bridge.on_identity_changed(self._on_identity_changed)

    def _on_identity_changed(self, identity: Optional[UserIdentity]):
        self.identity = identity
        if identity is None:
            self.page = DEFAULT_PAGE

    def close(self):
        self._unsubscribe()

    def select(self, page: Optional[str]) -> str:
        if page not in VIEWS:
            if page:
                log.debug("Unknown page %r, showing %s", page, DEFAULT_PAGE)
            page = DEFAULT_PAGE
        self.page = page
        return page

    def navigation(self) -> List[Dict[str, Any]]:
        return [{"id": pid, "label": label, "active": pid == self.page} for pid, label in PAGES]

    def user_card(self) -> Dict[str, Any]:
        card = self.identity.to_document()
        card["initial"] = self.identity.initial
        return card

    def open_view(self) -> BaseView:
        view = VIEWS[self.page](self.store, self.identity)
        view.load()
        return view

    def _content(self, view: BaseView) -> Optional[Dict[str, Any]]:
        if view.state is ViewState.ERROR:
            return None
        if isinstance(view, DashboardView):
            return view.stats.to_document()
        if isinstance(view, GoalsView):
            return {"pending": dump_records(view.pending), "completed": dump_records(view.completed)}
        return {"items": dump_records(view.records), "count": len(view.records)}

    def render(self) -> Dict[str, Any]:
        if self.identity is None:
            return {
                "signedIn": False,
                "title": settings.APP_TITLE,
                "tagline": settings.APP_TAGLINE,
                "action": "signIn",
            }

        view = self.open_view()
        notification = view.notification.model_dump() if view.notification else None
        return {
            "signedIn": True,
            "title": settings.APP_TITLE,
            "page": self.page,
            "navigation": self.navigation(),
            "user": self.user_card(),
            "state": view.state.value,
            "content": self._content(view),
            "notification": notification,
        }
