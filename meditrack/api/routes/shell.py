from typing import Optional

from fastapi import APIRouter, Depends

from meditrack.api.deps import get_optional_user, get_store
from meditrack.services.auth_bridge import AuthBridge
from meditrack.views.shell import Shell

router = APIRouter(prefix="/shell", tags=["shell"])


@router.get("/")
def render_shell(page: Optional[str] = None, user=Depends(get_optional_user), store=Depends(get_store)):
    """Navigation rail, signed-in user and the selected page; the sign-in landing when anonymous."""
    shell = Shell(AuthBridge(user), store, page=page)
    try:
        return shell.render()
    finally:
        shell.close()
