"""FastAPI dependencies that gate the admin surface."""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from identity.admin.admin import AdminAccount
from identity.admin.authentication import AdminSessionAuthority
from shared.api import get_session
from shared.logging import add_context


def get_authority(request: Request, session: Session = Depends(get_session)) -> AdminSessionAuthority:
    settings = request.app.state.settings
    return AdminSessionAuthority(
        session,
        ttl_seconds=settings.session_ttl_seconds,
        bcrypt_rounds=settings.bcrypt_rounds,
    )


def session_id_from(request: Request) -> str | None:
    return request.cookies.get(request.app.state.settings.session_cookie_name)


def require_admin(request: Request, authority: AdminSessionAuthority = Depends(get_authority)) -> AdminAccount:
    """Resolve the signed-in admin or fail the request with 401."""
    admin = authority.current_admin(session_id_from(request))
    add_context(admin_id=admin.id)
    return admin
