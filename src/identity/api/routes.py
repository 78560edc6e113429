"""FastAPI endpoints for admin authentication.

Handlers are plain functions so FastAPI runs them in its threadpool: bcrypt and
the SQLAlchemy session both block.
"""

from fastapi import APIRouter, Depends, Request, Response

from identity.admin.admin import AdminAccount
from identity.admin.authentication import AdminSessionAuthority
from identity.api.dependencies import get_authority, require_admin, session_id_from
from identity.api.schemas import AdminResponse, LoginRequest, LoginResponse
from shared.api import MessageResponse

router = APIRouter(prefix="/api/admin", tags=["admin", "auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    request: Request,
    response: Response,
    authority: AdminSessionAuthority = Depends(get_authority),
) -> LoginResponse:
    settings = request.app.state.settings
    admin, record = authority.login(body.email, body.password)

    response.set_cookie(
        key=settings.session_cookie_name,
        value=record.sid,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
    )
    return LoginResponse(admin=AdminResponse.model_validate(admin))


@router.post("/logout", response_model=MessageResponse)
def logout(
    request: Request,
    response: Response,
    authority: AdminSessionAuthority = Depends(get_authority),
) -> MessageResponse:
    authority.logout(session_id_from(request))
    response.delete_cookie(key=request.app.state.settings.session_cookie_name, path="/")
    return MessageResponse(message="Logout successful")


@router.get("/profile", response_model=AdminResponse)
def profile(admin: AdminAccount = Depends(require_admin)) -> AdminResponse:
    return AdminResponse.model_validate(admin)
