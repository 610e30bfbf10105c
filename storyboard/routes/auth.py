from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from storyboard.core.identity import DEMO_USER, decode_identity_token
from storyboard.models.SessionModel import SessionModel
from storyboard.routes.deps import get_session
from storyboard.schemas.SessionRequests import LoginRequest
from storyboard.schemas.User import User

auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/login", response_model=User)
async def login(request: Request, body: Optional[LoginRequest] = None):
    session = request.app.state.session

    # Without a configured client id there is nothing to sign in with
    if not request.app.state.settings.GOOGLE_CLIENT_ID:
        session.user = DEMO_USER
        return session.user

    if body is None:
        raise HTTPException(status_code=400, detail="Missing identity credential")

    user = decode_identity_token(body.credential)
    if user is None:
        raise HTTPException(status_code=400, detail="Invalid identity token")

    session.user = user
    return user


@auth_router.post("/logout")
async def logout(request: Request, session: SessionModel = Depends(get_session)):
    request.app.state.coordinator.stop()
    session.sign_out()
    return {"signed_out": True}


@auth_router.get("/me", response_model=User)
async def me(session: SessionModel = Depends(get_session)):
    return session.user
