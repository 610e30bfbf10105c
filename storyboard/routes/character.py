from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile

from storyboard.models.SessionModel import SessionModel
from storyboard.routes.deps import get_session, require_text_client
from storyboard.schemas.StyleProfile import StyleProfile

character_router = APIRouter(prefix="/character", tags=["character"])


@character_router.post(
    "",
    response_model=StyleProfile,
    dependencies=[Depends(require_text_client)],
)
async def upload_character(
    request: Request,
    file: UploadFile = File(...),
    session: SessionModel = Depends(get_session),
):
    """Analyze a character reference image and apply its style to all scenes"""
    if request.app.state.coordinator.running:
        raise HTTPException(status_code=409, detail="Wait for image generation to finish.")

    content_type = file.content_type or ""
    if not content_type.startswith("image/"):
        raise HTTPException(status_code=400, detail="Please upload an image file.")

    image_bytes = await file.read()
    return await request.app.state.style_analyzer.analyze_style(image_bytes, content_type)


@character_router.get("", response_model=Optional[StyleProfile])
async def get_character(session: SessionModel = Depends(get_session)):
    return session.style_profile


@character_router.delete("")
async def clear_character(request: Request, session: SessionModel = Depends(get_session)):
    if request.app.state.coordinator.running:
        raise HTTPException(status_code=409, detail="Wait for image generation to finish.")

    session.set_style_profile(None)
    return {"cleared": True}
