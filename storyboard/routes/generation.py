from typing import List

from fastapi import APIRouter, Depends, Request

from storyboard.models.SessionModel import SessionModel
from storyboard.routes.deps import batch_status, get_session, require_image_client, scene_views
from storyboard.schemas.ErrorReport import ErrorReport
from storyboard.schemas.SessionRequests import AspectRatioRequest
from storyboard.schemas.SessionResponses import BatchStatus, SessionResponse

generation_router = APIRouter(tags=["generation"])


@generation_router.get("/session", response_model=SessionResponse)
async def session_snapshot(request: Request, session: SessionModel = Depends(get_session)):
    """Everything the UI needs to render the storyboard"""
    return SessionResponse(
        aspect_ratio=session.aspect_ratio,
        scenes=scene_views(session),
        batch=batch_status(request.app.state.coordinator),
        errors=session.errors,
    )


@generation_router.put("/settings/aspect-ratio")
async def set_aspect_ratio(body: AspectRatioRequest, session: SessionModel = Depends(get_session)):
    session.aspect_ratio = body.aspect_ratio
    return {"aspect_ratio": session.aspect_ratio}


@generation_router.post(
    "/generate-all",
    response_model=BatchStatus,
    status_code=202,
    dependencies=[Depends(require_image_client)],
)
async def generate_all(request: Request, session: SessionModel = Depends(get_session)):
    """Start generating every scene without an image, in the background"""
    coordinator = request.app.state.coordinator
    coordinator.start()
    return batch_status(coordinator)


@generation_router.post("/generate-all/stop", response_model=BatchStatus)
async def stop_generation(request: Request, session: SessionModel = Depends(get_session)):
    coordinator = request.app.state.coordinator
    coordinator.stop()
    return batch_status(coordinator)


@generation_router.get("/generate-all", response_model=BatchStatus)
async def generation_status(request: Request, session: SessionModel = Depends(get_session)):
    return batch_status(request.app.state.coordinator)


@generation_router.get("/errors", response_model=List[ErrorReport])
async def list_errors(session: SessionModel = Depends(get_session)):
    return session.errors


@generation_router.delete("/errors")
async def clear_errors(session: SessionModel = Depends(get_session)):
    session.clear_errors()
    return {"cleared": True}
