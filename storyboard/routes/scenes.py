from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, Request, Response, UploadFile

from storyboard.core.script_decomposer import is_pdf
from storyboard.helpers.images import from_data_url
from storyboard.models.SessionModel import SessionModel
from storyboard.routes.deps import (
    get_session,
    require_image_client,
    require_text_client,
    scene_views,
)
from storyboard.schemas.Scene import Scene
from storyboard.schemas.SessionRequests import ScenePromptUpdate
from storyboard.schemas.SessionResponses import SceneView

scenes_router = APIRouter(tags=["scenes"])


@scenes_router.post(
    "/script",
    response_model=List[Scene],
    dependencies=[Depends(require_text_client)],
)
async def upload_script(
    request: Request,
    file: UploadFile = File(...),
    session: SessionModel = Depends(get_session),
):
    """Break an uploaded script PDF into scenes, replacing the current ones"""
    if not is_pdf(file.content_type, file.filename):
        raise HTTPException(status_code=400, detail="Please upload a PDF file.")

    pdf_bytes = await file.read()
    return await request.app.state.decomposer.load_script(pdf_bytes)


@scenes_router.get("/scenes", response_model=List[SceneView])
async def list_scenes(session: SessionModel = Depends(get_session)):
    return scene_views(session)


def _scene_or_404(session: SessionModel, scene_id: str) -> Scene:
    scene = session.find_scene(scene_id)
    if scene is None:
        raise HTTPException(status_code=404, detail="Scene not found")
    return scene


@scenes_router.patch("/scenes/{scene_id}", response_model=Scene)
async def update_scene_prompt(
    scene_id: str,
    body: ScenePromptUpdate,
    session: SessionModel = Depends(get_session),
):
    _scene_or_404(session, scene_id)
    return session.update_prompt(scene_id, body.prompt)


@scenes_router.post(
    "/scenes/{scene_id}/generate",
    response_model=SceneView,
    dependencies=[Depends(require_image_client)],
)
async def generate_scene_image(
    request: Request,
    scene_id: str,
    session: SessionModel = Depends(get_session),
):
    scene = _scene_or_404(session, scene_id)
    images = await request.app.state.generator.generate(scene_id)
    return SceneView(scene=scene, images=images, generating=False)


@scenes_router.get("/scenes/{scene_id}/image")
async def download_scene_image(scene_id: str, session: SessionModel = Depends(get_session)):
    """Download the generated image as scene_<number>.jpeg"""
    scene = _scene_or_404(session, scene_id)
    urls = session.results.get(scene_id)
    if not urls:
        raise HTTPException(status_code=404, detail="No image generated for this scene")

    return Response(
        content=from_data_url(urls[0]),
        media_type="image/jpeg",
        headers={
            "Content-Disposition": f'attachment; filename="scene_{scene.scene_number}.jpeg"'
        },
    )
