from typing import List

from fastapi import Request

from storyboard.helpers.errors import ConfigurationError, NotSignedInError
from storyboard.models.SessionModel import SessionModel
from storyboard.schemas.SessionResponses import BatchStatus, SceneView


def get_session(request: Request) -> SessionModel:
    session = request.app.state.session
    if session.user is None:
        raise NotSignedInError("Sign in to continue.")
    return session


def require_text_client(request: Request):
    if request.app.state.decomposer.text_gen_client is None:
        raise ConfigurationError("No text generation provider is configured.")


def require_image_client(request: Request):
    if request.app.state.generator.image_gen_client is None:
        raise ConfigurationError("No image generation provider is configured.")


def scene_views(session: SessionModel) -> List[SceneView]:
    return [
        SceneView(
            scene=scene,
            images=session.results.get(scene.id, []),
            generating=scene.id in session.generating,
        )
        for scene in session.scenes
    ]


def batch_status(coordinator) -> BatchStatus:
    run = coordinator.last_run
    if run is None:
        return BatchStatus(running=coordinator.running)

    return BatchStatus(
        running=coordinator.running,
        outcome=run.outcome.value if run.outcome else None,
        attempted=run.attempted,
        succeeded=run.succeeded,
        failed=run.failed,
    )
