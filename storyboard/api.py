import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storyboard.core.batch_coordinator import BatchCoordinator
from storyboard.core.identity import DEMO_USER
from storyboard.core.ImageGeneratorProvider import ImageGeneratorProvider
from storyboard.core.scene_generator import SceneGenerator
from storyboard.core.script_decomposer import ScriptDecomposer
from storyboard.core.style_analyzer import StyleAnalyzer
from storyboard.core.TextGeneratorProvider import TextGeneratorProvider
from storyboard.helpers.config import Settings, get_settings
from storyboard.helpers.errors import ConfigurationError, NotSignedInError, StoryboardError
from storyboard.helpers.logging_config import setup_logging
from storyboard.models.SessionModel import SessionModel
from storyboard.routes import auth, base, character, generation, scenes

logger = logging.getLogger(__name__)


def _create_client(provider, kind: str):
    try:
        return provider.create()
    except ConfigurationError as e:
        logger.warning(f"{kind} provider unavailable: {e.message}")
        return None


def create_app(
    settings: Settings = None,
    text_gen_client=None,
    image_gen_client=None,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Break a script into scenes and generate a storyboard image per scene",
        version=settings.APP_VERSION,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if text_gen_client is None:
        text_gen_client = _create_client(TextGeneratorProvider(settings), "Text")
    if image_gen_client is None:
        image_gen_client = _create_client(ImageGeneratorProvider(settings), "Image")

    session = SessionModel()
    if not settings.GOOGLE_CLIENT_ID:
        logger.warning("Google Client ID is not configured. Running in demo mode.")
        session.user = DEMO_USER

    generator = SceneGenerator(session, image_gen_client, settings.PROVIDER_TIMEOUT_SECONDS)

    app.state.settings = settings
    app.state.session = session
    app.state.decomposer = ScriptDecomposer(
        session, text_gen_client, settings.PROVIDER_TIMEOUT_SECONDS
    )
    app.state.style_analyzer = StyleAnalyzer(
        session, text_gen_client, settings.PROVIDER_TIMEOUT_SECONDS
    )
    app.state.generator = generator
    app.state.coordinator = BatchCoordinator(
        session, generator, delay_seconds=settings.BATCH_DELAY_SECONDS
    )

    @app.exception_handler(StoryboardError)
    async def storyboard_error_handler(request: Request, exc: StoryboardError):
        if isinstance(exc, NotSignedInError):
            return JSONResponse(status_code=exc.status_code, content=exc.to_report())

        report = request.app.state.session.record_error(exc)
        return JSONResponse(status_code=exc.status_code, content=report.model_dump())

    app.include_router(base.base_router)
    app.include_router(auth.auth_router)
    app.include_router(scenes.scenes_router)
    app.include_router(character.character_router)
    app.include_router(generation.generation_router)

    logger.info("All components initialized successfully")
    return app


app = create_app()
