import logging
from typing import List

from storyboard.core.prompt_composer import compose
from storyboard.core.provider_calls import call_provider
from storyboard.helpers.errors import SceneBusyError, SceneGenerationError
from storyboard.helpers.images import to_data_url
from storyboard.models.SessionModel import SessionModel

logger = logging.getLogger(__name__)

IMAGES_PER_SCENE = 1


class SceneGenerator:
    def __init__(self, session: SessionModel, image_gen_client, timeout: float = 120.0):
        self.session = session
        self.image_gen_client = image_gen_client
        self.timeout = timeout

    async def generate(self, scene_id: str) -> List[str]:
        """
        Generate the image for one scene and store it as the scene's result.

        Unknown scene ids are ignored. A scene that is already generating is
        rejected with SceneBusyError rather than requested twice. Provider
        failures raise SceneGenerationError and keep any earlier result.
        """
        scene = self.session.find_scene(scene_id)
        if scene is None:
            logger.warning(f"Ignoring generation request for unknown scene {scene_id}")
            return []

        if scene_id in self.session.generating:
            raise SceneBusyError(scene_id, scene.scene_number)

        self.session.generating.add(scene_id)
        try:
            prompt = compose(scene, self.session.style_profile)
            logger.info(f"Generating image for scene {scene.scene_number}")

            try:
                images = await call_provider(
                    self.image_gen_client.generate_images,
                    prompt,
                    self.session.aspect_ratio,
                    IMAGES_PER_SCENE,
                    timeout=self.timeout,
                )
            except Exception as e:
                raise SceneGenerationError(scene.scene_number, str(e)) from e

            if not images:
                raise SceneGenerationError(scene.scene_number, "The provider returned no images")

            urls = [to_data_url(image) for image in images]

            # The script may have been replaced while the request was in flight
            if self.session.find_scene(scene_id) is scene:
                self.session.results[scene_id] = urls
            return urls
        finally:
            self.session.generating.discard(scene_id)
