import logging
import uuid
from typing import Dict, List, Optional, Set

from storyboard.helpers.errors import StoryboardError
from storyboard.schemas.ErrorReport import ErrorReport
from storyboard.schemas.Scene import Scene, SceneDraft
from storyboard.schemas.StyleProfile import StyleProfile
from storyboard.schemas.User import User

logger = logging.getLogger(__name__)


class SessionModel:
    """
    Everything one signed-in user works with: the scene store, the active
    style profile, generated images and the set of scenes being generated.

    The workflow objects hold a reference to this instead of sharing
    module-level state. All mutation happens on the event loop.
    """

    def __init__(self, aspect_ratio: str = "16:9"):
        self.user: Optional[User] = None
        self.scenes: List[Scene] = []
        self.style_profile: Optional[StyleProfile] = None
        self.aspect_ratio = aspect_ratio
        # scene id -> image urls
        self.results: Dict[str, List[str]] = {}
        # scene ids with a request in flight
        self.generating: Set[str] = set()
        self.errors: List[ErrorReport] = []

    def find_scene(self, scene_id: str) -> Optional[Scene]:
        for scene in self.scenes:
            if scene.id == scene_id:
                return scene
        return None

    def clear_scenes(self):
        """Drop the scene store together with every result keyed by it"""
        self.scenes = []
        self.results = {}

    def load_scenes(self, drafts: List[SceneDraft]) -> List[Scene]:
        """Replace the scene store, giving each draft a fresh id"""
        self.clear_scenes()
        self.scenes = [
            Scene(
                id=str(uuid.uuid4()),
                scene_number=draft.scene,
                script=draft.script,
                prompt=draft.prompt,
            )
            for draft in drafts
        ]
        logger.info(f"Loaded {len(self.scenes)} scenes")
        return self.scenes

    def update_prompt(self, scene_id: str, prompt: str) -> Optional[Scene]:
        scene = self.find_scene(scene_id)
        if scene is not None:
            scene.prompt = prompt
        return scene

    def pending_scene_ids(self) -> List[str]:
        """Scene ids without a generated image, in store order"""
        return [scene.id for scene in self.scenes if scene.id not in self.results]

    def set_style_profile(self, profile: Optional[StyleProfile]):
        self.style_profile = profile

    def record_error(self, error: StoryboardError) -> ErrorReport:
        report = ErrorReport(**error.to_report())
        self.errors.append(report)
        logger.error(f"{report.title} {report.message}")
        return report

    def clear_errors(self):
        self.errors = []

    def sign_out(self):
        self.user = None
        self.clear_scenes()
        self.style_profile = None
