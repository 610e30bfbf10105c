from typing import List, Optional

from pydantic import BaseModel

from .ErrorReport import ErrorReport
from .Scene import Scene


class SceneView(BaseModel):
    """Scene as rendered by the UI, joined with its generation state"""

    scene: Scene
    images: List[str] = []
    generating: bool = False


class BatchStatus(BaseModel):
    running: bool
    outcome: Optional[str] = None  # "completed" or "stopped"
    attempted: int = 0
    succeeded: int = 0
    failed: int = 0


class SessionResponse(BaseModel):
    aspect_ratio: str
    scenes: List[SceneView]
    batch: BatchStatus
    errors: List[ErrorReport] = []
