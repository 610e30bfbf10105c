from typing import Literal

from pydantic import BaseModel

AspectRatio = Literal["16:9", "9:16"]


class LoginRequest(BaseModel):
    # Signed identity token from the sign-in button
    credential: str


class ScenePromptUpdate(BaseModel):
    prompt: str


class AspectRatioRequest(BaseModel):
    aspect_ratio: AspectRatio
