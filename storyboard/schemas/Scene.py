from pydantic import BaseModel, field_validator


class SceneDraft(BaseModel):
    """Scene as returned by the text model, before it gets an id"""

    scene: int
    script: str
    prompt: str

    @field_validator("scene")
    @classmethod
    def scene_number_is_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("scene numbers start at 1")
        return value


class Scene(BaseModel):
    """Model for a stored scene"""

    id: str
    scene_number: int
    script: str
    prompt: str  # editable by the user
