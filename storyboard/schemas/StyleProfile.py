from pydantic import BaseModel


class StyleProfile(BaseModel):
    """Character and art-style descriptor applied to every scene prompt"""

    character_description: str
    artistic_style: str
