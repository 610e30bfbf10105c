from typing import Optional

from storyboard.schemas.Scene import Scene
from storyboard.schemas.StyleProfile import StyleProfile

QUALITY_KEYWORDS = "masterpiece, best quality, high quality, absurdres, ultra-detailed"

# Appended to every prompt, styled or not
QUALITY_SUFFIX = f". Technical keywords for quality: {QUALITY_KEYWORDS}."


def compose(scene: Scene, style_profile: Optional[StyleProfile] = None) -> str:
    """Build the final image prompt for a scene"""
    if style_profile is None:
        return f"{scene.prompt}{QUALITY_SUFFIX}"

    # Keep style, scene and character requirements in separate sentences
    components = [
        f'In the specific artistic style of "{style_profile.artistic_style}", '
        f"generate the following scene:",
        f'"{scene.prompt}"',
        "CRITICAL: The main character(s) in this scene MUST strictly conform to "
        f'this detailed description: "{style_profile.character_description}". '
        "This is a mandatory requirement.",
        "IMPORTANT FOR TEXT: If the scene description includes text, render it "
        "with extreme accuracy and detail as specified.",
    ]

    return "\n".join(components) + QUALITY_SUFFIX
