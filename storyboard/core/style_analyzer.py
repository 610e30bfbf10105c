import logging

from pydantic import ValidationError

from storyboard.core.provider_calls import call_provider
from storyboard.helpers.errors import ProviderError, StyleAnalysisError
from storyboard.models.SessionModel import SessionModel
from storyboard.schemas.StyleProfile import StyleProfile

logger = logging.getLogger(__name__)

STYLE_INSTRUCTION = """Analyze the attached image of a character. Your goal is to create a reusable style description for an AI image generator.
You must provide a detailed breakdown of the character's physical appearance and the overall artistic style of the image.
Respond with a single JSON object containing two keys:
1. "character_description": A highly detailed description of the character, including their clothing, hair style and color, facial features, and any notable accessories.
2. "artistic_style": A description of the overall artistic style. For example: "Pixar-style 3D animation", "Gritty, realistic concept art", "Ghibli-inspired watercolor anime", "Classic 1990s comic book art"."""


class StyleAnalyzer:
    def __init__(self, session: SessionModel, text_gen_client, timeout: float = 120.0):
        self.session = session
        self.text_gen_client = text_gen_client
        self.timeout = timeout

    async def analyze_style(self, image_bytes: bytes, mime_type: str) -> StyleProfile:
        """
        Derive a style profile from a character reference image and make it
        the session's active profile.

        On any failure the previous profile is discarded too, so no stale
        character reference stays applied.
        """
        try:
            text = await call_provider(
                self.text_gen_client.generate_json,
                image_bytes,
                mime_type,
                STYLE_INSTRUCTION,
                StyleProfile,
                timeout=self.timeout,
            )
            profile = StyleProfile.model_validate_json(text)
        except ProviderError as e:
            self.session.set_style_profile(None)
            raise StyleAnalysisError(e.message) from e
        except ValidationError as e:
            self.session.set_style_profile(None)
            raise StyleAnalysisError(f"Invalid style description from text model: {e}") from e
        except Exception as e:
            self.session.set_style_profile(None)
            raise StyleAnalysisError(str(e) or type(e).__name__) from e

        self.session.set_style_profile(profile)
        logger.info(f"Style profile applied: {profile.artistic_style}")
        return profile
