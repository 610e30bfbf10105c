import logging
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from storyboard.core.provider_calls import call_provider
from storyboard.helpers.errors import DecompositionError, ProviderError
from storyboard.models.SessionModel import SessionModel
from storyboard.schemas.Scene import Scene, SceneDraft

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"

DECOMPOSITION_INSTRUCTION = """You are a professional screenwriter. Read the following script from a PDF. Your task is to break it down into individual scenes. For each scene, provide:
1.  The scene number.
2.  A concise summary of the action and dialogue in the "script" field.
3.  A detailed, visually descriptive prompt for an AI image generator in the "prompt" field. This prompt should describe the characters, setting, lighting, and camera angle.
URGENT & CRITICAL: For any text that must appear in the image, you must provide an extremely detailed description. Follow this format with extreme precision: "A [adjective] [object] has the text '[the exact text]' written on it. The lettering is [style/font/color], and has a [weathered/new/glowing] appearance." This is the ONLY way to ensure text is rendered correctly. Simple descriptions will fail. For example: "A close-up shot of an ancient, salt-stained wooden pirate chest. Carved into the lid are the words 'DEAD MAN'S TALES' in a rough, jagged font. The letters look worn and are filled with a faint, eerie green moss."
For text meant to be an overlay, use this format: "Text overlay: 'Meanwhile...'".
Do not add any commentary or explanation outside of the JSON response.
The response should be a JSON array of scenes, each an object with the keys "scene", "script" and "prompt"."""

_scene_list = TypeAdapter(List[SceneDraft])


def parse_scenes(text: str) -> List[SceneDraft]:
    """Validate the model's JSON answer; anything but a list of scenes is fatal"""
    try:
        return _scene_list.validate_json(text)
    except ValidationError as e:
        raise DecompositionError(f"Invalid scene list from text model: {e}") from e


class ScriptDecomposer:
    def __init__(self, session: SessionModel, text_gen_client, timeout: float = 120.0):
        self.session = session
        self.text_gen_client = text_gen_client
        self.timeout = timeout

    async def decompose(self, pdf_bytes: bytes) -> List[SceneDraft]:
        """Ask the text model to split a script PDF into scenes"""
        try:
            text = await call_provider(
                self.text_gen_client.generate_json,
                pdf_bytes,
                PDF_MIME_TYPE,
                DECOMPOSITION_INSTRUCTION,
                List[SceneDraft],
                timeout=self.timeout,
            )
        except ProviderError as e:
            raise DecompositionError(e.message) from e
        except Exception as e:
            raise DecompositionError(str(e) or type(e).__name__) from e

        return parse_scenes(text)

    async def load_script(self, pdf_bytes: bytes) -> List[Scene]:
        """
        Replace the session's scenes with those found in ``pdf_bytes``.

        Scenes and results are cleared before the request, so a failure
        leaves the scene store empty.
        """
        self.session.clear_scenes()
        logger.info(f"Decomposing script ({len(pdf_bytes)} bytes)")

        drafts = await self.decompose(pdf_bytes)
        return self.session.load_scenes(drafts)


def is_pdf(content_type: Optional[str], filename: Optional[str]) -> bool:
    if content_type == PDF_MIME_TYPE:
        return True
    return bool(filename) and filename.lower().endswith(".pdf")
