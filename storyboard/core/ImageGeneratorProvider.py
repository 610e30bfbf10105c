from storyboard.helpers.errors import ConfigurationError

from .HuggingFace import HuggingFace
from .Imagen import Imagen
from .PolliNationsImgGenerator import PolliNationsImgGenerator


class ImageGeneratorProvider:
    def __init__(self, settings):
        self.settings = settings

    def create(self):
        if self.settings.IMG_GEN_PROVIDER == "IMAGEN":
            if not self.settings.GEMINI_API_KEY:
                raise ConfigurationError("GEMINI_API_KEY is required for IMAGEN")
            return Imagen(
                self.settings.GEMINI_API_KEY,
                self.settings.GEMINI_IMAGE_MODEL,
            )
        elif self.settings.IMG_GEN_PROVIDER == "HUGGING_FACE":
            if not self.settings.HUGGING_FACE_KEY:
                raise ConfigurationError("HUGGING_FACE_KEY is required for HUGGING_FACE")
            return HuggingFace(
                self.settings.HUGGING_FACE_KEY,
                self.settings.HUGGING_FACE_MODEL,
                self.settings.HUGGING_FACE_PROVIDER,
                num_inference_steps=self.settings.HUGGING_FACE_NUM_INFERENCE_STEPS,
                guidance_scale=self.settings.HUGGING_FACE_GUIDANCE_SCALE,
            )
        elif self.settings.IMG_GEN_PROVIDER == "POLLINATIONS":
            return PolliNationsImgGenerator(timeout=self.settings.POLLINATIONS_TIMEOUT)

        raise ConfigurationError(
            f"Unknown image provider: {self.settings.IMG_GEN_PROVIDER}"
        )
