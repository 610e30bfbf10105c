from storyboard.helpers.errors import ConfigurationError

from .GeminiText import GeminiText
from .GroqText import GroqText


class TextGeneratorProvider:
    def __init__(self, settings):
        self.settings = settings

    def create(self):
        if self.settings.TEXT_GEN_PROVIDER == "GEMINI":
            if not self.settings.GEMINI_API_KEY:
                raise ConfigurationError("GEMINI_API_KEY is required for GEMINI")
            return GeminiText(self.settings.GEMINI_API_KEY, self.settings.GEMINI_TEXT_MODEL)
        elif self.settings.TEXT_GEN_PROVIDER == "GROQ":
            if not self.settings.GROQ_API_KEY:
                raise ConfigurationError("GROQ_API_KEY is required for GROQ")
            return GroqText(self.settings.GROQ_API_KEY, self.settings.GROQ_VISION_MODEL)

        raise ConfigurationError(
            f"Unknown text provider: {self.settings.TEXT_GEN_PROVIDER}"
        )
