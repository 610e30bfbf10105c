from google import genai
from google.genai import types

from storyboard.helpers.errors import ProviderError


class GeminiText:
    """Multimodal text generation with Gemini; accepts PDFs and images"""

    def __init__(self, api_key: str, model: str):
        self.client = genai.Client(api_key=api_key)
        self.model = model

    def generate_json(self, data: bytes, mime_type: str, instruction: str, response_schema) -> str:
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=[
                    types.Part.from_bytes(data=data, mime_type=mime_type),
                    instruction,
                ],
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=response_schema,
                ),
            )
        except Exception as e:
            raise ProviderError(str(e)) from e

        if not response.text:
            raise ProviderError("Empty response from Gemini API")

        return response.text
