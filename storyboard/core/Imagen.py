from typing import List

from google import genai
from google.genai import types

from storyboard.helpers.errors import ProviderError


class Imagen:
    def __init__(self, api_key: str, model: str):
        self.client = genai.Client(api_key=api_key)
        self.model = model

    def generate_images(
        self, prompt: str, aspect_ratio: str, number_of_images: int = 1
    ) -> List[bytes]:
        """Generate JPEG images with an Imagen model"""
        try:
            response = self.client.models.generate_images(
                model=self.model,
                prompt=prompt,
                config=types.GenerateImagesConfig(
                    number_of_images=number_of_images,
                    aspect_ratio=aspect_ratio,
                    output_mime_type="image/jpeg",
                ),
            )
        except Exception as e:
            raise ProviderError(str(e)) from e

        generated = response.generated_images or []
        images = [g.image.image_bytes for g in generated if g.image and g.image.image_bytes]
        if not images:
            raise ProviderError("The model returned no images")

        return images
