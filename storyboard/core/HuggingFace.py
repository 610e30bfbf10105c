import logging
from typing import List

from huggingface_hub import InferenceClient

from storyboard.helpers.errors import ProviderError
from storyboard.helpers.images import dimensions_for, to_jpeg_bytes

logger = logging.getLogger(__name__)


class HuggingFace:
    def __init__(
        self,
        api_key,
        hugging_face_model,
        hugging_face_provider,
        num_inference_steps: int | None = None,
        guidance_scale: float | None = None,
    ):
        self.client = InferenceClient(
            provider=hugging_face_provider,
            api_key=api_key,
        )
        self.hugging_face_model = hugging_face_model
        self.num_inference_steps = num_inference_steps
        self.guidance_scale = guidance_scale

    def generate_images(
        self, prompt: str, aspect_ratio: str, number_of_images: int = 1
    ) -> List[bytes]:
        """Generate images through the Hugging Face inference API, as JPEG bytes"""
        width, height = dimensions_for(aspect_ratio)
        images: List[bytes] = []

        for i in range(number_of_images):
            logger.debug(f"Requesting image {i+1}/{number_of_images} ({width}x{height})")
            try:
                img = self.client.text_to_image(
                    prompt,
                    model=self.hugging_face_model,
                    num_inference_steps=self.num_inference_steps,
                    guidance_scale=self.guidance_scale,
                    width=width,
                    height=height,
                )
            except Exception as e:
                raise ProviderError(str(e)) from e

            images.append(to_jpeg_bytes(img))

        return images
