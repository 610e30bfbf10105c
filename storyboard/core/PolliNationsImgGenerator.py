import logging
import urllib.parse
from typing import List

import requests

from storyboard.helpers.errors import ProviderError
from storyboard.helpers.images import dimensions_for, normalize_jpeg

logger = logging.getLogger(__name__)


class PolliNationsImgGenerator:
    def __init__(self, timeout: int = 60) -> None:
        self.base_url = "https://image.pollinations.ai/prompt/"
        self.timeout = timeout

    def generate_images(
        self, prompt: str, aspect_ratio: str, number_of_images: int = 1
    ) -> List[bytes]:
        """Generate images from Pollinations.ai, as JPEG bytes"""
        width, height = dimensions_for(aspect_ratio)
        url = f"{self.base_url}{urllib.parse.quote(prompt)}"
        images: List[bytes] = []

        for i in range(number_of_images):
            try:
                response = requests.get(
                    url,
                    params={"width": width, "height": height, "nologo": "true"},
                    timeout=self.timeout,
                )
                response.raise_for_status()
            except requests.exceptions.RequestException as e:
                raise ProviderError(str(e)) from e

            images.append(normalize_jpeg(response.content))
            logger.debug(f"Received image {i+1}/{number_of_images}")

        return images
