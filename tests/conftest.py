"""
Pytest configuration and fixtures.

The fake provider clients stand in for the hosted text and image models so
the workflow can be exercised without network access.
"""

import json

import pytest

from storyboard.helpers.config import Settings
from storyboard.helpers.errors import ProviderError
from storyboard.models.SessionModel import SessionModel
from storyboard.schemas.Scene import Scene


class FakeImageClient:
    """Returns ``images[prompt_key]`` or fails when the prompt contains a marker"""

    def __init__(self, images=None, fail_on=(), on_call=None):
        self.images = images or {}
        self.fail_on = fail_on
        self.on_call = on_call
        self.calls = []

    def generate_images(self, prompt, aspect_ratio, number_of_images=1):
        self.calls.append(
            {"prompt": prompt, "aspect_ratio": aspect_ratio, "number_of_images": number_of_images}
        )
        if self.on_call is not None:
            self.on_call(prompt)

        for marker in self.fail_on:
            if marker in prompt:
                raise ProviderError(f"quota exceeded for {marker}")

        for key, data in self.images.items():
            if key in prompt:
                return [data]
        return [b"jpeg-bytes"]


class FakeTextClient:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def generate_json(self, data, mime_type, instruction, response_schema):
        self.calls.append({"data": data, "mime_type": mime_type, "instruction": instruction})
        if self.error is not None:
            raise self.error
        return self.response


SCENES_JSON = json.dumps(
    [
        {"scene": 1, "script": "A knight rides out.", "prompt": "knight on horseback at dawn"},
        {"scene": 2, "script": "The dragon wakes.", "prompt": "dragon opening one eye in a cave"},
        {"scene": 3, "script": "They meet.", "prompt": "knight facing dragon on a cliff"},
    ]
)

STYLE_JSON = json.dumps(
    {
        "character_description": "a tall knight in dented silver armor with a red plume",
        "artistic_style": "Ghibli-inspired watercolor anime",
    }
)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        GOOGLE_CLIENT_ID=None,
        BATCH_DELAY_SECONDS=0,
        PROVIDER_TIMEOUT_SECONDS=5,
    )


@pytest.fixture
def session():
    return SessionModel()


@pytest.fixture
def two_scene_session(session):
    session.scenes = [
        Scene(id="a", scene_number=1, script="Opening.", prompt="scene-a harbor at night"),
        Scene(id="b", scene_number=2, script="Chase.", prompt="scene-b rooftop chase"),
    ]
    return session


@pytest.fixture
def image_client():
    return FakeImageClient()


@pytest.fixture
def text_client():
    return FakeTextClient(response=SCENES_JSON)
