from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    APP_NAME: str = "Storyboard Generator"
    APP_VERSION: str = "1.0.0"

    TEXT_GEN_PROVIDER: str = "GEMINI"
    IMG_GEN_PROVIDER: str = "IMAGEN"

    GEMINI_API_KEY: Optional[str] = None
    GEMINI_TEXT_MODEL: str = "gemini-2.5-flash"
    GEMINI_IMAGE_MODEL: str = "imagen-3.0-generate-002"

    GROQ_API_KEY: Optional[str] = None
    GROQ_VISION_MODEL: str = "meta-llama/llama-4-scout-17b-16e-instruct"

    HUGGING_FACE_KEY: Optional[str] = None
    HUGGING_FACE_MODEL: str = "black-forest-labs/FLUX.1-schnell"
    HUGGING_FACE_PROVIDER: str = "auto"

    # Image generation quality parameters (with sensible defaults)
    HUGGING_FACE_NUM_INFERENCE_STEPS: int = 30
    HUGGING_FACE_GUIDANCE_SCALE: float = 7.5

    POLLINATIONS_TIMEOUT: int = 60

    # Upper bound for any single provider call, in seconds
    PROVIDER_TIMEOUT_SECONDS: float = 120.0

    # Pause between requests while generating all scenes
    BATCH_DELAY_SECONDS: float = 1.0

    # Unset means demo mode (no sign-in)
    GOOGLE_CLIENT_ID: Optional[str] = None

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def get_settings():
    return Settings()
