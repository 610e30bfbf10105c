"""
Storyboard exceptions.

Every error that reaches the user carries a short ``title`` and the
underlying ``message``; the API layer renders both.
"""


class StoryboardError(Exception):
    """Base exception for all storyboard errors."""

    title = "Something went wrong."
    status_code = 500

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message

    def to_report(self) -> dict:
        return {"title": self.title, "message": self.message}


class ConfigurationError(StoryboardError):
    """Raised when a provider is selected but not configured."""

    title = "Configuration error."
    status_code = 503


class ProviderError(StoryboardError):
    """Raised when a hosted model call fails or returns nothing usable."""

    title = "Provider request failed."
    status_code = 502


class DecompositionError(StoryboardError):
    """Raised when the script could not be broken into scenes."""

    title = "Failed to process PDF."
    status_code = 502


class StyleAnalysisError(StoryboardError):
    """Raised when the character reference could not be analyzed."""

    title = "Failed to analyze character style."
    status_code = 502


class SceneGenerationError(StoryboardError):
    """Raised when image generation fails for one scene."""

    status_code = 502

    def __init__(self, scene_number: int, reason: str):
        message = f"Image generation failed for scene {scene_number}: {reason}"
        super().__init__(message, {"scene_number": scene_number})
        self.scene_number = scene_number
        self.title = f"Failed to generate image for scene {scene_number}."


class SceneBusyError(StoryboardError):
    """Raised when a scene is requested while its image is already generating."""

    status_code = 409

    def __init__(self, scene_id: str, scene_number: int):
        super().__init__(
            f"Scene {scene_number} is already generating.",
            {"scene_id": scene_id},
        )
        self.title = f"Scene {scene_number} is busy."


class BatchAlreadyRunningError(StoryboardError):
    """Raised when "generate all" is started while a batch is running."""

    title = "Generation already running."
    status_code = 409


class NotSignedInError(StoryboardError):

    title = "Not signed in."
    status_code = 401
