import base64

from groq import Groq

from storyboard.helpers.errors import ProviderError


class GroqText:
    """
    Text generation through a Groq-hosted vision model.

    Groq chat completions take images but not documents, so this provider
    can analyze a character reference but cannot read a script PDF.
    """

    def __init__(self, api_key: str, model: str):
        self.client = Groq(api_key=api_key)
        self.model = model

    def generate_json(self, data: bytes, mime_type: str, instruction: str, response_schema) -> str:
        if not mime_type.startswith("image/"):
            raise ProviderError(f"Groq cannot read {mime_type} documents")

        encoded = base64.b64encode(data).decode("ascii")
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": instruction},
                            {
                                "type": "image_url",
                                "image_url": {"url": f"data:{mime_type};base64,{encoded}"},
                            },
                        ],
                    }
                ],
                temperature=0.2,
                response_format={"type": "json_object"},
            )
            content = response.choices[0].message.content
        except Exception as e:
            raise ProviderError(str(e)) from e

        # Handle potential None content
        if not content:
            raise ProviderError("Empty response from Groq API")

        return content
