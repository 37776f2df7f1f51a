import os
from openai import AsyncOpenAI
from .config import settings
from dotenv import load_dotenv

class OpenAIClient:
    def __init__(self, api_key: str | None = None) -> None:
        load_dotenv()
        self.api_key = api_key or settings.OPENAI_API_KEY or os.getenv("OPENAI_API_KEY") or ""
        self._client: AsyncOpenAI | None = None

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @property
    def client(self) -> AsyncOpenAI:
        # Built lazily so the app starts (with AI disabled) when no key is set
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    # Expose chat/images so openai_client.chat.completions.create() works
    @property
    def chat(self):
        return self.client.chat

    @property
    def images(self):
        return self.client.images

openai_client = OpenAIClient()
