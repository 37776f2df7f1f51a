from typing import AsyncIterator, Dict, List
import logging

from core.errors import AIServiceError
from core.ids import new_id, now_ms
from core.storage import KeyValueStore, StorageKey
from models.schemas import AssessmentRecord, ChatMessage
from services.guidance_generator import GuidanceGenerator

logger = logging.getLogger(__name__)

MENTOR_ERROR = "Error: Could not get a response from the mentor."
MENTOR_DISABLED = "AI mentor is unavailable: API Key missing."
# Turns replayed to the model per reply
HISTORY_WINDOW = 20


class MentorChatService:
    """Conversation with the AI mentor, scoped to one assessment record."""

    def __init__(self, store: KeyValueStore, generator: GuidanceGenerator) -> None:
        self.store = store
        self.generator = generator

    @staticmethod
    def _thread_key(record: AssessmentRecord) -> str:
        return f"{record.user_id}:{record.id}"

    def history(self, record: AssessmentRecord) -> List[ChatMessage]:
        threads = self.store.get_dict(StorageKey.CHAT_HISTORY)
        return [ChatMessage(**doc) for doc in threads.get(self._thread_key(record), [])]

    def _append(self, record: AssessmentRecord, *messages: ChatMessage) -> None:
        threads = self.store.get_dict(StorageKey.CHAT_HISTORY)
        thread = threads.setdefault(self._thread_key(record), [])
        thread.extend(m.to_doc() for m in messages)
        self.store.set(StorageKey.CHAT_HISTORY, threads)

    @staticmethod
    def _model_history(messages: List[ChatMessage]) -> List[Dict[str, str]]:
        turns = [
            {"role": "assistant" if m.role == "model" else "user", "content": m.text}
            for m in messages if m.role != "error"
        ]
        return turns[-HISTORY_WINDOW:]

    async def send(self, record: AssessmentRecord, text: str) -> AsyncIterator[str]:
        """Stream the mentor's reply; the exchange is stored once it finishes."""
        question = ChatMessage(id=new_id("msg"), role="user", text=text.strip(), timestamp=now_ms())
        prior = self.history(record)

        if not self.generator.enabled:
            self._append(record, question, ChatMessage(id=new_id("msg"), role="error", text=MENTOR_DISABLED, timestamp=now_ms()))
            yield MENTOR_DISABLED
            return

        parts: List[str] = []
        try:
            async for chunk in self.generator.stream_chat(record.profile.summary, self._model_history(prior), question.text):
                parts.append(chunk)
                yield chunk
        except AIServiceError as e:
            logger.error(f"Mentor chat failed for {record.id}: {e.message}")
            self._append(record, question, ChatMessage(id=new_id("msg"), role="error", text=MENTOR_ERROR, timestamp=now_ms()))
            yield MENTOR_ERROR
            return

        reply = ChatMessage(id=new_id("msg"), role="model", text="".join(parts), timestamp=now_ms())
        self._append(record, question, reply)
