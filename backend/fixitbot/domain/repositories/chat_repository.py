from abc import ABC, abstractmethod

from fixitbot.domain.entities.chat_entity import ChatReply


class ChatRepository(ABC):
    """Interface for the conversational assistant."""

    @abstractmethod
    def send(self, session_id: str, text: str) -> ChatReply:
        """Send one user message within a session and return the agent replies."""
        raise NotImplementedError
