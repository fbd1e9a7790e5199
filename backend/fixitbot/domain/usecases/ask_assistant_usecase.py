from fixitbot.domain.entities.chat_entity import ChatReply
from fixitbot.domain.repositories.chat_repository import ChatRepository


class AskAssistantUseCase:
    """Use case for chatting with the repair assistant."""

    def __init__(self, repository: ChatRepository):
        self._repository = repository

    def execute(self, session_id: str, text: str) -> ChatReply:
        """
        Execute the use case.

        Args:
            session_id: Conversation id chosen by the client.
            text: User message.

        Returns:
            The agent replies for this turn.
        """
        if not session_id or not session_id.strip() or not text or not text.strip():
            raise ValueError("sessionId y text son requeridos.")
        return self._repository.send(session_id=session_id.strip(), text=text.strip())
