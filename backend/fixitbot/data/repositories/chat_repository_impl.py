from typing import Any, Dict, List

from fixitbot.data.adapters.dialogflow_client import DialogflowClient
from fixitbot.domain.entities.chat_entity import ChatReply
from fixitbot.domain.repositories.chat_repository import ChatRepository


class ChatRepositoryImpl(ChatRepository):
    def __init__(self, client: DialogflowClient) -> None:
        self._client = client

    def send(self, session_id: str, text: str) -> ChatReply:
        data = self._client.detect_intent(session_id=session_id, text=text)
        return ChatReply(replies=self.extract_replies(data), raw=data)

    @staticmethod
    def extract_replies(data: Dict[str, Any]) -> List[str]:
        replies: List[str] = []
        query_result = data.get("queryResult") or {}
        for message in query_result.get("responseMessages") or []:
            if not isinstance(message, dict):
                continue
            for text in (message.get("text") or {}).get("text") or []:
                replies.append(str(text))
        return replies
