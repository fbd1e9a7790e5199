from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ChatReply:
    """Text replies produced by the conversational agent for one user turn."""
    replies: List[str]
    raw: Dict[str, Any] = field(default_factory=dict)
