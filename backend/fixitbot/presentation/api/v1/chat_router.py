from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from fixitbot.core.di.service_locator import ServiceLocator
from fixitbot.core.utils.logger import get_logger
from fixitbot.domain.exceptions import ChatConfigError, ChatError

router = APIRouter(prefix="/api/v1/chat", tags=["chat"])
logger = get_logger("chat_router")


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: Optional[str] = Field(None, alias="sessionId", description="Conversation id chosen by the client")
    text: Optional[str] = Field(None, description="User message")


class ChatResponse(BaseModel):
    replies: List[str]
    raw: Dict[str, Any] = {}


@router.post("", response_model=ChatResponse)
def chat(req: ChatRequest):
    try:
        usecase = ServiceLocator.ask_assistant_usecase()
        reply = usecase.execute(session_id=req.session_id or "", text=req.text or "")
        return ChatResponse(replies=reply.replies, raw=reply.raw)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ChatConfigError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except ChatError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception:
        logger.exception("Error in /api/v1/chat")
        raise HTTPException(status_code=500, detail="Fallo en /api/v1/chat")
