from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from ..prompts import build_card_messages, get_card_prompt, get_prompt_by_type, get_supported_languages

router = APIRouter(prefix="/api/prompts", tags=["prompts"])


class CardMessagesRequest(BaseModel):
    description: str
    language: str = "zh-CN"


@router.get("/languages")
async def list_prompt_languages():
    return {"languages": get_supported_languages()}


@router.get("/card")
async def card_prompt(language: str = "zh-CN"):
    resolved = language if language in get_supported_languages() else "zh-CN"
    return {"language": resolved, "prompt": get_card_prompt(language)}


@router.post("/card/messages")
async def card_messages(req: CardMessagesRequest):
    return {"messages": build_card_messages(req.description, req.language)}


@router.get("/artwork")
async def artwork_prompt(name: str, description: str = "", card_type: Optional[str] = "MINION"):
    return {
        "name": name,
        "card_type": (card_type or "MINION").upper(),
        "prompt": get_prompt_by_type(name, description, card_type),
    }
