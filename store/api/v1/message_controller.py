# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.message_dto import MessageDto
from ...domain.models.message import Message


router = APIRouter(tags=["messages"])


@router.get("/hello", response_model=MessageDto)
async def hello() -> MessageDto:
    message = Message(text="Hello World")
    return MessageDto(text=message.text)
