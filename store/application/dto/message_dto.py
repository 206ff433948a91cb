from pydantic import BaseModel


class MessageDto(BaseModel):
    """DTO for the greeting message"""
    text: str
