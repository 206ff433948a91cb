from dataclasses import dataclass


@dataclass
class Message:
    """Greeting message returned by the hello endpoint (not persisted)"""
    text: str
