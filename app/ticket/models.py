# app/ticket/models.py
from dataclasses import dataclass

DEFAULT_TITLE = "Untitled"
STATUS_OPEN = "open"


@dataclass(frozen=True)
class Ticket:
    id: int
    title: str
    status: str = STATUS_OPEN
