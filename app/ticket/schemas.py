# app/ticket/schemas.py
from typing import Any

from pydantic import BaseModel


class TicketCreate(BaseModel):
    # empty or missing falls back to the default title
    title: str | None = None


def parse_ticket_create(raw: Any) -> TicketCreate:
    """Lenient read of a create body; anything unusable means no title."""
    if isinstance(raw, dict) and isinstance(raw.get("title"), str):
        return TicketCreate(title=raw["title"])
    return TicketCreate()


class TicketOut(BaseModel):
    id: int
    title: str
    status: str

    model_config = {"from_attributes": True}
