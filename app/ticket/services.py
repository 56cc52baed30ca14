# app/ticket/services.py
import logging

from app.core.storage import TicketStore
from app.ticket.models import DEFAULT_TITLE, Ticket
from app.ticket.schemas import TicketCreate

logger = logging.getLogger(__name__)


def get_all_tickets(store: TicketStore) -> list[Ticket]:
    return store.list_all()


def get_ticket(store: TicketStore, ticket_id: int) -> Ticket | None:
    return store.get(ticket_id)


def create_ticket(store: TicketStore, payload: TicketCreate | None = None) -> Ticket:
    title = payload.title if payload else None
    ticket = store.add(title or DEFAULT_TITLE)
    logger.info("Created ticket id=%s title=%r", ticket.id, ticket.title)
    return ticket
