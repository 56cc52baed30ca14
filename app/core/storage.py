# app/core/storage.py
import threading

from app.core.config import get_settings
from app.ticket.models import STATUS_OPEN, Ticket

EXAMPLE_TICKET_TITLE = "Example ticket"


class TicketStore:
    """Process-local, insertion-ordered ticket collection.

    Handlers run in FastAPI's thread pool, so the list and the id counter
    share one lock. Each replica holds its own disjoint collection.
    """

    def __init__(self, seed_example: bool = False, first_id: int = 1):
        self._lock = threading.Lock()
        self._tickets: list[Ticket] = []
        self._next_id = first_id
        if seed_example:
            self.add(EXAMPLE_TICKET_TITLE)

    def add(self, title: str) -> Ticket:
        with self._lock:
            ticket = Ticket(id=self._next_id, title=title, status=STATUS_OPEN)
            self._next_id += 1
            self._tickets.append(ticket)
            return ticket

    def list_all(self) -> list[Ticket]:
        with self._lock:
            return list(self._tickets)

    def get(self, ticket_id: int) -> Ticket | None:
        with self._lock:
            for ticket in self._tickets:
                if ticket.id == ticket_id:
                    return ticket
        return None

    def count(self) -> int:
        with self._lock:
            return len(self._tickets)


settings = get_settings()

store = TicketStore(seed_example=settings.SEED_EXAMPLE_TICKET)


# Common store dependency
def get_store() -> TicketStore:
    return store
