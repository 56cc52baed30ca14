# tests/test_storage.py
from concurrent.futures import ThreadPoolExecutor

from app.core.storage import EXAMPLE_TICKET_TITLE, TicketStore
from app.ticket import services as ticket_service
from app.ticket.schemas import TicketCreate


def test_ids_are_unique_and_increasing():
    store = TicketStore()
    created = [ticket_service.create_ticket(store, TicketCreate(title=str(i))) for i in range(5)]
    assert [t.id for t in created] == [1, 2, 3, 4, 5]
    assert store.list_all() == created


def test_custom_first_id():
    store = TicketStore(first_id=100)
    assert store.add("x").id == 100
    assert store.add("y").id == 101


def test_seeded_store_starts_with_example():
    store = TicketStore(seed_example=True)
    [example] = store.list_all()
    assert example.id == 1
    assert example.title == EXAMPLE_TICKET_TITLE
    assert example.status == "open"
    assert store.add("next").id == 2


def test_list_all_returns_snapshot():
    store = TicketStore()
    store.add("a")
    snapshot = store.list_all()
    store.add("b")
    assert len(snapshot) == 1
    assert store.count() == 2


def test_concurrent_creates_get_distinct_ids():
    store = TicketStore()
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda _: ticket_service.create_ticket(store), range(200)))

    ids = [t.id for t in store.list_all()]
    assert ids == list(range(1, 201))


def test_create_ticket_without_payload():
    store = TicketStore()
    ticket = ticket_service.create_ticket(store)
    assert ticket.title == "Untitled"
    assert ticket.status == "open"


def test_add_always_opens_ticket():
    store = TicketStore()
    assert store.add("x").status == "open"
