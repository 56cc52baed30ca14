# app/ticket/routes.py
import json

from fastapi import APIRouter, Depends, HTTPException, Request
from app.core.storage import TicketStore, get_store
from app.ticket.schemas import TicketCreate, TicketOut, parse_ticket_create
from app.ticket import services as ticket_service

router = APIRouter(prefix="/tickets", tags=["Tickets"])

_create_body = {
    "requestBody": {
        "required": False,
        "content": {"application/json": {"schema": TicketCreate.model_json_schema()}},
    }
}


@router.post("", response_model=TicketOut, status_code=201, openapi_extra=_create_body)
async def create(request: Request, store: TicketStore = Depends(get_store)):
    try:
        raw = json.loads(await request.body())
    except ValueError:
        raw = None
    return ticket_service.create_ticket(store, parse_ticket_create(raw))


@router.get("", response_model=list[TicketOut])
def list_all(store: TicketStore = Depends(get_store)):
    return ticket_service.get_all_tickets(store)


@router.get("/{ticket_id}", response_model=TicketOut)
def get(ticket_id: int, store: TicketStore = Depends(get_store)):
    ticket = ticket_service.get_ticket(store, ticket_id)
    if not ticket:
        raise HTTPException(status_code=404, detail="Ticket not found")
    return ticket
