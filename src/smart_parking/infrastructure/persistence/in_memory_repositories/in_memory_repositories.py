from typing import Dict, List, Optional

from smart_parking.application.repositories import AbstractTicketRepository
from smart_parking.domain.entities import Ticket


class InMemoryTicketRepository(AbstractTicketRepository):
    """Active tickets keyed by registration, closed tickets kept in closing order."""

    def __init__(self):
        self._active: Dict[str, Ticket] = {}
        self._closed: List[Ticket] = []

    def get_active_by_registration(self, registration: str) -> Optional[Ticket]:
        return self._active.get(registration)

    def add(self, ticket: Ticket) -> Ticket:
        if ticket.registration in self._active:
            raise ValueError(f"Registration {ticket.registration} already has an active ticket")
        self._active[ticket.registration] = ticket
        return ticket

    def close(self, ticket: Ticket) -> Ticket:
        if self._active.get(ticket.registration) is not ticket:
            raise ValueError(f"Ticket {ticket.id} is not an active ticket")
        del self._active[ticket.registration]
        self._closed.append(ticket)
        return ticket

    def get_active_tickets(self) -> List[Ticket]:
        return sorted(self._active.values(), key=lambda t: t.id)

    def get_closed_tickets(self) -> List[Ticket]:
        return list(self._closed)

    def get_by_id(self, ticket_id: int) -> Optional[Ticket]:
        for ticket in self._active.values():
            if ticket.id == ticket_id:
                return ticket
        for ticket in self._closed:
            if ticket.id == ticket_id:
                return ticket
        return None

    def count_active(self) -> int:
        return len(self._active)
