from abc import ABC, abstractmethod
from typing import List, Optional

from smart_parking.domain.entities import Ticket


class AbstractTicketRepository(ABC):
    @abstractmethod
    def get_active_by_registration(self, registration: str) -> Optional[Ticket]:
        pass

    @abstractmethod
    def add(self, ticket: Ticket) -> Ticket:
        pass

    @abstractmethod
    def close(self, ticket: Ticket) -> Ticket:
        pass

    @abstractmethod
    def get_active_tickets(self) -> List[Ticket]:
        pass

    @abstractmethod
    def get_closed_tickets(self) -> List[Ticket]:
        pass

    @abstractmethod
    def get_by_id(self, ticket_id: int) -> Optional[Ticket]:
        pass

    @abstractmethod
    def count_active(self) -> int:
        pass
