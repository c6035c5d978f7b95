from .abstract_repositories import AbstractTicketRepository

__all__ = [
    "AbstractTicketRepository",
]
