from .in_memory_repositories import InMemoryTicketRepository

__all__ = [
    "InMemoryTicketRepository",
]
