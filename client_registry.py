# client_registry.py
import logging
from dataclasses import dataclass
from threading import Lock
from typing import List, Optional

logger = logging.getLogger("clients")

SEED_CLIENTS = [
    ("Juan Pérez (Ejemplo)", "juan.perez@email.com", "5512345678"),
    ("Ana Gómez (Ejemplo)", "ana.gomez@email.com", "5587654321"),
]


@dataclass(frozen=True)
class ClientDraft:
    """A client that has not been stored yet (no id)."""
    name: str
    email: str
    phone: str


@dataclass(frozen=True)
class Client:
    id: int
    name: str
    email: str
    phone: str

    def to_dict(self):
        return {"id": self.id, "name": self.name, "email": self.email, "phone": self.phone}


class RegistryError(Exception):
    """Base class for registry failures."""


class DuplicateEmailError(RegistryError):
    def __init__(self, email: str):
        super().__init__(f"Email already in use: {email}")
        self.email = email


class ClientNotFoundError(RegistryError):
    def __init__(self, client_id: int):
        super().__init__(f"Client not found: {client_id}")
        self.client_id = client_id


class ClientRegistry:
    """In-memory store of clients.

    Emails are unique case-insensitively and ids are allocated from a
    counter that only moves forward. Every operation holds the lock for
    its whole check-then-mutate sequence.
    """

    def __init__(self):
        self._lock = Lock()
        self._clients: List[Client] = []
        self._next_id = 1

    @classmethod
    def with_seed(cls) -> "ClientRegistry":
        registry = cls()
        seed_clients(registry)
        return registry

    def _email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        wanted = email.lower()
        return any(
            c.email.lower() == wanted and c.id != exclude_id
            for c in self._clients
        )

    def _index_of(self, client_id: int) -> int:
        for i, c in enumerate(self._clients):
            if c.id == client_id:
                return i
        return -1

    def list(self) -> List[Client]:
        """Return all clients in insertion order"""
        with self._lock:
            return list(self._clients)

    def get_by_id(self, client_id: int) -> Optional[Client]:
        with self._lock:
            idx = self._index_of(client_id)
            return self._clients[idx] if idx != -1 else None

    def create(self, draft: ClientDraft) -> Client:
        """Register a new client, raising DuplicateEmailError if the email is used"""
        with self._lock:
            if self._email_taken(draft.email):
                logger.warning(f"Rejected new client, email in use: {draft.email}")
                raise DuplicateEmailError(draft.email)
            client = Client(id=self._next_id, name=draft.name, email=draft.email, phone=draft.phone)
            self._clients.append(client)
            self._next_id += 1
        logger.info(f"Client created id={client.id} email={client.email}")
        return client

    def update(self, candidate: Client) -> Client:
        """Replace an existing client in place.

        Raises ClientNotFoundError when no client has ``candidate.id`` and
        DuplicateEmailError when another client already owns the email.
        """
        with self._lock:
            idx = self._index_of(candidate.id)
            if idx == -1:
                raise ClientNotFoundError(candidate.id)
            if self._email_taken(candidate.email, exclude_id=candidate.id):
                logger.warning(f"Rejected update of id={candidate.id}, email in use: {candidate.email}")
                raise DuplicateEmailError(candidate.email)
            self._clients[idx] = candidate
        logger.info(f"Client updated id={candidate.id}")
        return candidate

    def delete(self, client_id: int) -> bool:
        """Remove a client. Returns False if there was nothing to remove."""
        with self._lock:
            remaining = [c for c in self._clients if c.id != client_id]
            removed = len(remaining) != len(self._clients)
            self._clients = remaining
        if removed:
            logger.info(f"Client deleted id={client_id}")
        return removed

    def __len__(self):
        with self._lock:
            return len(self._clients)


def seed_clients(registry: ClientRegistry) -> List[Client]:
    return [
        registry.create(ClientDraft(name=name, email=email, phone=phone))
        for name, email, phone in SEED_CLIENTS
    ]
