"""
Scatter-Brain Backend — Abstract Thought Store Interface
=========================================================

What:  Abstract base class defining the contract for thought storage.
How:   Concrete stores inherit from ThoughtStore and implement get/put/list.
Who:   Called by ThoughtService; nothing else touches a store.

Contract:
    get(id)          → Thought, or None when the id is absent (not an error)
    put(id, thought) → unconditionally overwrites the record at id
    list()           → snapshot of every stored Thought, in no defined order

There is no delete, no capacity bound and no expiry. A persistent backend
only has to honour these three operations to replace InMemoryThoughtStore.
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from scatterbrain.schemas.thought import Thought


class ThoughtStore(ABC):
    """
    Abstract interface for the id → Thought mapping.

    Implementations:
        - InMemoryThoughtStore: process-lifetime dict guarded by a lock
    """

    @abstractmethod
    def get(self, thought_id: uuid.UUID) -> Optional[Thought]:
        """Return the thought stored at `thought_id`, or None."""
        ...

    @abstractmethod
    def put(self, thought_id: uuid.UUID, thought: Thought) -> None:
        """Store `thought` at `thought_id`, replacing any existing record."""
        ...

    @abstractmethod
    def list(self) -> List[Thought]:
        """
        Return every stored thought.

        The returned list is a snapshot: later writes to the store do not
        show up in it, and callers may mutate it freely.
        """
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...
