"""
Scatter-Brain Backend — In-Memory Thought Store
================================================

What:  ThoughtStore backed by a plain dict that lives as long as the process.
How:   Every operation takes a single threading.Lock, so each get/put/list is
       atomic whether it runs on the event loop or in a worker thread.
Who:   Created by the app factory (one store per app instance).

Lifetime:
    Records are never evicted. Restarting the process discards them all.
"""

import logging
import threading
import uuid
from typing import Dict, List, Optional

from scatterbrain.schemas.thought import Thought
from scatterbrain.store.base import ThoughtStore

logger = logging.getLogger(__name__)


class InMemoryThoughtStore(ThoughtStore):
    """
    Lock-guarded dict of id → Thought.

    Stored records are Pydantic models; callers receive the stored instance
    from get() and list(), so they must treat it as read-only and write back
    through put() instead.
    """

    def __init__(self) -> None:
        self._thoughts: Dict[uuid.UUID, Thought] = {}
        self._lock = threading.Lock()
        logger.info("Initializing the thought store.")

    def get(self, thought_id: uuid.UUID) -> Optional[Thought]:
        with self._lock:
            return self._thoughts.get(thought_id)

    def put(self, thought_id: uuid.UUID, thought: Thought) -> None:
        with self._lock:
            self._thoughts[thought_id] = thought

    def list(self) -> List[Thought]:
        with self._lock:
            return list(self._thoughts.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._thoughts)
