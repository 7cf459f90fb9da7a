# Store package init
"""
Scatter-Brain Backend — Thought Storage
========================================

What:  The id → Thought mapping behind the thought service.

Store Inventory:
    - ThoughtStore (abstract): get / put / list contract
    - InMemoryThoughtStore: lock-guarded dict, discarded on process exit
"""

from scatterbrain.store.base import ThoughtStore
from scatterbrain.store.memory import InMemoryThoughtStore

__all__ = ["ThoughtStore", "InMemoryThoughtStore"]
