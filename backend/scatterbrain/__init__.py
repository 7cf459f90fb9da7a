"""
Scatter-Brain Backend — Application Package Initializer
=======================================================

What: Marks the `scatterbrain` directory as a Python package.
Who:  Imported by uvicorn (scatterbrain.main:app), pytest, and the CLI entry point.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (Thought workflow)    │  ← decode, lookup, error translation
    ├─────────────────────────────────────┤
    │        Schemas (Wire contract)      │  ← Pydantic models, JSON key casing
    ├─────────────────────────────────────┤
    │      Store (Process memory)         │  ← lock-guarded id → Thought map
    └─────────────────────────────────────┘

    Routes never touch the store directly; services never build HTTP responses.
"""

__version__ = "1.0.0"

SERVICE_NAME = "scatter-brain"
