"""
Community Garden Backend — Application Package Initializer
===========================================================

What: Marks the `garden` directory as a Python package.
Why:  Enables module imports like `from garden.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is a thin layered CRUD application:

    ┌─────────────────────────────────────┐
    │     Routes + Templates (Web Layer)  │  ← HTTP, forms, HTML rendering
    ├─────────────────────────────────────┤
    │         Services (Delegation)       │  ← Plot use cases
    ├─────────────────────────────────────┤
    │      Repositories (Data Access)     │  ← SQL for one entity each
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async engine + sessions
    └─────────────────────────────────────┘

    Each layer only talks to the one directly below it, so every layer can
    be tested with the layer underneath mocked or backed by SQLite.
"""

__version__ = "1.0.0"
