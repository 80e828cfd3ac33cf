"""
Chirpy Backend — Application Package Initializer
=================================================

What: Marks the `chirpy` directory as a Python package.
Who:  Used by uvicorn (`uvicorn chirpy.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Chirp validation, hit counter, users
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes translate HTTP into service calls; services never see a Request
    object and can be tested without a server.
"""

__version__ = "1.0.0"
