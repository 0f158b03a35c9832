"""
IdeaBoard Backend: Application Package Initializer
====================================================

What: Marks the `ideaboard` directory as a Python package.
Who:  Imported by uvicorn, Alembic and pytest.

Architecture Note:
    The backend is split into layers, each only talking to the one below it:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, composition of likes
    ├─────────────────────────────────────┤
    │       Services (Business Logic)     │  ← idea / like rules, error fallbacks
    ├─────────────────────────────────────┤
    │   Repositories (SQL statements)     │  ← insert / select / delete
    ├─────────────────────────────────────┤
    │  Models & Schemas (Data)            │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← pooled async connections
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
