"""
MangoNote Backend - Application Package
=========================================

Layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  <- HTTP concerns, envelopes
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  <- lookups, updates
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  <- SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  <- Async SQLAlchemy sessions
    └─────────────────────────────────────┘

Routes handle HTTP details but delegate lookups to services; services can be
tested without HTTP; the error handler is shared by every route.
"""

__version__ = "1.0.0"
