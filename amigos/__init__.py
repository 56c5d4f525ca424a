"""
Amigos: off-chain history service for the Amigos decentralized chat.

Application package root. A modular monolith using hexagonal
architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - chat: Users, groups, group memberships and message history.

Layers:
    - domain: Entities, ports (ABCs), errors. No framework imports.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: SQLAlchemy adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
