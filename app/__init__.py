"""
CleanArchitecture users API.

Application package root. A small service laid out with
hexagonal architecture (ports & adapters).

Bounded contexts:
    - users: User creation behind a single validation rule.

Layers:
    - domain: Entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, dependency providers.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
