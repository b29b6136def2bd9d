"""
faultbridge: process-level error reporting for FastAPI services.

Application package root. Hexagonal layout (ports & adapters):
the error handler driver only talks to ports, adapters live in
infrastructure, and the host runtime hooks are wired by a service.

Layers:
    - domain: Severity model, report value objects, ports (ABCs), errors.
    - application: The error handler driver and the hook-wiring service.
    - infrastructure: Logger, renderer, and runtime state adapters.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (error handlers, logging).
"""
