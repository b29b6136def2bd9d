"""
Application layer package.

Contains the error handler driver and the service that wires it
to the host runtime. Depends on domain ports, never on infrastructure.
"""
