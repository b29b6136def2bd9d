"""
Domain layer package.

Contains the severity model, report value objects, and port
interfaces. No framework imports, no IO, no side effects.
"""
