"""
Application layer for the reporting bounded context.

The driver filters, classifies and delegates. The service owns the
collaborators and installs the driver on the runtime hooks.
"""
