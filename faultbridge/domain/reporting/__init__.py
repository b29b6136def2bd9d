"""
Reporting bounded context: domain layer.

- Severity codes and their human-readable labels
- Transient report values handed to renderers and loggers
- Ports for the logger, renderer, runtime state and driver
"""
