"""
Shared error handling package.

Routes uncaught request exceptions through the error handler driver
so that HTTP failures are logged and rendered like process failures.
"""
