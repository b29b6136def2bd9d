"""Adapters for the reporting ports."""
