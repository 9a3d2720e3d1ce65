"""Logging configuration, correlation IDs and request middleware."""
