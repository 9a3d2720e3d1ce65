"""Boundary adapters for the object store (S3) and the document store (SQL)."""
