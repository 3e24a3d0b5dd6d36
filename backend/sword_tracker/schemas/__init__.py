"""Pydantic request/response schemas: the API contract, separate from the ORM models."""
