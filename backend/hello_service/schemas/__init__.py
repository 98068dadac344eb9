"""Pydantic Schemas — response contracts for the HTTP endpoints."""
