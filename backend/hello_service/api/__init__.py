"""API Layer — FastAPI routes, CORS and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON
"""
