"""hello-service — static JSON endpoints served by FastAPI.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
