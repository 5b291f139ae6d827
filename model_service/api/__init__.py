"""API Layer: FastAPI routes, middleware, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every failure leaves as the error envelope (api/error_handlers.py)
"""
