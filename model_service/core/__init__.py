"""Core Layer: domain types, error taxonomy, auth decision, persistence contract.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO, no FastAPI
"""
