"""Model Service: CRUD-plus-pagination API for caller-identified Model records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
