"""Infrastructure Layer: database access, repository adapter, logging.

Invariants:
    - Infrastructure implements core/ contracts, core/ never imports infrastructure
    - Storage faults surface as RepositoryError
"""
