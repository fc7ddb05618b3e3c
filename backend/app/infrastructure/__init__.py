"""Infrastructure Layer — database sessions, credentials, and cross-cutting concerns.

Invariants:
    - Infrastructure imports only core/errors from the domain (error mapping)
    - All database access wrapped with rollback + error mapping

Design Decisions:
    - One module per external concern (database, security, observability)
"""
