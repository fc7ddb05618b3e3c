"""Services Layer — inventory, item, admin, user and site-content operations.

Invariants:
    - Every mutating operation receives the acting user as an explicit Actor
    - Services raise InventoryError subclasses; routes never build error bodies

Design Decisions:
    - One service class per component, constructed per request with its AsyncSession
"""
