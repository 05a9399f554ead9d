"""
orm_lifecycle.db

Persistence package (SQLAlchemy ORM, synchronous sessions).

Responsibilities:
- Entity descriptors, the persistence provider and the unit-of-work handle.
- Schema bootstrap and thin repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Entities are registered with `PersistenceProvider` explicitly; nothing here
# scans modules for mapped classes.
