"""
orm_lifecycle.services

Service-layer package.

Responsibilities:
- Own transaction boundaries and persistence decisions.
- Drive the unit-of-work lookup demo and the people listing.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable against a throwaway SQLite file.
