"""
orm_lifecycle.api

HTTP surface for the ORM lifecycle example.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: request handling + delegation to services.
