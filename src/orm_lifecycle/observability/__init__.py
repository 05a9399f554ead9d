"""
orm_lifecycle.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation for the HTTP surface.
"""

# Package marker.
