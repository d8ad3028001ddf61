"""
ibm_key_protect.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation for the example app.
"""

# Package marker.
