"""
ibm_key_protect.example

Small FastAPI application that exercises the client against a real instance.

Responsibilities:
- Show how to build a client from settings and share it across requests.
- Expose read-only key and KMIP adapter lookups over HTTP.
"""

# Package marker.
