"""
bearer_bank.api

API package for the bearer_bank service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring, response models and error rendering.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request parsing + auth + delegation to the
# issuer/ledger, then status mapping and JSON shaping.
