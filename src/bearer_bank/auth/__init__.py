"""
bearer_bank.auth

Authentication package.

Responsibilities:
- JWT signing and verification helpers.
- Credential issuer (login) and token gate (bearer header verification).
- FastAPI auth dependencies.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Issuer and gate share only the signing config; either could live in a
# separate service.
