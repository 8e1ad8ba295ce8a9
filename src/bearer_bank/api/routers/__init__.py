"""
bearer_bank.api.routers

HTTP routers: service info, login, and the protected account endpoints.
"""
