"""
goinstant_auth.observability

Logging setup shared by the signer.
"""
