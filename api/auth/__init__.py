"""
Shared-secret check for the sheet sync endpoint.
"""
