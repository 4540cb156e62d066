"""
Per-business read endpoints for the client app.
"""
