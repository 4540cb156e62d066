"""
Sheet -> table synchronization (`POST /sync`).
"""
