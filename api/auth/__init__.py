"""
Bearer-token authentication and user accounts.
"""
