"""
Domain entities for the file explorer.
"""
