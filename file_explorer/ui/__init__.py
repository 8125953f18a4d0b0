"""
Terminal output.
"""
