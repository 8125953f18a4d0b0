"""
Ports (abstract interfaces) used by the use cases.
"""
