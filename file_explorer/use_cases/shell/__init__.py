"""
Shell use cases: command registry, built-in commands and the command loop.
"""
