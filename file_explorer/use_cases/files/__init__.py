"""
File use cases: one class per shell command that touches the file system.
"""
