"""file_explorer package: interactive shell for browsing a local filesystem.

Submodules are imported directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
