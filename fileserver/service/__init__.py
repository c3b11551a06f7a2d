from .resolver import FileResolver

__all__ = ["FileResolver"]
