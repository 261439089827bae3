"""Service layer for safename."""

from .namer import NameResult, Namer

__all__ = ["NameResult", "Namer"]
