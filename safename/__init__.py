"""Top-level package for the safename library."""

from .config import NameKind, NamingConfig
from .naming import InvalidInputError, filename, slugify
from .services.namer import NameResult, Namer

__all__ = [
    "InvalidInputError",
    "NameKind",
    "NameResult",
    "Namer",
    "NamingConfig",
    "filename",
    "slugify",
]
