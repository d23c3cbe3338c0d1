from .home import Home

__all__ = [
    "Home",
]
