"""Topic-based publish/subscribe broker with video and GPS components and a console front end."""

__version__ = "0.1.0"
__all__ = ["__version__"]