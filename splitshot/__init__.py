"""Split-screen wireframe arena shooter and a simple image viewer."""

__version__ = "0.1.0"
__all__ = ["__version__"]