"""Binary trees with parent links: build, measure, traverse and draw them."""

__version__ = "0.1.0"
__all__ = ["__version__"]