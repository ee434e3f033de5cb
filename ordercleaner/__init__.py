"""HTTP service and library that clean marketplace order lines."""

__version__ = "1.0.0"
__all__ = ["__version__"]