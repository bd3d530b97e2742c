"""Schedule production processes from a stock of resources towards a goal, and check traces."""

__version__ = "0.1.0"
__all__ = ["__version__"]