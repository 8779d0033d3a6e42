"""Central version declaration for fuzzio.

Update this file when cutting a new release tag. Keep semantic versioning.
"""

__version__ = "0.2.0"

__all__ = ["__version__"]
