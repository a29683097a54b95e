"""Package metadata and naming constants."""

PACKAGE_NAME = "patterndemo"
__version__ = "1.0.0"  # Version for imports
