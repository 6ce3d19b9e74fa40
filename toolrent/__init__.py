"""toolrent - command line client for the tool-rental tracking service."""

__version__ = "1.0.0"

try:
    from toolrent.config import config
    __all__ = ["config", "__version__"]
except ImportError:
    # Config might not be available during installation
    __all__ = ["__version__"]
