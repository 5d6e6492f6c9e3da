"""vispeak: Vietnamese text normalization and chunking for speech synthesis."""

__all__ = ["__version__"]

__version__ = "0.1.0"
