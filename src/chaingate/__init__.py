"""Read-only gateway in front of the SoChain block explorer API."""

__version__ = "0.1.0"
