"""Parse and rebuild absolute-URI HTTP GET requests for forward proxies."""

__version__ = "0.1.0"
__all__ = ["request", "server"]