"""Alert-state aggregation for file synchronization clients."""

__version__ = "0.1.0"
