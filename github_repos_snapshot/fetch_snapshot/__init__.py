from .fetch_snapshot import fetch_snapshot

__all__ = ["fetch_snapshot"]
