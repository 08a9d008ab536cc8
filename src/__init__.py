"""tagcache: tag-indexed result cache with bulk invalidation."""

__version__ = "0.1.0"
