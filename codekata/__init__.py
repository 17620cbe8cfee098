"""Classic algorithm and design exercises as a small Python library."""

__version__ = "0.1.0"

__all__ = [
    "builder",
    "compression",
    "digits",
    "heap",
    "linkedlist",
    "lru",
    "parking",
    "pipeline",
    "pubsub",
    "regex",
    "scoring",
    "trie",
]