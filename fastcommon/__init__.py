"""General-purpose data structures, a base64 codec and memory pools."""

__version__ = "1.0.0"

__all__ = [
    "avl_tree",
    "base64codec",
    "chain",
    "fast_mblock",
    "fast_mpool",
    "fast_timer",
]