"""Classic data structures: queue, sorted array, red-black tree, hash set and singly-linked list."""

__version__ = "1.2.0"
__all__ = ["queue", "sortedarray", "rb_tree", "hashset", "slist"]