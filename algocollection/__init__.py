"""Classic algorithms and data structures: text, integers, sorting, puzzles, linked lists and binary trees."""

__version__ = "0.1.0"
__all__ = ["text", "integers", "sorting", "puzzles", "linked_list", "tree"]