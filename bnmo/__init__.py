"""Word-reading machines and bounded collection types for building a console game hub."""

__version__ = "0.1.0"

__all__ = [
    "words",
    "wordarray",
    "scoremap",
    "linkedlist",
    "stacks",
    "matrix",
    "tree",
    "wordqueue",
    "foodqueue",
    "wordset",
]