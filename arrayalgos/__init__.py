"""Array, string and matrix algorithms using sliding windows, prefix sums and two pointers."""

__version__ = "0.1.0"

__all__ = [
    "anagrams",
    "duplicates",
    "extremes",
    "matrix",
    "prefix",
    "sorting",
    "text",
    "windows",
]