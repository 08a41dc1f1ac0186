"""Force-directed graphs of wiki-linked documents."""

__version__ = "0.1.0"
