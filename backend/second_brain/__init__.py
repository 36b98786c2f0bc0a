"""Second Brain: bookmarks with public share links"""

__version__ = "1.0.0"
