"""Service layer modules (file I/O and third-party adapters).

Subtitle loading and per-episode orchestration live here so the core stays
pure and testable with in-memory values.
"""

__all__ = [
    "episodes",
    "errors",
    "subtitles",
]
