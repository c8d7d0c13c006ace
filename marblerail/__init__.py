"""Board layout, countdown, marble turns, intersections and saved data for a marble-routing puzzle."""

__version__ = "0.1.0"
__all__ = ["countdown", "intersections", "layout", "save", "turning"]