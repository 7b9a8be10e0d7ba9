"""A* path finding on JSON tile maps, with coordinate listings and ASCII drawings."""

__version__ = "0.1.0"
__all__ = ["astar", "cli", "point"]