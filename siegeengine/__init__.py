"""Scene toolkit, resource cache and board rules for a siege-style tower defense game."""

__version__ = "0.1.0"

__all__ = ["log", "mechanics", "objects", "playmap", "point", "resources"]