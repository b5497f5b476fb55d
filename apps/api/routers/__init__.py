"""API routers."""

from . import members, reservations, themes, times, waitings

__all__ = ["members", "reservations", "themes", "times", "waitings"]
