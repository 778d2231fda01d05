from __future__ import annotations

from .app import create_app
from .server import FarmTokenServer, run, serve

__all__ = ["create_app", "FarmTokenServer", "run", "serve"]
