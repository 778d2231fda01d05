from __future__ import annotations

import contextlib
import logging
import os
import socket
import threading
import time
from dataclasses import dataclass

import uvicorn

from ..config import Settings
from ..sdk.client import FarmTokenClient
from .app import create_app

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FarmTokenServer:
    host: str
    port: int
    url: str

    def client(self) -> FarmTokenClient:
        return FarmTokenClient(self.url.rstrip("/"))


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _normalize_base_url(url: str) -> str:
    url = url.strip()
    if not url:
        return ""
    # Allow passing just host:port.
    if "://" not in url:
        url = "http://" + url
    return url.rstrip("/")


def _is_server_alive(base_url: str, *, timeout_s: float = 0.2) -> bool:
    """Best-effort probe to determine if a farmtoken server is reachable."""

    return FarmTokenClient(base_url).is_alive(timeout_s=timeout_s)


def serve(settings: Settings | None = None) -> None:
    """Run the server in the foreground until interrupted."""

    settings = settings or Settings.from_env()
    app = create_app(settings)
    logger.info("farmtoken listening on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)


def run(
    *,
    host: str = "127.0.0.1",
    port: int = 0,
    settings: Settings | None = None,
    log_level: str = "info",
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
) -> FarmTokenServer | FarmTokenClient:
    """Start farmtoken in a background thread with a single Python call.

    Behavior:
    - If FARMTOKEN_URL is set, we *attach* to that existing server (client mode)
      unless `new_server=True`.
    - Otherwise, if `port != 0` and a server is already reachable at
      http://{host}:{port}, we attach to it unless `new_server=True`.
    - Otherwise we start a new local server and return a `FarmTokenServer`.

    Notes:
    - `port=0` means "pick a free port", so there's nothing to attach to.
    - Each new server owns a fresh in-memory registry.
    """

    env_url = _normalize_base_url(os.getenv("FARMTOKEN_URL", ""))

    # 1) Try attaching to an explicitly provided server.
    if env_url and not new_server:
        if _is_server_alive(env_url, timeout_s=connect_timeout_s):
            return FarmTokenClient(env_url)

    # 2) Try attaching to host/port if they are explicitly chosen.
    if port != 0 and not new_server:
        default_url = _normalize_base_url(f"http://{host}:{port}")
        if _is_server_alive(default_url, timeout_s=connect_timeout_s):
            return FarmTokenClient(default_url)

    # 3) Start a fresh server.
    if port == 0:
        port = _find_free_port(host)

    app = create_app(settings)

    config = uvicorn.Config(app, host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    url = f"http://{host}:{port}/"
    # Wait until the server answers so a subsequent client call doesn't race with startup.
    deadline = time.monotonic() + 5.0
    while time.monotonic() < deadline:
        if server.started and _is_server_alive(url.rstrip("/"), timeout_s=connect_timeout_s):
            break
        time.sleep(0.02)

    return FarmTokenServer(host=host, port=port, url=url)
