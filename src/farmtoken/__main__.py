from __future__ import annotations

import argparse
import logging

from .config import Settings
from .runtime.server import serve


def main() -> None:
    settings = Settings.from_env()

    p = argparse.ArgumentParser(prog="farmtoken", description="farmtoken: farm registry and tokenisation API")
    p.add_argument("--host", default=settings.host)
    p.add_argument("--port", type=int, default=settings.port)
    p.add_argument("--log-level", default=settings.log_level)
    args = p.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    serve(settings.model_copy(update={"host": args.host, "port": args.port, "log_level": args.log_level.lower()}))


if __name__ == "__main__":
    main()
