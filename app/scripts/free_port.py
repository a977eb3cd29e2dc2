from __future__ import annotations

import argparse
import logging
import os
import signal
import subprocess

from app.config import settings
from app.core.env import load_env
from app.logging import configure_logging

logger = logging.getLogger(__name__)


def find_listening_pids(port: int) -> list[int]:
    result = subprocess.run(
        ["lsof", "-ti", f":{port}"],
        capture_output=True,
        text=True,
        check=False,
    )
    # lsof exits 1 when nothing matches
    if result.returncode not in (0, 1):
        raise RuntimeError(f"lsof failed: {result.stderr.strip()}")
    return [int(line) for line in result.stdout.split() if line.strip().isdigit()]


def free_port(port: int, kill=os.kill) -> list[int]:
    pids = find_listening_pids(port)
    if not pids:
        print(f"Port {port} is already free")
        return []

    print(f"Found {len(pids)} process(es) using port {port}:")
    killed: list[int] = []
    for pid in pids:
        try:
            kill(pid, signal.SIGKILL)
        except ProcessLookupError:
            logger.warning("Process %s may have already been terminated", pid)
            continue
        print(f"  killed PID {pid}")
        killed.append(pid)
    print(f"Port {port} is now free!")
    return killed


def main() -> None:
    load_env()
    configure_logging()
    parser = argparse.ArgumentParser(description="Kill processes listening on the server port.")
    parser.add_argument("--port", type=int, default=settings.PORT)
    args = parser.parse_args()
    free_port(args.port)


if __name__ == "__main__":
    main()
