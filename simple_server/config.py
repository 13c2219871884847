from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


def parse_port(raw: Optional[str]) -> int:
    """Return the TCP port named by ``raw`` or ``DEFAULT_PORT``.

    Missing, blank, non-numeric and out of range values all fall back to the
    default instead of raising. ``0`` is kept and lets the OS pick a port.
    """
    value = (raw or "").strip()
    if not value:
        return DEFAULT_PORT
    # Plain ASCII digits only: int() would also take "+80", "8_080" and
    # non-ASCII digits.
    if not (value.isascii() and value.isdigit()):
        logger.warning("Ignoring non-numeric PORT %r, using %d", raw, DEFAULT_PORT)
        return DEFAULT_PORT
    port = int(value)
    if not 0 <= port <= 65535:
        logger.warning("Ignoring out of range PORT %d, using %d", port, DEFAULT_PORT)
        return DEFAULT_PORT
    return port


def load_settings(
    env: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[Path] = None,
) -> Settings:
    """Read settings from the environment after seeding it from ``.env``.

    Values already present in the process environment win over the file. A
    missing file is ignored.
    """
    if env is None:
        load_dotenv(dotenv_path or Path.cwd() / ".env", override=False)
        env = os.environ
    return Settings(port=parse_port(env.get("PORT")))
