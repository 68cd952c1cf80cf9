from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .types import Seconds

ENV_PREFIX = "AIOENDPOINT_"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class ServiceConfig:
    # Log every failed request at DEBUG level. Never changes results.
    debug: bool = False
    # Only used by the default transport.
    timeout: Seconds = 10.0

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, prefix: str = ENV_PREFIX
    ) -> ServiceConfig:
        """
        Read ``<prefix>DEBUG`` and ``<prefix>TIMEOUT``, falling back to the
        defaults for anything unset.
        """
        env = os.environ if environ is None else environ
        debug = env.get(f"{prefix}DEBUG", "").strip().lower() in _TRUTHY
        raw_timeout = env.get(f"{prefix}TIMEOUT")
        if raw_timeout is None or not raw_timeout.strip():
            return cls(debug=debug)
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"{prefix}TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from None
        return cls(debug=debug, timeout=timeout)
