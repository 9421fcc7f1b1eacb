"""Routing settings -- read from the environment.

Only the connector credentials and the outbound send timeout are
configurable; everything else in the package is stateless.
"""

from __future__ import annotations

import logging
import os
from typing import ClassVar

logger = logging.getLogger(__name__)


class Settings:
    """Runtime configuration sourced from environment variables."""

    # 0 disables the send timeout.
    DEFAULT_SEND_TIMEOUT: ClassVar[float] = 0.0

    def __init__(self) -> None:
        self.reload()

    def reload(self) -> None:
        """Re-read environment variables."""
        e = self._read

        self.app_id: str = e("BOT_APP_ID")
        self.app_password: str = e("BOT_APP_PASSWORD")
        self.app_tenant_id: str = e("BOT_APP_TENANT_ID")
        self.send_timeout: float = self._parse_timeout(e("BOTROUTING_SEND_TIMEOUT"))

    @property
    def has_credentials(self) -> bool:
        return bool(self.app_id and self.app_password)

    @staticmethod
    def _read(key: str) -> str:
        return os.getenv(key, "").strip()

    def _parse_timeout(self, raw: str) -> float:
        if not raw:
            return self.DEFAULT_SEND_TIMEOUT
        try:
            return float(raw)
        except ValueError:
            logger.warning(
                "Invalid BOTROUTING_SEND_TIMEOUT %r; using %.1fs",
                raw, self.DEFAULT_SEND_TIMEOUT,
            )
            return self.DEFAULT_SEND_TIMEOUT


# Module-level singleton
cfg = Settings()


def reset_cfg() -> None:
    cfg.reload()
