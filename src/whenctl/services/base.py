"""BaseService — foundation for whenctl services.

Every service receives the unified :class:`WhenSettings` at construction
time plus an optional clock. The clock is the only place the current date
enters the system; domain functions always take "now" as an argument.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from whenctl.config.settings import WhenSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ResolveService(BaseService):
            def resolve(self, text: str) -> ServiceResult:
                now = self.reference_date()
                ...
    """

    def __init__(
        self,
        settings: WhenSettings,
        *,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._settings = settings
        self._clock = clock

    @property
    def settings(self) -> WhenSettings:
        return self._settings

    def reference_date(self) -> date:
        """Return "now" for this service.

        Priority: ``--today`` flag, ``[resolver] reference_date``, clock.
        """
        if self._settings.today is not None:
            return self._settings.today
        if self._settings.resolver.reference_date is not None:
            return self._settings.resolver.reference_date
        today = self._clock()
        logger.debug("Using clock reference date %s", today.isoformat())
        return today
