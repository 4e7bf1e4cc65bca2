"""BaseService — foundation for pdvkit services.

Every service receives the frozen :class:`PdvSettings` at construction
time and reads its limits and allow-lists from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pdvkit.config.settings import PdvSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class ValidationService(BaseService):
            def check(self, kind: str, value: object) -> ServiceResult:
                limit = self._settings.validation.password_min_length
                ...
    """

    def __init__(self, settings: PdvSettings) -> None:
        self._settings = settings
