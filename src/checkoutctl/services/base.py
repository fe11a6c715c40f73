"""BaseService — shared foundation for checkoutctl services.

Every service receives a :class:`Store` at construction time and turns
domain failures into failed :class:`ServiceResult` objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from checkoutctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from checkoutctl.domain.errors import CheckoutError
    from checkoutctl.infrastructure.store import Store

logger = structlog.get_logger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class CheckoutService(BaseService):
            def checkout(self, cart: Cart) -> ServiceResult:
                try:
                    ...
                except CheckoutError as exc:
                    return self._failure("checkout", exc)
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    def _failure(self, op: str, exc: CheckoutError) -> ServiceResult:
        """Log *exc* and wrap it in a failed result."""
        logger.warning("operation_failed", op=op, kind=str(exc.kind), **exc.detail)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=str(exc.kind), message=exc.message, detail=exc.detail),
        )
