"""
Base View Service

Shared lifecycle for every analytical view:

1. Validate parameters (no data access on failure)
2. Read an immutable dataset snapshot off the event loop
3. Run the pure in-memory computation
4. Wrap the rows in the response envelope

A view either returns its full row set or fails; partial rows are never sent.
"""

import asyncio
from typing import Callable, Iterable, Optional, Type, TypeVar

from core.exceptions import DataAccessError, InvalidParameterError
from core.logging import get_logger
from schemas.common import ApiStatus, BaseResponse
from services.dataset import DatasetAccessor, DatasetSnapshot, Table

RespT = TypeVar("RespT", bound=BaseResponse)


class BaseViewService:
    """Base class for services that compute views over the NFL dataset."""

    name = "view"

    def __init__(self, accessor: DatasetAccessor):
        self.accessor = accessor
        self.log = get_logger(self.name)

    async def run_view(
        self,
        view: str,
        resp_cls: Type[RespT],
        tables: Iterable[Table],
        compute: Callable[[DatasetSnapshot], list],
        validate: Optional[Callable[[], None]] = None,
        season: Optional[int] = None,
        position: Optional[str] = None,
        **params,
    ) -> RespT:
        """
        Run one analytical view end to end.

        Args:
            view: View name used in log events
            resp_cls: Response envelope class
            tables: Tables the view reads
            compute: Pure function from snapshot to result rows
            validate: Parameter checks; raises InvalidParameterError
            season: Optional season filter pushed down to the read
            position: Optional roster position filter pushed down to the read
            **params: Extra context for log events
        """
        log = self.log.bind(view=view, **params)

        try:
            if validate is not None:
                validate()
        except InvalidParameterError as e:
            log.warning("view_invalid_parameter", parameter=e.parameter, reason=e.reason)
            return resp_cls(
                status=ApiStatus.VALIDATION_ERROR,
                message=str(e),
                error_code="INVALID_PARAMETER",
                data=[],
            )

        try:
            snapshot = await asyncio.to_thread(
                self.accessor.snapshot, tables, season, position
            )
            rows = compute(snapshot)
        except InvalidParameterError as e:
            log.warning("view_invalid_parameter", parameter=e.parameter, reason=e.reason)
            return resp_cls(
                status=ApiStatus.VALIDATION_ERROR,
                message=str(e),
                error_code="INVALID_PARAMETER",
                data=[],
            )
        except DataAccessError as e:
            log.error("view_data_access_failed", table=e.table, error=str(e.cause))
            return resp_cls(
                status=ApiStatus.ERROR,
                message="Query failure",
                error_code="DATA_ACCESS_FAILURE",
                data=[],
            )
        except Exception as e:
            log.error("view_failed", error=str(e))
            return resp_cls(
                status=ApiStatus.ERROR,
                message="Internal server error",
                error_code="INTERNAL_ERROR",
                data=[],
            )

        log.info("view_computed", rows=len(rows))
        return resp_cls(
            status=ApiStatus.SUCCESS,
            message=f"{view} computed successfully" if rows else f"No rows for {view}",
            data=rows,
        )
