"""
Unit of Work Pattern - owns the database session and the transaction boundary

Architecture:
- UoW opens one session per `async with` block and closes it on exit
- UoW owns commit; leaving the block without commit rolls back
- Repositories share the UoW session
- Use cases coordinate several repositories through one UoW
"""

from __future__ import annotations

import abc
from contextlib import AsyncExitStack
from typing import TYPE_CHECKING, AsyncContextManager, Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import StorageError


if TYPE_CHECKING:
    from src.service.venue_booking.app.interface.i_booking_command_repo import (
        IBookingCommandRepo,
    )
    from src.service.venue_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
    from src.service.venue_booking.app.interface.i_layout_repo import ILayoutRepo
    from src.service.venue_booking.app.interface.i_show_command_repo import IShowCommandRepo
    from src.service.venue_booking.app.interface.i_show_query_repo import IShowQueryRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the venue booking service

    Usage:
        async with uow:
            booking = await uow.booking_command_repo.create(booking=..., tickets=...)
            await uow.commit()
    """

    layout_repo: ILayoutRepo
    show_command_repo: IShowCommandRepo
    show_query_repo: IShowQueryRepo
    booking_command_repo: IBookingCommandRepo
    booking_query_repo: IBookingQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory
        self.session: AsyncSession | None = None
        self._exit_stack: AsyncExitStack | None = None

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.venue_booking.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.venue_booking.driven_adapter.repo.booking_query_repo_impl import (
            BookingQueryRepoImpl,
        )
        from src.service.venue_booking.driven_adapter.repo.layout_repo_impl import LayoutRepoImpl
        from src.service.venue_booking.driven_adapter.repo.show_command_repo_impl import (
            ShowCommandRepoImpl,
        )
        from src.service.venue_booking.driven_adapter.repo.show_query_repo_impl import (
            ShowQueryRepoImpl,
        )

        self._exit_stack = AsyncExitStack()
        self.session = await self._exit_stack.enter_async_context(self.session_factory())

        # Repositories share the UoW session
        self.layout_repo = LayoutRepoImpl(session=self.session)
        self.show_command_repo = ShowCommandRepoImpl(session=self.session)
        self.show_query_repo = ShowQueryRepoImpl(session=self.session)
        self.booking_command_repo = BookingCommandRepoImpl(session=self.session)
        self.booking_query_repo = BookingQueryRepoImpl(session=self.session)

        return await super().__aenter__()

    async def __aexit__(self, *args) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self._exit_stack is not None:
                await self._exit_stack.aclose()
            self._exit_stack = None
            self.session = None

    async def _commit(self) -> None:
        assert self.session is not None, 'commit() called outside of `async with uow`'
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            raise StorageError(f'Commit failed: {e}') from e

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
