import asyncio

from typing import Awaitable, TypeVar

T = TypeVar("T")


class RequestCancelled(Exception):
    pass


# Shared by every fetch made for one receiving institution selection.
class CancelToken:
    def __init__(self) -> None:
        self._cancelled = False
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        self._event.set()

    async def guard(self, awaitable: Awaitable[T]) -> T:
        task = asyncio.ensure_future(awaitable)

        if self._cancelled:
            task.cancel()
            raise RequestCancelled("Request was cancelled.")

        waiter = asyncio.ensure_future(self._event.wait())

        try:
            await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            task.cancel()
            raise
        finally:
            waiter.cancel()

        # A result that lands after the token fired belongs to a superseded selection.
        if self._cancelled:
            if task.done() and not task.cancelled() and task.exception() is not None:
                raise RequestCancelled("Request was cancelled.") from task.exception()

            task.cancel()
            raise RequestCancelled("Request was cancelled.")

        return task.result()
