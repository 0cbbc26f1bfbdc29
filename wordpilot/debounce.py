import asyncio
from typing import Any, Awaitable, Callable, Dict, List, Optional, Set, Tuple


class Debouncer:
    """Collapse bursts of calls into one call of ``func``.

    Every :meth:`schedule` cancels the pending timer and re-arms it with the
    latest arguments. When a timer survives ``wait`` seconds, ``func`` runs
    once with those arguments and every future handed out since the previous
    run resolves with its result (or its exception). A run that has already
    started is never cancelled.
    """

    def __init__(self, func: Callable[..., Awaitable[Any]], wait: float):
        self._func = func
        self._wait = wait
        self._handle: Optional[asyncio.TimerHandle] = None
        self._waiters: List[asyncio.Future] = []
        self._call: Tuple[Tuple[Any, ...], Dict[str, Any]] = ((), {})
        self._running: Set[asyncio.Task] = set()

    @property
    def wait(self) -> float:
        return self._wait

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, *args: Any, **kwargs: Any) -> asyncio.Future:
        loop = asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()

        self._call = (args, kwargs)
        future = loop.create_future()
        self._waiters.append(future)
        self._handle = loop.call_later(self._wait, self._fire)
        return future

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        waiters, self._waiters = self._waiters, []
        for future in waiters:
            future.cancel()

    def _fire(self) -> None:
        self._handle = None
        waiters, self._waiters = self._waiters, []
        args, kwargs = self._call
        task = asyncio.ensure_future(self._run(waiters, args, kwargs))
        self._running.add(task)
        task.add_done_callback(self._running.discard)

    async def _run(self, waiters: List[asyncio.Future], args, kwargs) -> None:
        try:
            result = await self._func(*args, **kwargs)
        except asyncio.CancelledError:
            for future in waiters:
                future.cancel()
            raise
        except Exception as exc:
            for future in waiters:
                if not future.done():
                    future.set_exception(exc)
            return
        for future in waiters:
            if not future.done():
                future.set_result(result)
