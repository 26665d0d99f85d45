"""Controller contract: wires view events to model mutations and pushes renders.

A controller owns one render channel. Hosts register a sink with ``on_update``
and receive every UI node the controller produces from then on.

The usual subscription pattern is available through ``delegate``: a view event
runs ``model.handle`` synchronously, then a refresh task awaits
``model.fetch_data()``, renders the view and pushes the node. Refreshes are
numbered; with ``drop_stale_renders`` a refresh whose fetch resolves after a
newer one has already been pushed is discarded.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Coroutine, Generic, Protocol, TypeVar, runtime_checkable

from mvc.model import Model
from mvc.view import View

log = logging.getLogger(__name__)

DataT = TypeVar("DataT")
NodeT = TypeVar("NodeT")
NodeT_co = TypeVar("NodeT_co", covariant=True)

ErrorSink = Callable[[BaseException], None]


class ControllerState(Enum):
    """Lifecycle of a controller. There is no stopped state; hosts discard controllers."""

    UNSTARTED = "unstarted"
    RUNNING = "running"


@runtime_checkable
class Controller(Protocol[NodeT_co]):
    """Anything a host can start and receive UI nodes from."""

    def on_update(self, sink: Callable[[NodeT_co], None]) -> None:
        """Install the sink that receives every subsequently rendered node."""
        ...

    def run(self) -> None:
        """Perform the startup sequence."""
        ...


def _discard(node: Any) -> None:
    return None


class RenderChannel(Generic[NodeT]):
    """Single-sink channel for rendered nodes. Last connected sink wins, no replay."""

    def __init__(self) -> None:
        self._sink: Callable[[NodeT], None] = _discard
        self.pushed = 0

    @property
    def connected(self) -> bool:
        return self._sink is not _discard

    def connect(self, sink: Callable[[NodeT], None]) -> None:
        self._sink = sink

    def push(self, node: NodeT) -> None:
        self.pushed += 1
        self._sink(node)


class BaseController(ABC, Generic[DataT, NodeT]):
    """Controller base class composing a model, a view and a render channel.

    Model and view are referenced only through their protocols. Subclasses
    implement ``start`` (called by ``run``) and usually call ``delegate`` in
    ``__init__`` for each view event they care about.
    """

    def __init__(
        self,
        model: Model[DataT],
        view: View[DataT, NodeT],
        *,
        drop_stale_renders: bool = True,
    ) -> None:
        self.model = model
        self.view = view
        self.drop_stale_renders = drop_stale_renders
        self._channel: RenderChannel[NodeT] = RenderChannel()
        self._error_sink: ErrorSink | None = None
        self._state = ControllerState.UNSTARTED
        self._pending: set[asyncio.Task[Any]] = set()
        self._failures: list[BaseException] = []
        self._refresh_seq = 0
        self._shown_seq = 0

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def pending(self) -> int:
        """Number of scheduled tasks that have not finished yet."""
        return len(self._pending)

    @property
    def pushed(self) -> int:
        """Number of nodes pushed through the render channel so far."""
        return self._channel.pushed

    # =========================================================================
    # Host-facing API
    # =========================================================================

    def on_update(self, sink: Callable[[NodeT], None]) -> None:
        self._channel.connect(sink)

    def on_error(self, sink: ErrorSink) -> None:
        """Install the sink that receives failures from scheduled refreshes."""
        self._error_sink = sink

    def run(self) -> None:
        """Perform the startup sequence and mark the controller running.

        Startup sequences that schedule a refresh need a running event loop;
        without one ``run`` raises RuntimeError and the state is unchanged.
        """
        if self._state is ControllerState.UNSTARTED:
            log.info("%s starting", type(self).__name__)
        else:
            log.debug("%s running startup sequence again", type(self).__name__)
        self.start()
        self._state = ControllerState.RUNNING

    @abstractmethod
    def start(self) -> None:
        """Startup sequence, e.g. render an initial data set and push it."""
        ...

    # =========================================================================
    # Wiring and refresh
    # =========================================================================

    def push(self, node: NodeT) -> None:
        self._channel.push(node)

    def delegate(self, view_event: str, model_event: str | None = None) -> None:
        """Forward ``view_event`` to ``model_event`` (same name by default)."""
        target = model_event or view_event

        def forward(*params: Any) -> Any:
            return self.dispatch(target, *params)

        forward.__name__ = f"dispatch_{target}"
        self.view.on_event(view_event, forward)

    def dispatch(self, event: str, *params: Any) -> Any:
        """Apply a mutation to the model, then schedule a refresh.

        The mutation runs synchronously; if it raises, nothing is scheduled and
        the exception propagates to the caller. Without a running event loop
        RuntimeError is raised before the model is touched.
        """
        asyncio.get_running_loop()
        result = self.model.handle(event, *params)
        self.schedule(self.refresh())
        return result

    async def refresh(self) -> None:
        """Fetch, render and push. Fetch and render faults propagate."""
        self._refresh_seq += 1
        seq = self._refresh_seq
        data = await self.model.fetch_data()
        if self.drop_stale_renders and seq < self._shown_seq:
            log.debug("Dropping stale render #%d (already showing #%d)", seq, self._shown_seq)
            return
        self._shown_seq = seq
        self.push(self.view.render(data))

    def schedule(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        """Run ``coro`` as a task on the running loop and track it until done."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise
        task = loop.create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._task_done)
        return task

    def _task_done(self, task: asyncio.Task[Any]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is None:
            return
        log.error("%s task failed: %r", type(self).__name__, exc)
        if self._error_sink is not None:
            self._error_sink(exc)
            return
        self._failures.append(exc)
        task.get_loop().call_exception_handler({
            "message": f"{type(self).__name__} task failed",
            "exception": exc,
            "task": task,
        })

    async def settle(self) -> None:
        """Wait for every scheduled task, then raise unreported failures.

        A single failure is raised as is; several are raised together as an
        ExceptionGroup. Failures already delivered to an error sink are not
        raised again.
        """
        while self._pending:
            await asyncio.wait(set(self._pending))
        failures, self._failures = self._failures, []
        if len(failures) == 1:
            raise failures[0]
        if failures:
            raise BaseExceptionGroup(f"{type(self).__name__}: {len(failures)} tasks failed", failures)
