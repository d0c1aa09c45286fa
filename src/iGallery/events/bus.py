"""In-process publish/subscribe bus.

Synchronous handlers run inline inside :meth:`EventBus.publish`.  Handlers
subscribed with ``async_=True`` must be coroutine functions; they are scheduled
as tasks on the running event loop so publishing never blocks on them.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import uuid
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Awaitable, Callable, Dict, List, Optional, Set, Type


@dataclass(kw_only=True)
class Event:
    """Base event class for non-domain notifications (errors, UI hints)."""
    timestamp: datetime = field(default_factory=datetime.now)
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass
class Subscription:
    """Handle returned by subscribe(); can be used to unsubscribe."""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    event_type: Type = Event
    handler: Callable = field(default=lambda e: None)
    active: bool = True

    def cancel(self):
        self.active = False


class EventBus:
    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)
        self._sync_handlers: Dict[Type, List[Subscription]] = defaultdict(list)
        self._async_handlers: Dict[Type, List[Subscription]] = defaultdict(list)
        self._pending: Set[asyncio.Task] = set()

    def subscribe(self, event_type: Type, handler: Callable, async_: bool = False) -> Subscription:
        if async_ and not inspect.iscoroutinefunction(handler):
            raise TypeError(f"async handler for {event_type.__name__} must be a coroutine function")
        sub = Subscription(event_type=event_type, handler=handler)
        if async_:
            self._async_handlers[event_type].append(sub)
        else:
            self._sync_handlers[event_type].append(sub)
        return sub

    def unsubscribe(self, subscription: Subscription):
        subscription.active = False
        for store in (self._sync_handlers, self._async_handlers):
            for subs in store.values():
                try:
                    subs.remove(subscription)
                except ValueError:
                    pass

    def publish(self, event) -> None:
        event_type = type(event)

        sync_subs = list(self._sync_handlers[event_type])
        async_subs = list(self._async_handlers[event_type])

        for sub in sync_subs:
            if not sub.active:
                continue
            try:
                sub.handler(event)
            except Exception as e:
                self._logger.error("Sync handler failed for %s: %s", event_type.__name__, e)

        for sub in async_subs:
            if not sub.active:
                continue
            self._schedule(sub.handler, event)

    async def drain(self) -> None:
        """Wait until every coroutine handler scheduled so far has finished."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def _schedule(self, handler: Callable[..., Awaitable[None]], event) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop (CLI or plain scripts): run the handler to completion.
            asyncio.run(self._safe_async_call(handler, event))
            return
        task = loop.create_task(self._safe_async_call(handler, event))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _safe_async_call(self, handler, event):
        try:
            await handler(event)
        except Exception as e:
            self._logger.error("Async handler failed for %s: %s", type(event).__name__, e)
