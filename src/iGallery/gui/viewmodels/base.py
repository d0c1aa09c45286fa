"""BaseViewModel: pure Python, no Qt dependency.

Tracks the two kinds of wiring a view model accumulates over its life:
``EventBus`` subscriptions it made, and the signals it exposes to renderers.
``dispose()`` tears down both, after which late async results must be
ignored by checking :attr:`disposed`.
"""

from __future__ import annotations

from typing import Callable, Type, TypeVar, Union

from iGallery.events.bus import EventBus, Subscription
from iGallery.gui.viewmodels.signal import ObservableProperty, Signal

_Owned = TypeVar("_Owned", Signal, ObservableProperty)


class BaseViewModel:
    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []
        self._owned: list[Union[Signal, ObservableProperty]] = []
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def own(self, observable: _Owned) -> _Owned:
        """Register a signal or property whose listeners are dropped on dispose."""
        self._owned.append(observable)
        return observable

    def subscribe_event(
        self,
        event_bus: EventBus,
        event_type: Type,
        handler: Callable,
        async_: bool = False,
    ) -> Subscription:
        """Subscribe to *event_type* for as long as this view model lives."""
        if self._disposed:
            raise RuntimeError(f"{type(self).__name__} is disposed")
        sub = event_bus.subscribe(event_type, handler, async_=async_)
        self._subscriptions.append(sub)
        return sub

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        for sub in self._subscriptions:
            sub.cancel()
        self._subscriptions.clear()
        for observable in self._owned:
            signal = observable.changed if isinstance(observable, ObservableProperty) else observable
            signal.disconnect_all()
        self._owned.clear()
