from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Subscriber = Callable[[T], None]


class Observable(Generic[T]):
    """A current value plus subscribers notified on every replacement."""

    def __init__(self, value: T):
        self._value = value
        self._subscribers: list[Subscriber] = []

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Replace the value and notify subscribers in subscription order."""
        self._value = value
        for callback in list(self._subscribers):
            callback(value)

    def subscribe(
        self, callback: Subscriber, emit_current: bool = True
    ) -> Callable[[], None]:
        """Register a subscriber.

        Args:
            callback: Called with each new value
            emit_current: Call it immediately with the current value

        Returns:
            Function removing the subscription
        """
        self._subscribers.append(callback)
        if emit_current:
            callback(self._value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def __repr__(self) -> str:
        return f"Observable({self._value!r})"
