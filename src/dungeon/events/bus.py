from typing import Callable, Dict

from blinker import Signal


class EventBus:
    """Named blinker signals shared by the level systems.

    Handlers are called as ``fn(bus, **payload)``.
    """

    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn: Callable) -> None:
        signal = self._signals.setdefault(name, Signal(name))
        # Held strongly: handlers are often lambdas or bound methods of unreferenced systems.
        signal.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn: Callable) -> None:
        signal = self._signals.get(name)
        if signal is not None:
            signal.disconnect(fn)

    def emit(self, name: str, **payload) -> None:
        signal = self._signals.get(name)
        if signal is None:
            return
        signal.send(self, **payload)


# Level lifecycle. Payload keys are listed beside each name.
EVENT_LEVEL_REQUEST = "level_request"        # payload: seed=int|None, algorithm=str|None, difficulty=int|None
EVENT_LEVEL_GENERATED = "level_generated"    # payload: level_entity=int, seed=int, algorithm=str, player=(r,c), stairs=(r,c), path_length=int
EVENT_LEVEL_DISCARDED = "level_discarded"    # payload: level_entity=int
