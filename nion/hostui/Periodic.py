"""
Periodic tasks driven by the caller's tick.

Instead of an endless loop that sleeps between checks, a task is registered with a scheduler and checked each time
the owner calls ``periodic``. Tasks are started and stopped explicitly.
"""

from __future__ import annotations

# standard libraries
import functools
import logging
import time
import typing

# third party libraries
# None

# local libraries
from nion.hostui import Host
from nion.utils import Process

if typing.TYPE_CHECKING:
    from nion.hostui import Context


class PeriodicTask:
    """Call a function at most once per interval while started."""

    def __init__(self, fn: typing.Callable[[], None], interval: float,
                 clock: typing.Optional[typing.Callable[[], float]] = None) -> None:
        assert interval >= 0
        self.__fn = fn
        self.interval = interval
        self.__clock = clock or time.monotonic
        self.__running = False
        self.__next_time: typing.Optional[float] = None

    @property
    def is_running(self) -> bool:
        return self.__running

    def start(self) -> None:
        self.__running = True
        self.__next_time = None

    def stop(self) -> None:
        self.__running = False

    def tick(self, now: typing.Optional[float] = None) -> bool:
        """Run the function if the task is running and due. Return whether it ran."""
        if not self.__running:
            return False
        now = now if now is not None else self.__clock()
        if self.__next_time is not None and now < self.__next_time:
            return False
        self.__next_time = now + self.interval
        self.__fn()
        return True


class Scheduler:
    """Keeps periodic tasks by key; replacing a key replaces its task.

    Each registered task is a one-shot entry in a task set. Performing it ticks the task and puts it back for the next
    ``periodic`` call for as long as it stays registered under its key.
    """

    def __init__(self, clock: typing.Optional[typing.Callable[[], float]] = None) -> None:
        self.__clock = clock or time.monotonic
        self.__tasks: typing.Dict[str, PeriodicTask] = dict()
        self.__task_set = Process.TaskSet()
        self.__now = 0.0

    def __len__(self) -> int:
        return len(self.__tasks)

    def add_task(self, key: str, task: PeriodicTask) -> None:
        old_task = self.__tasks.get(key)
        if old_task is not None and old_task is not task:
            old_task.stop()
        self.__tasks[key] = task
        self.__task_set.add_task(key, functools.partial(self.__perform_task, key, task))

    def clear_task(self, key: str) -> None:
        self.__task_set.clear_task(key)
        task = self.__tasks.pop(key, None)
        if task is not None:
            task.stop()

    def get_task(self, key: str) -> typing.Optional[PeriodicTask]:
        return self.__tasks.get(key)

    def periodic(self, now: typing.Optional[float] = None) -> None:
        self.__now = now if now is not None else self.__clock()
        self.__task_set.perform_tasks()

    def __perform_task(self, key: str, task: PeriodicTask) -> None:
        if self.__tasks.get(key) is not task:
            return
        task.tick(self.__now)
        # the task may have cleared or replaced itself while running.
        if self.__tasks.get(key) is task:
            self.__task_set.add_task(key, functools.partial(self.__perform_task, key, task))


class VisibilityWatcher(PeriodicTask):
    """Reveal hidden widgets whenever a condition holds.

    With ``once`` the watcher stops itself after the first reveal; otherwise it keeps checking until stopped, which
    is the usual arrangement for a menu that a player can close and reopen.
    """

    def __init__(self, context: Context.HostUIContext, widgets: typing.Sequence[Host.Widget],
                 predicate: typing.Callable[[], bool], *, interval: float = 0.1, once: bool = False,
                 on_revealed: typing.Optional[typing.Callable[[], None]] = None,
                 clock: typing.Optional[typing.Callable[[], float]] = None) -> None:
        super().__init__(self.__check, interval, clock)
        self.context = context
        self.widgets = list(widgets)
        self.predicate = predicate
        self.once = once
        self.on_revealed = on_revealed

    def __check(self) -> None:
        if self.predicate():
            self.reveal()
            if self.once:
                self.stop()

    def reveal(self) -> None:
        logging.debug("Revealing %d widgets", len(self.widgets))
        for widget in self.widgets:
            self.context.set_visible(widget, True)
        if callable(self.on_revealed):
            self.on_revealed()

    def hide(self) -> None:
        for widget in self.widgets:
            self.context.set_visible(widget, False)
