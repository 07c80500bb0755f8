"""
Unique widget names.

The host looks widgets up by name, so every widget created through this layer gets a name that is unique for the
lifetime of the allocator. The counter alone guarantees uniqueness; the timestamp and the hint are only there to make
names readable in diagnostics.
"""

from __future__ import annotations

# standard libraries
import time
import typing

# third party libraries
# None

# local libraries
# None


def _monotonic_milliseconds() -> int:
    return int(time.monotonic() * 1000)


class NameAllocator:

    def __init__(self, prefix: str = "__ui_widget_", clock: typing.Optional[typing.Callable[[], int]] = None) -> None:
        self.prefix = prefix
        self.__clock = clock or _monotonic_milliseconds
        self.__counter = 0
        self.__issued_names: typing.List[str] = list()

    @property
    def counter(self) -> int:
        return self.__counter

    @property
    def issued_names(self) -> typing.Sequence[str]:
        return list(self.__issued_names)

    def allocate(self, hint: typing.Optional[str] = None) -> str:
        self.__counter += 1
        name = self.prefix + str(self.__counter) + "_" + str(self.__clock())
        if hint:
            name += "_" + hint
        self.__issued_names.append(name)
        return name

    def reset(self) -> None:
        self.__counter = 0
        self.__issued_names = list()
