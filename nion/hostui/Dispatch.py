"""
Routing of host button events to click handlers.

The host delivers every button interaction through one callback, whichever part of the program created the widget.
Click handlers are registered per widget when buttons are created and looked up here when events arrive.
"""

from __future__ import annotations

# standard libraries
import logging
import typing

# third party libraries
# None

# local libraries
from nion.hostui import Host
from nion.utils import Event


ClickHandler = typing.Callable[[typing.Any], None]


class ButtonHandlers:
    """Click handlers keyed by widget handle.

    Entries stay until unregistered; deleting a widget through the host does not remove its handler.
    """

    def __init__(self) -> None:
        self.__handlers: typing.Dict[Host.Widget, ClickHandler] = dict()

    def __contains__(self, widget: Host.Widget) -> bool:
        return widget in self.__handlers

    def __len__(self) -> int:
        return len(self.__handlers)

    def register(self, widget: Host.Widget, handler: ClickHandler) -> None:
        self.__handlers[widget] = handler

    def unregister(self, widget: Host.Widget) -> typing.Optional[ClickHandler]:
        return self.__handlers.pop(widget, None)

    def get(self, widget: Host.Widget) -> typing.Optional[ClickHandler]:
        return self.__handlers.get(widget)

    def clear(self) -> None:
        self.__handlers.clear()


class EventDispatcher:

    def __init__(self, button_handlers: ButtonHandlers) -> None:
        self.button_handlers = button_handlers
        self.button_clicked_event = Event.Event()

    def handle_button_event(self, player: typing.Any, widget: Host.Widget, event: Host.UIButtonEvent) -> bool:
        """Call the click handler registered for the widget when the button is released.

        Wire this into the host's button event callback. Returns True if a handler was called. Events other than
        ButtonUp and widgets without a handler are ignored and return False.
        """
        if event != Host.UIButtonEvent.ButtonUp:
            return False
        handler = self.button_handlers.get(widget)
        if handler is None:
            logging.debug("No click handler for widget %s", widget)
            return False
        handler(player)
        self.button_clicked_event.fire(player, widget)
        return True
