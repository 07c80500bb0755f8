"""
Component factories for the four host widget kinds.

Each factory call resolves the properties, makes exactly one host creation call, finds the new widget by the name it
was given and returns its handle. Buttons also register their click handler.
"""

from __future__ import annotations

# standard libraries
import logging
import typing

# third party libraries
# None

# local libraries
from nion.hostui import Dispatch
from nion.hostui import Host
from nion.hostui import Names
from nion.hostui import Properties


class WidgetCreationError(RuntimeError):
    """The host creation call did not produce a widget that can be found by its name."""

    def __init__(self, name: str, issued_names: typing.Sequence[str]) -> None:
        super().__init__(f"Failed to find UI widget with unique name: {name}. Widget creation may have failed. "
                         f"Issued names: {', '.join(issued_names)}")
        self.name = name
        self.issued_names = list(issued_names)


class ComponentFactory:

    def __init__(self, host: Host.Host, names: Names.NameAllocator, button_handlers: Dispatch.ButtonHandlers) -> None:
        self.host = host
        self.names = names
        self.button_handlers = button_handlers
        self.__creators: typing.Dict[str, typing.Callable[[Properties.PropertiesDescription], Host.Widget]] = {
            kind: getattr(self, "create_" + kind) for kind in Properties.WIDGET_KINDS}

    def create(self, kind: str, d: Properties.PropertiesDescription) -> Host.Widget:
        creator = self.__creators.get(kind)
        if creator is None:
            raise ValueError(f"Widget type {kind} cannot be constructed.")
        return creator(d)

    def create_container(self, d: Properties.PropertiesDescription) -> Host.Widget:
        properties = Properties.resolve_container_properties(d, self.host.get_root_widget())
        return self.__create("container", self.host.create_container, properties)

    def create_button(self, d: Properties.PropertiesDescription) -> Host.Widget:
        properties = Properties.resolve_button_properties(d, self.host.get_root_widget())
        widget = self.__create("button", self.host.create_button, properties)
        if properties.on_click is not None:
            self.button_handlers.register(widget, properties.on_click)
        return widget

    def create_text(self, d: Properties.PropertiesDescription) -> Host.Widget:
        properties = Properties.resolve_text_properties(d, self.host.get_root_widget())
        return self.__create("text", self.host.create_text, properties)

    def create_image(self, d: Properties.PropertiesDescription) -> Host.Widget:
        properties = Properties.resolve_image_properties(d, self.host.get_root_widget())
        return self.__create("image", self.host.create_image, properties)

    def __create(self, kind: str, create_fn: typing.Callable[..., None],
                 properties: Properties.ContainerProperties) -> Host.Widget:
        name = self.names.allocate(properties.name)
        arguments = properties.host_arguments()
        # a missing receiver means everyone; it is left off rather than passed as None.
        if properties.receiver is not None:
            create_fn(name, *arguments, properties.receiver)
        else:
            create_fn(name, *arguments)
        widget = self.host.find_widget_by_name(name)
        if widget is None:
            issued_names = self.names.issued_names
            logging.error("Issued widget names: %s", ", ".join(issued_names))
            raise WidgetCreationError(name, issued_names)
        self.host.set_widget_name(widget, name)
        logging.debug("Created %s widget %s", kind, name)
        return widget
