from __future__ import annotations

# standard libraries
import logging
import typing

# third party libraries
# None

# local libraries
from nion.hostui import Components
from nion.hostui import Declarative
from nion.hostui import Dispatch
from nion.hostui import Host
from nion.hostui import Names
from nion.hostui import Properties


class HostUIContext:
    """The state shared by everything that builds widgets on one host.

    Holds the name allocator, the click handler registry, the component factory and the event dispatcher. A program
    normally makes one context per host and wires ``handle_button_event`` into the host's button event callback.
    Contexts share nothing with each other.
    """

    def __init__(self, host: Host.Host, names: typing.Optional[Names.NameAllocator] = None) -> None:
        self.host = host
        self.names = names or Names.NameAllocator()
        self.button_handlers = Dispatch.ButtonHandlers()
        self.factory = Components.ComponentFactory(host, self.names, self.button_handlers)
        self.dispatcher = Dispatch.EventDispatcher(self.button_handlers)

    @property
    def root(self) -> Host.Widget:
        return self.host.get_root_widget()

    @property
    def button_clicked_event(self) -> typing.Any:
        return self.dispatcher.button_clicked_event

    # components

    def container(self, d: Properties.PropertiesDescription) -> Host.Widget:
        return self.factory.create_container(d)

    def button(self, d: Properties.PropertiesDescription) -> Host.Widget:
        return self.factory.create_button(d)

    def text(self, d: Properties.PropertiesDescription) -> Host.Widget:
        return self.factory.create_text(d)

    def image(self, d: Properties.PropertiesDescription) -> Host.Widget:
        return self.factory.create_image(d)

    def parse(self, d: Declarative.UIDescription, parent: typing.Optional[Host.Widget] = None) -> Host.Widget:
        return Declarative.construct(self.factory, d, parent)

    def parse_tree(self, d: Declarative.UIDescription,
                   parent: typing.Optional[Host.Widget] = None) -> Declarative.WidgetTree:
        return Declarative.construct_tree(self.factory, d, parent)

    # events

    def handle_button_event(self, player: typing.Any, widget: Host.Widget, event: Host.UIButtonEvent) -> bool:
        return self.dispatcher.handle_button_event(player, widget, event)

    # widget operations

    def get_name(self, widget: Host.Widget) -> str:
        return self.host.get_widget_name(widget)

    def set_visible(self, widget: Host.Widget, visible: bool) -> None:
        self.host.set_widget_visible(widget, visible)

    def set_depth(self, widget: Host.Widget, depth: Host.UIDepth) -> None:
        self.host.set_widget_depth(widget, depth)

    def delete_widget(self, widget: Host.Widget) -> None:
        """Delete the widget on the host and forget its click handler, if any."""
        self.button_handlers.unregister(widget)
        self.host.delete_widget(widget)

    def delete_tree(self, tree: Declarative.WidgetTree) -> None:
        """Delete every widget in the tree, children before their parents."""
        for child in reversed(tree.children):
            self.delete_tree(child)
        logging.debug("Deleting %s widget %s", tree.kind, tree.widget)
        self.delete_widget(tree.widget)
