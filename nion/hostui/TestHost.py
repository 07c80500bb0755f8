"""
An in-memory host for tests.

Widgets are plain objects kept by name. Every call is recorded in ``calls`` so tests can check the order in which
widgets were created and configured.
"""

from __future__ import annotations

# standard libraries
import typing

# third party libraries
# None

# local libraries
from nion.hostui import Host as HostModule


_base_arguments = ("position", "size", "anchor", "parent", "visible", "padding", "bg_color", "bg_alpha", "bg_fill")

_arguments_by_kind: typing.Mapping[str, typing.Tuple[str, ...]] = {
    "container": _base_arguments,
    "button": _base_arguments + ("enabled", "color_base", "alpha_base", "color_disabled", "alpha_disabled",
                                 "color_pressed", "alpha_pressed", "color_hover", "alpha_hover", "color_focused",
                                 "alpha_focused"),
    "text": _base_arguments + ("label", "text_size", "text_color", "text_alpha", "text_anchor"),
    "image": _base_arguments + ("image_type", "image_color", "image_alpha"),
}


class Widget:

    def __init__(self, kind: str, name: str, properties: typing.Optional[typing.Mapping[str, typing.Any]] = None,
                 receivers: typing.Sequence[typing.Any] = ()) -> None:
        self.kind = kind
        self.name = name
        self.properties = dict(properties or dict())
        self.receivers = tuple(receivers)
        self.parent: typing.Optional[Widget] = self.properties.get("parent")
        self.visible = bool(self.properties.get("visible", True))
        self.depth: typing.Optional[HostModule.UIDepth] = None
        self.children: typing.List[Widget] = list()
        self.deleted = False

    def __repr__(self) -> str:
        return f"TestHost.Widget({self.kind}, {self.name})"

    @property
    def receiver(self) -> typing.Any:
        return self.receivers[0] if self.receivers else None


class Host(HostModule.Host):
    """Host keeping widgets in memory.

    With ``fail_creation`` set, creation calls are recorded but produce no widget, as a misbehaving host would.
    """

    def __init__(self, *, fail_creation: bool = False) -> None:
        self.root = Widget("root", "UIRoot")
        self.widgets: typing.Dict[str, Widget] = dict()
        self.calls: typing.List[typing.Tuple[str, typing.Tuple[typing.Any, ...]]] = list()
        self.fail_creation = fail_creation

    def call_names(self) -> typing.List[str]:
        return [call[0] for call in self.calls]

    def __create(self, kind: str, name: str, arguments: typing.Sequence[typing.Any]) -> None:
        self.calls.append(("create_" + kind, (name,) + tuple(arguments)))
        argument_names = _arguments_by_kind[kind]
        if len(arguments) not in (len(argument_names), len(argument_names) + 1):
            raise TypeError(f"create_{kind} takes {len(argument_names) + 1} or {len(argument_names) + 2} arguments")
        if self.fail_creation:
            return
        properties = dict(zip(argument_names, arguments))
        receivers = tuple(arguments[len(argument_names):])
        widget = Widget(kind, name, properties, receivers)
        if widget.parent is not None:
            widget.parent.children.append(widget)
        self.widgets[name] = widget

    def create_container(self, name: str, *arguments: typing.Any) -> None:  # type: ignore[override]
        self.__create("container", name, arguments)

    def create_button(self, name: str, *arguments: typing.Any) -> None:  # type: ignore[override]
        self.__create("button", name, arguments)

    def create_text(self, name: str, *arguments: typing.Any) -> None:  # type: ignore[override]
        self.__create("text", name, arguments)

    def create_image(self, name: str, *arguments: typing.Any) -> None:  # type: ignore[override]
        self.__create("image", name, arguments)

    def find_widget_by_name(self, name: str) -> typing.Optional[Widget]:
        self.calls.append(("find_widget_by_name", (name,)))
        return self.widgets.get(name)

    def get_widget_name(self, widget: Widget) -> str:
        return widget.name

    def set_widget_name(self, widget: Widget, name: str) -> None:
        self.calls.append(("set_widget_name", (widget, name)))
        if self.widgets.get(widget.name) is widget:
            self.widgets.pop(widget.name)
        widget.name = name
        self.widgets[name] = widget

    def set_widget_visible(self, widget: Widget, visible: bool) -> None:
        self.calls.append(("set_widget_visible", (widget, visible)))
        widget.visible = visible

    def set_widget_depth(self, widget: Widget, depth: HostModule.UIDepth) -> None:
        self.calls.append(("set_widget_depth", (widget, depth)))
        widget.depth = depth

    def delete_widget(self, widget: Widget) -> None:
        self.calls.append(("delete_widget", (widget,)))
        self.__delete(widget)

    def __delete(self, widget: Widget) -> None:
        for child in list(widget.children):
            self.__delete(child)
        if widget.parent is not None and widget in widget.parent.children:
            widget.parent.children.remove(widget)
        if self.widgets.get(widget.name) is widget:
            self.widgets.pop(widget.name)
        widget.deleted = True

    def get_root_widget(self) -> Widget:
        return self.root
