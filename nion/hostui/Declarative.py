from __future__ import annotations

# standard libraries
import dataclasses
import typing

# third party libraries
# None

# local libraries
from nion.hostui import Components
from nion.hostui import Host
from nion.hostui import Properties
from nion.utils import Registry


UIDescription = typing.Mapping[str, typing.Any]
UIDescriptionResult = typing.Dict[str, typing.Any]
UILabel = typing.Union[str, Host.Message]


class DeclarativeUI:
    """Build widget tree descriptions.

    A description is a mapping with a ``type`` (container, button, text or image), the widget properties and an
    optional ordered list of ``children``. Properties left as None are omitted and get their defaults when the tree
    is constructed.
    """

    def __init__(self) -> None:
        pass

    def __create(self, d_type: str, children: typing.Sequence[UIDescription],
                 **kwargs: typing.Any) -> UIDescriptionResult:
        d: UIDescriptionResult = {"type": d_type}
        for k, v in kwargs.items():
            if v is not None:
                d[k] = v
        if len(children) > 0:
            d_children = d.setdefault("children", list())
            for child in children:
                d_children.append(child)
        return d

    def create_container(self, *children: UIDescription, **kwargs: typing.Any) -> UIDescriptionResult:
        """Create a container UI description holding the children, in order."""
        return self.__create("container", children, **kwargs)

    def create_button(self, *children: UIDescription,
                      on_click: typing.Optional[typing.Callable[[typing.Any], None]] = None,
                      **kwargs: typing.Any) -> UIDescriptionResult:
        """Create a button UI description.

        The ``on_click`` callback is invoked with the acting player when the button is released. Children, typically
        a text label, are placed inside the button.
        """
        return self.__create("button", children, on_click=on_click, **kwargs)

    def create_text(self, *, label: UILabel, **kwargs: typing.Any) -> UIDescriptionResult:
        return self.__create("text", (), label=label, **kwargs)

    def create_image(self, *, image_type: typing.Optional[Host.UIImageType] = None,
                     **kwargs: typing.Any) -> UIDescriptionResult:
        return self.__create("image", (), image_type=image_type, **kwargs)


@dataclasses.dataclass
class WidgetTree:
    """The widgets created for a description, mirroring its shape."""
    widget: Host.Widget
    kind: str
    description_name: typing.Optional[str] = None
    children: typing.List[WidgetTree] = dataclasses.field(default_factory=list)

    def find(self, description_name: str) -> typing.Optional[WidgetTree]:
        """Return the first node, depth first, whose description carried the given name."""
        if self.description_name == description_name:
            return self
        for child in self.children:
            found = child.find(description_name)
            if found is not None:
                return found
        return None

    def traverse(self) -> typing.Iterator[WidgetTree]:
        """Iterate the nodes parents first."""
        yield self
        for child in self.children:
            yield from child.traverse()

    @property
    def widgets(self) -> typing.Sequence[Host.Widget]:
        return [tree.widget for tree in self.traverse()]


class HostUIConstructor(typing.Protocol):
    def construct(self, d_type: str, factory: Components.ComponentFactory,
                  d: UIDescription) -> typing.Optional[Host.Widget]:
        ...


def construct_widget(factory: Components.ComponentFactory, d_type: str, d: UIDescription) -> Host.Widget:
    if d_type in Properties.WIDGET_KINDS:
        return factory.create(d_type, d)
    # if the type is not handled here, check with registered constructors.
    constructors = typing.cast(typing.List[HostUIConstructor], Registry.get_components_by_type("host_ui_constructor"))
    for constructor in constructors:
        widget = constructor.construct(d_type, factory, d)
        if widget is not None:
            return widget
    raise ValueError(f"Widget type {d_type} cannot be constructed.")


def construct_tree(factory: Components.ComponentFactory, d: UIDescription,
                   parent: typing.Optional[Host.Widget] = None) -> WidgetTree:
    """Create the widget for the description, then its children in order, depth first.

    Each child is attached to the widget just created for its parent, replacing any ``parent`` in the child's own
    description. The root uses ``parent`` if given, else its own ``parent``, else the host root.
    """
    d_type = d.get("type")
    if not d_type:
        raise ValueError("Widget description has no type.")
    properties = {k: v for k, v in d.items() if k not in ("type", "children")}
    if parent is not None:
        properties["parent"] = parent
    widget = construct_widget(factory, d_type, properties)
    tree = WidgetTree(widget, d_type, d.get("name"))
    for child_d in d.get("children", None) or list():
        tree.children.append(construct_tree(factory, child_d, widget))
    return tree


def construct(factory: Components.ComponentFactory, d: UIDescription,
              parent: typing.Optional[Host.Widget] = None) -> Host.Widget:
    return construct_tree(factory, d, parent).widget
