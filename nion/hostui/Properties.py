"""
Property resolution for host widgets.

Callers describe a widget with a partial mapping of properties. The host has no defaults of its own, so every
property is resolved to a concrete value here, before any host call is made.
"""

from __future__ import annotations

# standard libraries
import collections.abc
import dataclasses
import logging
import numbers
import typing

# third party libraries
import numpy

# local libraries
from nion.hostui import Host


PropertiesDescription = typing.Mapping[str, typing.Any]
VectorLike = typing.Union[Host.Vector, typing.Sequence[typing.Optional[float]], numpy.ndarray]
ClickHandler = typing.Callable[[typing.Any], None]


class PropertyError(ValueError):
    """Raised when a property value cannot be handed to the host."""
    pass


DEFAULT_POSITION = Host.Vector(0, 0, 0)
DEFAULT_SIZE = Host.Vector(100, 100, 0)
DEFAULT_ANCHOR = Host.UIAnchor.TopLeft
DEFAULT_VISIBLE = True
DEFAULT_PADDING = 8
DEFAULT_CONTAINER_PADDING = 0
DEFAULT_BG_COLOR = Host.Vector(0.25, 0.25, 0.25)
DEFAULT_BG_ALPHA = 0.5
DEFAULT_BG_FILL = Host.UIBgFill.Solid

WIDGET_KINDS = ("container", "button", "text", "image")

DEFAULT_ENABLED = True
DEFAULT_BUTTON_STATES: typing.Mapping[str, typing.Tuple[Host.Vector, float]] = {
    "base": (Host.Vector(0.7, 0.7, 0.7), 1.0),
    "disabled": (Host.Vector(0.2, 0.2, 0.2), 0.5),
    "pressed": (Host.Vector(0.25, 0.25, 0.25), 1.0),
    "hover": (Host.Vector(1, 1, 1), 1.0),
    "focused": (Host.Vector(1, 1, 1), 1.0),
}

DEFAULT_TEXT_SIZE = 0  # the host picks its built-in size
DEFAULT_TEXT_COLOR = Host.Vector(1, 1, 1)
DEFAULT_TEXT_ALPHA = 1.0
DEFAULT_TEXT_ANCHOR = Host.UIAnchor.CenterLeft

DEFAULT_IMAGE_TYPE = Host.UIImageType.None_
DEFAULT_IMAGE_COLOR = Host.Vector(1, 1, 1)
DEFAULT_IMAGE_ALPHA = 1.0

_common_keys = frozenset(("name", "position", "size", "anchor", "parent", "visible", "padding", "bg_color",
                          "bg_alpha", "bg_fill", "player_id", "team_id"))

_button_keys = frozenset(["enabled", "on_click"] +
                         [f"{p}_{state}" for state in DEFAULT_BUTTON_STATES for p in ("color", "alpha")])

_text_keys = frozenset(("label", "text_size", "text_color", "text_alpha", "text_anchor"))

_image_keys = frozenset(("image_type", "image_color", "image_alpha"))

# keys that belong to the declarative tree node rather than to the widget
_reserved_keys = frozenset(("type", "children"))


def as_vector(value: VectorLike, property_name: str = "vector") -> Host.Vector:
    """Return the native vector for a vector or a two or three component sequence.

    Two components map to ``(x, y, 0)``. Missing (``None``) components are zero. Anything else is rejected.
    """
    if isinstance(value, Host.Vector):
        return value
    if isinstance(value, numpy.ndarray):
        if value.ndim != 1:
            raise PropertyError(f"{property_name} must be a one dimensional array, got shape {value.shape}")
        value = value.tolist()
    if isinstance(value, (str, bytes)) or not isinstance(value, collections.abc.Sequence):
        raise PropertyError(f"{property_name} must be a vector or a 2 or 3 component sequence, got {value!r}")
    if len(value) not in (2, 3):
        raise PropertyError(f"{property_name} must have 2 or 3 components, got {len(value)}")
    components: typing.List[float] = list()
    for component in value:
        if component is None:
            component = 0
        if isinstance(component, bool) or not isinstance(component, numbers.Real):
            raise PropertyError(f"{property_name} components must be numbers, got {component!r}")
        components.append(float(component))
    return Host.Vector(*components)


def as_message(value: typing.Union[str, Host.Message]) -> Host.Message:
    if isinstance(value, Host.Message):
        return value
    if isinstance(value, str):
        return Host.Message(value)
    raise PropertyError(f"label must be a string or a message, got {value!r}")


def resolve_receiver(d: PropertiesDescription) -> typing.Optional[Host.Receiver]:
    """Return the player or team the widget is scoped to, the player taking precedence."""
    player_id = d.get("player_id")
    if player_id is not None:
        return player_id
    return d.get("team_id")


@dataclasses.dataclass(frozen=True)
class ContainerProperties:
    name: typing.Optional[str]
    position: Host.Vector
    size: Host.Vector
    anchor: Host.UIAnchor
    parent: Host.Widget
    visible: bool
    padding: float
    bg_color: Host.Vector
    bg_alpha: float
    bg_fill: Host.UIBgFill
    receiver: typing.Optional[Host.Receiver]

    def host_arguments(self) -> typing.Tuple[typing.Any, ...]:
        """Positional host arguments following the widget name and preceding the receiver."""
        return (self.position, self.size, self.anchor, self.parent, self.visible, self.padding, self.bg_color,
                self.bg_alpha, self.bg_fill)


@dataclasses.dataclass(frozen=True)
class ButtonProperties(ContainerProperties):
    enabled: bool
    color_base: Host.Vector
    alpha_base: float
    color_disabled: Host.Vector
    alpha_disabled: float
    color_pressed: Host.Vector
    alpha_pressed: float
    color_hover: Host.Vector
    alpha_hover: float
    color_focused: Host.Vector
    alpha_focused: float
    on_click: typing.Optional[ClickHandler] = dataclasses.field(default=None, compare=False)

    def host_arguments(self) -> typing.Tuple[typing.Any, ...]:
        return super().host_arguments() + (self.enabled, self.color_base, self.alpha_base, self.color_disabled,
                                           self.alpha_disabled, self.color_pressed, self.alpha_pressed,
                                           self.color_hover, self.alpha_hover, self.color_focused,
                                           self.alpha_focused)


@dataclasses.dataclass(frozen=True)
class TextProperties(ContainerProperties):
    label: Host.Message
    text_size: float
    text_color: Host.Vector
    text_alpha: float
    text_anchor: Host.UIAnchor

    def host_arguments(self) -> typing.Tuple[typing.Any, ...]:
        return super().host_arguments() + (self.label, self.text_size, self.text_color, self.text_alpha,
                                           self.text_anchor)


@dataclasses.dataclass(frozen=True)
class ImageProperties(ContainerProperties):
    image_type: Host.UIImageType
    image_color: Host.Vector
    image_alpha: float

    def host_arguments(self) -> typing.Tuple[typing.Any, ...]:
        return super().host_arguments() + (self.image_type, self.image_color, self.image_alpha)


def _value(d: PropertiesDescription, key: str, default: typing.Any) -> typing.Any:
    value = d.get(key)
    return value if value is not None else default


def _vector_value(d: PropertiesDescription, key: str, default: Host.Vector) -> Host.Vector:
    value = d.get(key)
    return as_vector(value, key) if value is not None else default


def _check_keys(kind: str, d: PropertiesDescription, known_keys: typing.AbstractSet[str]) -> None:
    for key in d.keys():
        if key not in known_keys and key not in _reserved_keys:
            logging.warning("Ignoring unknown %s property '%s'", kind, key)


def _resolve_common(d: PropertiesDescription, root: Host.Widget, padding: float) -> typing.Dict[str, typing.Any]:
    return {
        "name": d.get("name"),
        "position": _vector_value(d, "position", DEFAULT_POSITION),
        "size": _vector_value(d, "size", DEFAULT_SIZE),
        "anchor": _value(d, "anchor", DEFAULT_ANCHOR),
        "parent": _value(d, "parent", root),
        "visible": _value(d, "visible", DEFAULT_VISIBLE),
        "padding": _value(d, "padding", padding),
        "bg_color": _vector_value(d, "bg_color", DEFAULT_BG_COLOR),
        "bg_alpha": _value(d, "bg_alpha", DEFAULT_BG_ALPHA),
        "bg_fill": _value(d, "bg_fill", DEFAULT_BG_FILL),
        "receiver": resolve_receiver(d),
    }


def resolve_container_properties(d: PropertiesDescription, root: Host.Widget) -> ContainerProperties:
    _check_keys("container", d, _common_keys)
    return ContainerProperties(**_resolve_common(d, root, DEFAULT_CONTAINER_PADDING))


def resolve_button_properties(d: PropertiesDescription, root: Host.Widget) -> ButtonProperties:
    _check_keys("button", d, _common_keys | _button_keys)
    states: typing.Dict[str, typing.Any] = dict()
    for state, (color, alpha) in DEFAULT_BUTTON_STATES.items():
        states["color_" + state] = _vector_value(d, "color_" + state, color)
        states["alpha_" + state] = _value(d, "alpha_" + state, alpha)
    on_click = d.get("on_click")
    if on_click is not None and not callable(on_click):
        raise PropertyError(f"on_click must be callable, got {on_click!r}")
    return ButtonProperties(**_resolve_common(d, root, DEFAULT_PADDING),
                            enabled=_value(d, "enabled", DEFAULT_ENABLED),
                            on_click=on_click, **states)


def resolve_text_properties(d: PropertiesDescription, root: Host.Widget) -> TextProperties:
    _check_keys("text", d, _common_keys | _text_keys)
    label = d.get("label")
    if label is None:
        raise PropertyError("text widgets require a label")
    return TextProperties(**_resolve_common(d, root, DEFAULT_PADDING),
                          label=as_message(label),
                          text_size=_value(d, "text_size", DEFAULT_TEXT_SIZE),
                          text_color=_vector_value(d, "text_color", DEFAULT_TEXT_COLOR),
                          text_alpha=_value(d, "text_alpha", DEFAULT_TEXT_ALPHA),
                          text_anchor=_value(d, "text_anchor", DEFAULT_TEXT_ANCHOR))


def resolve_image_properties(d: PropertiesDescription, root: Host.Widget) -> ImageProperties:
    _check_keys("image", d, _common_keys | _image_keys)
    return ImageProperties(**_resolve_common(d, root, DEFAULT_PADDING),
                           image_type=_value(d, "image_type", DEFAULT_IMAGE_TYPE),
                           image_color=_vector_value(d, "image_color", DEFAULT_IMAGE_COLOR),
                           image_alpha=_value(d, "image_alpha", DEFAULT_IMAGE_ALPHA))

