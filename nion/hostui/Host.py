"""
The host user interface contract.

The host owns every widget. It creates containers, buttons, text and images one at a time from long positional
parameter lists and hands back opaque widget handles. This module describes that contract along with the value types
(vectors, messages, enumerations) passed through it.
"""

from __future__ import annotations

# standard libraries
import abc
import enum
import typing

# third party libraries
# None

# local libraries
# None


Widget = typing.Any  # opaque handle owned by the host
Receiver = typing.Any  # a player or a team


class UIAnchor(enum.Enum):
    TopLeft = 0
    TopCenter = 1
    TopRight = 2
    CenterLeft = 3
    Center = 4
    CenterRight = 5
    BottomLeft = 6
    BottomCenter = 7
    BottomRight = 8


class UIBgFill(enum.Enum):
    None_ = 0
    Solid = 1
    Blur = 2
    OutlineThin = 3
    OutlineThick = 4
    GradientTop = 5
    GradientBottom = 6
    GradientLeft = 7
    GradientRight = 8


class UIImageType(enum.Enum):
    None_ = 0
    CrownOutline = 1
    CrownSolid = 2
    QuestionMark = 3
    SelfHeal = 4
    SpawnBeacon = 5
    TEMP_PortalIcon = 6


class UIButtonEvent(enum.Enum):
    ButtonDown = 0
    ButtonUp = 1
    FocusIn = 2
    FocusOut = 3
    HoverIn = 4
    HoverOut = 5


class UIDepth(enum.Enum):
    AboveGameUI = 0
    BelowGameUI = 1


class Vector:
    """The native three component vector passed to the host for positions, sizes and colors."""

    __slots__ = ("__x", "__y", "__z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.__x = float(x)
        self.__y = float(y)
        self.__z = float(z)

    def __repr__(self) -> str:
        return "Vector(x={}, y={}, z={})".format(self.__x, self.__y, self.__z)

    def __eq__(self, other: typing.Any) -> bool:
        if isinstance(other, Vector):
            return self.as_tuple() == other.as_tuple()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __iter__(self) -> typing.Iterator[float]:
        return iter(self.as_tuple())

    @property
    def x(self) -> float:
        return self.__x

    @property
    def y(self) -> float:
        return self.__y

    @property
    def z(self) -> float:
        return self.__z

    def as_tuple(self) -> typing.Tuple[float, float, float]:
        return self.__x, self.__y, self.__z


class Message:
    """An opaque, pre-formatted message; formatting and localization belong to the host."""

    def __init__(self, key: str, *args: typing.Any) -> None:
        self.key = key
        self.args = args

    def __repr__(self) -> str:
        return "Message({})".format(", ".join(repr(a) for a in (self.key,) + tuple(self.args)))

    def __eq__(self, other: typing.Any) -> bool:
        if isinstance(other, Message):
            return self.key == other.key and self.args == other.args
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.key, self.args))


class Host(abc.ABC):
    """The imperative widget API provided by the host.

    Creation calls take a fixed positional parameter list per widget kind. The trailing receiver (a player or a team)
    is passed only when the widget is scoped; leaving it off means the widget is visible to everyone. Calls are
    immediately effective and ``find_widget_by_name`` returns a widget right after its creation call.
    """

    # widget creation

    @abc.abstractmethod
    def create_container(self, name: str, position: Vector, size: Vector, anchor: UIAnchor, parent: Widget,
                         visible: bool, padding: float, bg_color: Vector, bg_alpha: float, bg_fill: UIBgFill,
                         *receiver: Receiver) -> None:
        ...

    @abc.abstractmethod
    def create_button(self, name: str, position: Vector, size: Vector, anchor: UIAnchor, parent: Widget,
                      visible: bool, padding: float, bg_color: Vector, bg_alpha: float, bg_fill: UIBgFill,
                      enabled: bool, color_base: Vector, alpha_base: float, color_disabled: Vector,
                      alpha_disabled: float, color_pressed: Vector, alpha_pressed: float, color_hover: Vector,
                      alpha_hover: float, color_focused: Vector, alpha_focused: float,
                      *receiver: Receiver) -> None:
        ...

    @abc.abstractmethod
    def create_text(self, name: str, position: Vector, size: Vector, anchor: UIAnchor, parent: Widget,
                    visible: bool, padding: float, bg_color: Vector, bg_alpha: float, bg_fill: UIBgFill,
                    label: Message, text_size: float, text_color: Vector, text_alpha: float, text_anchor: UIAnchor,
                    *receiver: Receiver) -> None:
        ...

    @abc.abstractmethod
    def create_image(self, name: str, position: Vector, size: Vector, anchor: UIAnchor, parent: Widget,
                     visible: bool, padding: float, bg_color: Vector, bg_alpha: float, bg_fill: UIBgFill,
                     image_type: UIImageType, image_color: Vector, image_alpha: float,
                     *receiver: Receiver) -> None:
        ...

    # widget queries and updates

    @abc.abstractmethod
    def find_widget_by_name(self, name: str) -> typing.Optional[Widget]:
        ...

    @abc.abstractmethod
    def get_widget_name(self, widget: Widget) -> str:
        ...

    @abc.abstractmethod
    def set_widget_name(self, widget: Widget, name: str) -> None:
        ...

    @abc.abstractmethod
    def set_widget_visible(self, widget: Widget, visible: bool) -> None:
        ...

    @abc.abstractmethod
    def set_widget_depth(self, widget: Widget, depth: UIDepth) -> None:
        ...

    @abc.abstractmethod
    def delete_widget(self, widget: Widget) -> None:
        ...

    @abc.abstractmethod
    def get_root_widget(self) -> Widget:
        ...
