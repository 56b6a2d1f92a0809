"""Button controls and the behaviours that govern them."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable


class ControlKind(Enum):
    """The five pagination controls, in rendering order."""

    FIRST = "first"
    PREVIOUS = "previous"
    STOP = "stop"
    NEXT = "next"
    LAST = "last"


# Controls that move the page index (everything except STOP)
NAVIGATION_KINDS = frozenset(
    {ControlKind.FIRST, ControlKind.PREVIOUS, ControlKind.NEXT, ControlKind.LAST}
)


class NavigationBehavior(Enum):
    """What happens when navigation runs past either end."""

    CLAMP = "clamp"
    WRAP_AROUND = "wrap_around"


class CleanupBehavior(Enum):
    """The one-time action applied to the message when a session ends."""

    DISABLE = "disable"
    DELETE = "delete"
    IGNORE = "ignore"


@dataclass(frozen=True)
class Control:
    """A single button attached to a message."""

    custom_id: str
    label: str
    disabled: bool = False

    def disable(self) -> "Control":
        """Return a disabled copy of this control."""
        return replace(self, disabled=True)

    def enable(self) -> "Control":
        """Return an enabled copy of this control."""
        return replace(self, disabled=False)


@dataclass(frozen=True)
class PaginationButtons:
    """The configured set of pagination controls."""

    first: Control = Control(custom_id="leftskip", label="<<")
    previous: Control = Control(custom_id="left", label="<")
    stop: Control = Control(custom_id="stop", label="stop")
    next: Control = Control(custom_id="right", label=">")
    last: Control = Control(custom_id="rightskip", label=">>")

    def __post_init__(self):
        ids = [control.custom_id for control in self.controls()]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Pagination button ids must be unique, got {ids}")

    def get(self, kind: ControlKind) -> Control:
        """Get the configured control for a kind."""
        return getattr(self, kind.value)

    def controls(self) -> tuple[Control, ...]:
        """All five controls in rendering order."""
        return tuple(self.get(kind) for kind in ControlKind)

    def kind_for(self, custom_id: str) -> ControlKind | None:
        """
        Map an inbound custom id to the control it belongs to.

        Returns:
            The matching ControlKind, or None if no control uses this id.
        """
        for kind in ControlKind:
            if self.get(kind).custom_id == custom_id:
                return kind
        return None

    def row(self, disabled: Iterable[ControlKind] = ()) -> tuple[Control, ...]:
        """
        Build the ordered control row.

        Args:
            disabled: Kinds to render as disabled; all others are enabled.

        Returns:
            Tuple of controls in rendering order.
        """
        disabled = set(disabled)
        return tuple(
            self.get(kind).disable() if kind in disabled else self.get(kind).enable()
            for kind in ControlKind
        )
