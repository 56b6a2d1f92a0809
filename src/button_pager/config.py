"""Configuration handling for the button pager."""

from dataclasses import dataclass, field
from pathlib import Path
import yaml

from .core.controls import CleanupBehavior, Control, NavigationBehavior, PaginationButtons


@dataclass
class Config:
    """Configuration settings for paginated messages.

    Attributes:
        ack_buttons: Acknowledge each press before processing it.
        buttons: Custom ids and labels of the five pagination controls.
        cleanup_behavior: What happens to the message when a session ends.
        wrap_behavior: Clamp at the ends or wrap around.
        timeout_seconds: Seconds before an idle session is cancelled (None for never).
        page_size: Maximum characters per generated page.
    """

    ack_buttons: bool = True
    buttons: PaginationButtons = field(default_factory=PaginationButtons)
    cleanup_behavior: CleanupBehavior = CleanupBehavior.DISABLE
    wrap_behavior: NavigationBehavior = NavigationBehavior.CLAMP
    timeout_seconds: float | None = 60.0
    page_size: int = 1000


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If a cleanup or wrap value is not recognized.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    # Extract sections
    pagination = data.get("pagination", {})
    buttons = data.get("buttons", {})

    return Config(
        ack_buttons=pagination.get("ack_buttons", Config.ack_buttons),
        buttons=_load_buttons(buttons),
        cleanup_behavior=_parse_enum(
            CleanupBehavior, pagination.get("cleanup", Config.cleanup_behavior.value), "cleanup"
        ),
        wrap_behavior=_parse_enum(
            NavigationBehavior, pagination.get("wrap", Config.wrap_behavior.value), "wrap"
        ),
        timeout_seconds=pagination.get("timeout_seconds", Config.timeout_seconds),
        page_size=pagination.get("page_size", Config.page_size),
    )


def _load_buttons(section: dict) -> PaginationButtons:
    """Build pagination buttons, falling back to defaults per control."""
    defaults = PaginationButtons()
    overrides = {}

    for name in ("first", "previous", "stop", "next", "last"):
        entry = section.get(name)
        if not entry:
            continue
        if not isinstance(entry, dict):
            raise ValueError(f"Invalid buttons.{name} setting {entry!r} (expected a mapping with id and label)")
        default = getattr(defaults, name)
        overrides[name] = Control(
            custom_id=str(entry.get("id", default.custom_id)),
            label=str(entry.get("label", default.label)),
        )

    return PaginationButtons(**overrides)


def _parse_enum(enum_type, value, setting: str):
    try:
        return enum_type(str(value).lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_type)
        raise ValueError(f"Invalid {setting} setting {value!r} (expected one of: {choices})") from None
