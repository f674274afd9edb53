"""Configuration defaults.

The border style used by the command line can be chosen per invocation or
through the ``BOXTABLE_STYLE`` environment variable.
"""

import os

from .border import PRESETS, BorderStyle
from .exceptions import ConfigurationError

DEFAULT_STYLE_NAME = "basic2"
"""Preset used when neither an explicit name nor the environment selects one."""

STYLE_ENV_VAR = "BOXTABLE_STYLE"
"""Environment variable for overriding the default border style."""

DEFAULT_LINE_SEPARATOR = "\n"
"""Line separator appended to every rendered line."""


def resolve_style_name(name: str | None = None) -> str:
    """
    Pick the border style name to use.

    Resolution order: explicit ``name``, then ``BOXTABLE_STYLE``, then
    ``DEFAULT_STYLE_NAME``.
    """
    return (name or os.environ.get(STYLE_ENV_VAR) or DEFAULT_STYLE_NAME).strip().lower()


def get_border_style(name: str | None = None) -> BorderStyle:
    """
    Look up a preset border style by name.

    Args:
        name: One of ``basic``, ``basic2``, ``fancy``, ``fancy2`` (any case);
            ``None`` resolves through :func:`resolve_style_name`

    Raises:
        ConfigurationError: If the name is not a known preset
    """
    resolved = resolve_style_name(name)
    try:
        return PRESETS[resolved]
    except KeyError:
        raise ConfigurationError(
            "style", resolved, f"expected one of {', '.join(sorted(PRESETS))}"
        ) from None
