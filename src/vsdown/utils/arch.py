"""Architecture detection for release selection."""

import platform

from vsdown.constants import ARCH_TAGS
from vsdown.exceptions import UnsupportedArchitectureError


def get_arch_tag(machine: str | None = None) -> str:
    """Map a machine name to the release arch tag.

    Args:
        machine: Value as reported by platform.machine(); detected when
            omitted

    Returns:
        "linux-x64" or "linux-arm64"

    Raises:
        UnsupportedArchitectureError: For any other architecture

    """
    if machine is None:
        machine = platform.machine()
    try:
        return ARCH_TAGS[machine.lower()]
    except KeyError:
        raise UnsupportedArchitectureError(machine) from None
