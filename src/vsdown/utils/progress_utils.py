"""ASCII rendering utilities for progress display."""

KIB = 1024
MIB = 1024 * 1024


def human_mib(bytes_value: float) -> str:
    """Convert bytes to human-readable format.

    Args:
        bytes_value: Size in bytes

    Returns:
        Formatted string like "512.0 KiB", "15.2 MiB" or "1.50 GiB"

    """
    if bytes_value <= 0:
        return "0 B"

    mib = bytes_value / MIB
    if mib < 1.0:
        return f"{bytes_value / KIB:.1f} KiB"
    if mib < KIB:
        return f"{mib:.1f} MiB"
    return f"{mib / KIB:.2f} GiB"


def human_speed_bps(bytes_per_sec: float) -> str:
    """Convert bytes per second to a speed string like "5.2 MB/s"."""
    if bytes_per_sec <= 0:
        return "-- MB/s"

    mb_per_sec = bytes_per_sec / MIB
    if mb_per_sec >= 1.0:
        return f"{mb_per_sec:.1f} MB/s"
    return f"{bytes_per_sec / KIB:.0f} KB/s"


def format_eta(seconds: float) -> str:
    """Format remaining time like "2m 30s", "1h 5m" or "--:--"."""
    if seconds <= 0 or seconds == float("inf"):
        return "--:--"

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)

    if hours > 0:
        return f"{hours}h {minutes}m"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def render_bar(completed: float, total: float, width: int = 25) -> str:
    """Render an ASCII progress bar like "[========>     ]".

    Args:
        completed: Amount completed
        total: Total amount
        width: Width of the bar in characters

    """
    if total <= 0:
        return "[" + " " * width + "]"

    filled_width = int((completed / total) * width)
    filled_width = max(0, min(filled_width, width))

    if filled_width == width:
        bar = "=" * width
    elif filled_width > 0:
        bar = "=" * (filled_width - 1) + ">" + " " * (width - filled_width)
    else:
        bar = " " * width

    return f"[{bar}]"


def format_percentage(completed: float, total: float) -> str:
    """Format completion percentage like " 75%"."""
    if total <= 0:
        return "0%"

    percentage = (completed / total) * 100
    percentage = max(0.0, min(percentage, 100.0))
    return f"{percentage:>3.0f}%"
