"""Tests for progress rendering helpers."""

import pytest

from vsdown.utils.progress_utils import (
    KIB,
    MIB,
    format_eta,
    format_percentage,
    human_mib,
    human_speed_bps,
    render_bar,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "0 B"),
        (-5, "0 B"),
        (512 * KIB, "512.0 KiB"),
        (int(15.2 * MIB), "15.2 MiB"),
        (int(1.5 * 1024 * MIB), "1.50 GiB"),
    ],
)
def test_human_mib(value: int, expected: str) -> None:
    assert human_mib(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "-- MB/s"),
        (512 * KIB, "512 KB/s"),
        (int(5.2 * MIB), "5.2 MB/s"),
    ],
)
def test_human_speed_bps(value: int, expected: str) -> None:
    assert human_speed_bps(value) == expected


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "--:--"),
        (float("inf"), "--:--"),
        (5, "5s"),
        (150, "2m 30s"),
        (3900, "1h 5m"),
    ],
)
def test_format_eta(seconds: float, expected: str) -> None:
    assert format_eta(seconds) == expected


def test_render_bar_states() -> None:
    assert render_bar(0, 100, width=10) == "[          ]"
    assert render_bar(50, 100, width=10) == "[====>     ]"
    assert render_bar(100, 100, width=10) == "[==========]"
    assert render_bar(500, 100, width=10) == "[==========]"
    assert render_bar(5, 0, width=4) == "[    ]"


def test_format_percentage() -> None:
    assert format_percentage(75, 100) == " 75%"
    assert format_percentage(150, 100) == "100%"
    assert format_percentage(1, 0) == "0%"
