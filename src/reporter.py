"""Plain-text summary of a pagination walk."""
from __future__ import annotations

import sys
from typing import TextIO

from consumer import Consumption

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000


def _fraction(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    digits = len(str(unit)) - 1
    frac_s = f"{frac:0{digits}d}".rstrip("0")
    return f"{whole}.{frac_s}" if frac_s else str(whole)


def format_duration(ns: int) -> str:
    """Render nanoseconds compactly: ``850ns``, ``12.5µs``, ``3.2ms``, ``2m3.25s``."""
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    ns = abs(ns)
    if ns < _NS_PER_US:
        return f"{sign}{ns}ns"
    if ns < _NS_PER_MS:
        return f"{sign}{_fraction(ns, _NS_PER_US)}µs"
    if ns < _NS_PER_S:
        return f"{sign}{_fraction(ns, _NS_PER_MS)}ms"

    hours, rem = divmod(ns, 3600 * _NS_PER_S)
    minutes, rem = divmod(rem, 60 * _NS_PER_S)
    seconds = f"{_fraction(rem, _NS_PER_S)}s"
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}"
    if minutes:
        return f"{sign}{minutes}m{seconds}"
    return sign + seconds


def print_consumption(hash: str, first_token: str, consumption: Consumption, out: TextIO | None = None) -> None:
    out = out or sys.stdout
    print(f"Hash: {hash}, First Token: {first_token}", file=out)
    if consumption.error is not None:
        print(f"Error: {consumption.error}", file=out)
        return

    print(f"  Pages: {consumption.page_count}", file=out)
    print(f"  Records: {consumption.total_records}", file=out)
    print(f"  Duration to retrieve pages: {format_duration(consumption.request_duration)}", file=out)
    print(f"  Duration to unmarshal pages: {format_duration(consumption.decode_duration)}", file=out)


__all__ = ["print_consumption", "format_duration"]
