"""Recursive printing of values and the collections inside them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from contools.logging import get_logger
from contools.terminal import Terminal, get_terminal

LOG = get_logger(__name__)


def walk(value: Any, *, detect_cycles: bool = False) -> Iterator[Any]:
    """Yield a value and everything nested in it, depth-first, pre-order.

    Strings are yielded whole, never split into characters. A mapping yields
    its (key, value) pairs, and each pair is a leaf: it is not descended
    into. None elements are skipped.

    Without ``detect_cycles`` a self-referential container recurses until
    RecursionError. With it, a container already being traversed is yielded
    again but not descended into.
    """
    # Ids of containers on the current path.
    active: set[int] = set()

    def visit(item: Any, descend: bool = True) -> Iterator[Any]:
        yield item
        if not descend or isinstance(item, str) or not isinstance(item, Iterable):
            return
        if detect_cycles:
            if id(item) in active:
                LOG.debug("dump_cycle_skipped", type=type(item).__name__)
                return
            active.add(id(item))
        is_mapping = isinstance(item, Mapping)
        children = iter(item.items()) if is_mapping else iter(item)
        try:
            for child in children:
                if child is not None:
                    yield from visit(child, descend=not is_mapping)
        finally:
            active.discard(id(item))

    return visit(value)


def dump(value: Any, *, detect_cycles: bool = False, terminal: Terminal | None = None) -> None:
    """Print a value, then each element of it if it is a non-string iterable.

    Each item is printed on its own line in the terminal's current colors.
    """
    t = terminal or get_terminal()
    for item in walk(value, detect_cycles=detect_cycles):
        t.write(str(item), newline=True)
