"""Rendering configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderOptions:
    """Options controlling how a Selector is turned into text.

    The descendant combinator is itself a space, so the default rendering
    surrounds it with two more and emits three consecutive spaces.
    ``normalize_descendant`` collapses that to a single space.
    """

    normalize_descendant: bool = False


DEFAULT_RENDER_OPTIONS = RenderOptions()
