"""System factories for the fireworks show."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from skyburst_pyro.firework import Firework
from skyburst_pyro.surface import Blend, Surface
from skyburst_pyro.types import RGBA

if TYPE_CHECKING:
    from skyburst import EntityId, FrameContext, World
    from skyburst.types import System

# rgba(4, 8, 16, 0.45): dark sky, translucent so earlier frames linger as trails.
FADE_COLOR: RGBA = (4, 8, 16, 115)


def make_fade_system(
    surface: Surface,
    size: Callable[[], tuple[float, float]],
    color: RGBA = FADE_COLOR,
) -> "System":
    """Paint a translucent veil over the surface instead of clearing it."""

    def fade_system(world: "World", ctx: "FrameContext") -> None:
        width, height = size()
        surface.save()
        surface.set_blend(Blend.NORMAL)
        surface.fill_rect(0.0, 0.0, width, height, color)
        surface.restore()

    return fade_system


def make_firework_system(
    on_explode: Callable[["World", "FrameContext", "EntityId", Firework], None] | None = None,
) -> "System":
    """Advance every Firework by ``ctx.dt`` and despawn the dead ones.

    ``on_explode`` fires on the frame a rocket bursts.
    """

    def firework_system(world: "World", ctx: "FrameContext") -> None:
        for eid, (firework,) in world.query(Firework):
            was_exploded = firework.exploded
            firework.update(ctx.dt)
            if not was_exploded and firework.exploded and on_explode is not None:
                on_explode(world, ctx, eid, firework)
            if firework.dead:
                world.despawn(eid)

    return firework_system
