"""Show - owns the live fireworks and drives the frame loop."""
from __future__ import annotations

import logging
import math

from skyburst import Engine, EntityId, FrameContext, FrameScheduler, World
from skyburst.engine import MAX_FRAME_DT
from skyburst_signal import SignalBus, make_signal_system

from skyburst_pyro.color import random_vivid
from skyburst_pyro.firework import Firework
from skyburst_pyro.rng import rand
from skyburst_pyro.surface import ColorStop, Message, Surface
from skyburst_pyro.systems import make_fade_system, make_firework_system

logger = logging.getLogger(__name__)

ALL_CLEAR_DELAY = 0.2  # s of empty sky before the show counts as finished
MAX_PIXEL_RATIO = 2.0

LAUNCH_MARGIN = 60.0
GROUND_OFFSET = 30.0
TARGET_BAND = (0.22, 0.48)  # fraction of height, measured from the top

GLOW_CENTER = (0.5, 0.8)
GLOW_INNER_RADIUS = 10.0
GLOW_REACH = 0.8
GLOW_STOPS: tuple[ColorStop, ...] = (
    (0.0, (255, 255, 255, 5)),
    (1.0, (255, 255, 255, 0)),
)


class Show:
    """A fireworks display on one surface.

    ``launch_burst`` adds rockets and makes sure a frame is requested from
    the scheduler. Each frame runs the engine systems (fade, fireworks,
    completion, signals) and then paints the sky. When the sky has been
    empty for ``ALL_CLEAR_DELAY`` seconds the loop stops rescheduling and
    the completion message is shown.

    Signals published on ``bus``: ``burst_launched``, ``firework_exploded``,
    ``show_complete``.
    """

    def __init__(
        self,
        surface: Surface,
        message: Message,
        scheduler: FrameScheduler,
        seed: int | None = None,
    ) -> None:
        self.surface = surface
        self.message = message
        self.scheduler = scheduler
        self.engine = Engine(max_dt=MAX_FRAME_DT, seed=seed)
        self.bus = SignalBus()

        self.running = False
        self.width = 0.0
        self.height = 0.0
        self._empty_time = 0.0
        self._frame_handle: int | None = None

        # Order matters: the veil goes down before anything moves, and
        # signals are flushed last so they see the whole frame.
        self.engine.add_system(make_fade_system(surface, self.size))
        self.engine.add_system(make_firework_system(on_explode=self._on_explode))
        self.engine.add_system(self._completion_system)
        self.engine.add_system(make_signal_system(self.bus))

        self.resize()

    @property
    def world(self) -> World:
        return self.engine.world

    @property
    def frame_pending(self) -> bool:
        return self._frame_handle is not None

    def size(self) -> tuple[float, float]:
        return self.width, self.height

    def fireworks(self) -> list[Firework]:
        return [fw for _, (fw,) in self.world.query(Firework)]

    def resize(self) -> None:
        width, height = self.surface.client_size()
        ratio = min(self.surface.pixel_ratio() or 1.0, MAX_PIXEL_RATIO)
        self.surface.set_backing_size(math.floor(width * ratio), math.floor(height * ratio))
        self.surface.set_transform(ratio)
        self.width, self.height = float(width), float(height)
        logger.debug("resized to %.0fx%.0f @%.2fx", width, height, ratio)

    def launch_burst(self, count: int = 6) -> list[EntityId]:
        if count < 0:
            raise ValueError("count must be non-negative")

        self.message.hide()
        self._empty_time = 0.0
        self.running = True

        rng = self.engine.random
        ground_y = self.height - GROUND_OFFSET
        low, high = TARGET_BAND
        launched: list[EntityId] = []
        for _ in range(count):
            firework = Firework(
                x=rand(rng, LAUNCH_MARGIN, self.width - LAUNCH_MARGIN),
                ground_y=ground_y,
                target_y=rand(rng, self.height * low, self.height * high),
                color=random_vivid(rng),
                rng=rng,
            )
            eid = self.world.spawn()
            self.world.attach(eid, firework)
            launched.append(eid)

        logger.info("launched %d fireworks (%d live)", count, self.world.count())
        self.bus.publish("burst_launched", count=count)

        if self._frame_handle is None:
            self._frame_handle = self.scheduler.request(self._loop)
        return launched

    def _loop(self, ts: float) -> None:
        self.engine.frame(ts)
        self._draw()

        if self.running:
            self._frame_handle = self.scheduler.request(self._loop)
        else:
            self.scheduler.cancel(self._frame_handle)
            self._frame_handle = None
            self.message.show()

    def _completion_system(self, world: World, ctx: FrameContext) -> None:
        if world.count() > 0:
            return
        self._empty_time += ctx.dt
        if self.running and self._empty_time >= ALL_CLEAR_DELAY:
            self.running = False
            logger.info("show complete after %.2fs", ctx.elapsed)
            self.bus.publish("show_complete", elapsed=ctx.elapsed)

    def _on_explode(
        self, world: World, ctx: FrameContext, eid: EntityId, firework: Firework,
    ) -> None:
        self.bus.publish("firework_exploded", entity=eid, particles=len(firework.sparks))

    def _draw(self) -> None:
        width, height = self.size()
        cx, cy = GLOW_CENTER
        self.surface.fill_radial_gradient(
            width * cx,
            height * cy,
            GLOW_INNER_RADIUS,
            min(width, height) * GLOW_REACH,
            GLOW_STOPS,
        )
        for firework in self.fireworks():
            firework.draw(self.surface)
