"""Cursor visual effects: expanding highlights and particle trails."""

from __future__ import annotations

import enum
import logging
import math
import struct
from dataclasses import dataclass, field
from typing import Any, Union

from gridglide.animation import F32_EPSILON, Point, ease, ease_in_quad

logger = logging.getLogger(__name__)

_U64_MASK = 0xFFFF_FFFF_FFFF_FFFF
_U32_MASK = 0xFFFF_FFFF
_PCG_MULTIPLIER = 6_364_136_223_846_793_005


class HighlightMode(enum.Enum):
    """Shapes drawn around the cursor when it changes shape."""

    SONIC_BOOM = "sonicboom"
    RIPPLE = "ripple"
    WIREFRAME = "wireframe"


class TrailMode(enum.Enum):
    """Particle patterns left behind a moving cursor."""

    RAILGUN = "railgun"
    TORPEDO = "torpedo"
    PIXIE_DUST = "pixiedust"


class VfxMode(enum.Enum):
    """The selected cursor effect; its value is the setting's string form."""

    SONIC_BOOM = "sonicboom"
    RIPPLE = "ripple"
    WIREFRAME = "wireframe"
    RAILGUN = "railgun"
    TORPEDO = "torpedo"
    PIXIE_DUST = "pixiedust"
    DISABLED = ""

    @classmethod
    def from_value(cls, value: Any, current: VfxMode) -> VfxMode:
        """Parse a setting value, keeping current (and logging) when it is invalid."""
        if not isinstance(value, str):
            logger.error("Expected a VfxMode string, but received %r", value)
            return current
        try:
            return cls(value)
        except ValueError:
            logger.error("Expected a VfxMode name, but received %r", value)
            return current

    def to_value(self) -> str:
        """The string form used for the setting."""
        return self.value

    @property
    def highlight_mode(self) -> HighlightMode | None:
        return _HIGHLIGHT_MODES.get(self)

    @property
    def trail_mode(self) -> TrailMode | None:
        return _TRAIL_MODES.get(self)


_HIGHLIGHT_MODES = {
    VfxMode.SONIC_BOOM: HighlightMode.SONIC_BOOM,
    VfxMode.RIPPLE: HighlightMode.RIPPLE,
    VfxMode.WIREFRAME: HighlightMode.WIREFRAME,
}

_TRAIL_MODES = {
    VfxMode.RAILGUN: TrailMode.RAILGUN,
    VfxMode.TORPEDO: TrailMode.TORPEDO,
    VfxMode.PIXIE_DUST: TrailMode.PIXIE_DUST,
}


def _to_f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _to_u8(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), 255.0))


def _to_usize(value: float) -> int:
    if math.isnan(value) or value <= 0.0:
        return 0
    return int(value)


class RngState:
    """Small deterministic PCG random number generator."""

    def __init__(self) -> None:
        self.state = 0x853C_49E6_748F_EA9B
        self.inc = ((0xDA3E_39CB_94B9_5BDB << 1) | 1) & _U64_MASK

    def next(self) -> int:
        """Next unsigned 32-bit random value."""
        old_state = self.state
        self.state = (old_state * _PCG_MULTIPLIER + self.inc) & _U64_MASK

        rot = old_state >> 59
        xsh = (((old_state >> 18) ^ old_state) >> 27) & _U32_MASK
        return ((xsh >> rot) | (xsh << ((32 - rot) % 32))) & _U32_MASK

    def next_f32(self) -> float:
        """Next random value in [0, 1], rounded to single precision."""
        return _to_f32(math.ldexp(float(self.next()), -32))

    def rand_dir(self) -> Point:
        """A random, non-normalised vector with both coordinates in [-1, 1)."""
        x = self.next_f32()
        y = self.next_f32()
        return Point(x * 2.0 - 1.0, y * 2.0 - 1.0)

    def rand_dir_normalized(self) -> Point:
        return self.rand_dir().normalized()


def rotate_vec(v: Point, rot: float) -> Point:
    """Rotate a vector by rot radians."""
    sin = math.sin(rot)
    cos = math.cos(rot)
    return Point(v.x * cos - v.y * sin, v.x * sin + v.y * cos)


class PointHighlight:
    """A shape that grows from the cursor centre and fades out."""

    def __init__(self, mode: HighlightMode) -> None:
        self.t = 0.0
        self.center_position = Point(0.0, 0.0)
        self.mode = mode

    def update(
        self,
        settings: Any,
        current_cursor_destination: Point,
        cursor_dimensions: Point,
        dt: float,
    ) -> bool:
        """Advance the effect; returns True while it is still animating."""
        self.t = min(self.t + dt * 5.0, 1.0)
        return self.t < 1.0

    def restart(self, position: Point) -> None:
        self.t = 0.0
        self.center_position = position

    @property
    def finished(self) -> bool:
        return abs(self.t - 1.0) < F32_EPSILON

    def radius(self, cursor_height: int) -> float:
        """Current size of the highlight for a cursor of the given height."""
        size = 3 * cursor_height
        return self.t * size

    def alpha(self, settings: Any) -> int:
        """Current opacity, fading from the configured opacity to zero."""
        return _to_u8(ease(ease_in_quad, settings.vfx_opacity, 0.0, self.t))


@dataclass
class ParticleData:
    """A single trail particle."""

    pos: Point
    speed: Point
    rotation_speed: float
    lifetime: float


@dataclass
class ParticleTrail:
    """Particles spawned along the path the cursor travels."""

    trail_mode: TrailMode
    particles: list[ParticleData] = field(default_factory=list)
    previous_cursor_dest: Point = field(default_factory=Point)
    rng: RngState = field(default_factory=RngState)

    def update(
        self,
        settings: Any,
        current_cursor_destination: Point,
        cursor_dimensions: Point,
        dt: float,
    ) -> bool:
        """Age, move and spawn particles; returns True while any are alive."""
        for particle in self.particles:
            particle.lifetime -= dt
        self.particles = [p for p in self.particles if p.lifetime > 0.0]

        for particle in self.particles:
            particle.pos = particle.pos + particle.speed * dt
            particle.speed = rotate_vec(particle.speed, dt * particle.rotation_speed)

        if current_cursor_destination != self.previous_cursor_dest:
            self._spawn(settings, current_cursor_destination, cursor_dimensions)
            self.previous_cursor_dest = current_cursor_destination

        return bool(self.particles)

    def _spawn(self, settings: Any, destination: Point, cursor_dimensions: Point) -> None:
        travel = destination - self.previous_cursor_dest
        travel_distance = travel.length()
        relative_distance = travel_distance / cursor_dimensions.y

        particle_count = _to_usize(
            relative_distance**1.5 * settings.vfx_particle_density * 0.01
        )
        prev_p = self.previous_cursor_dest

        for i in range(particle_count):
            t = i / particle_count
            speed = self._particle_speed(settings, travel, relative_distance, t)

            if self.trail_mode is TrailMode.RAILGUN:
                pos = prev_p + travel * t
                rotation_speed = math.pi * settings.vfx_particle_curl
            else:
                pos = (
                    prev_p
                    + travel * self.rng.next_f32()
                    + Point(0.0, cursor_dimensions.y * 0.5)
                )
                rotation_speed = (
                    (self.rng.next_f32() - 0.5)
                    * (math.pi / 2.0)
                    * settings.vfx_particle_curl
                )

            self.particles.append(
                ParticleData(
                    pos=pos,
                    speed=speed,
                    rotation_speed=rotation_speed,
                    lifetime=t * settings.vfx_particle_lifetime,
                )
            )

    def _particle_speed(
        self, settings: Any, travel: Point, relative_distance: float, t: float
    ) -> Point:
        if self.trail_mode is TrailMode.RAILGUN:
            phase = t / math.pi * settings.vfx_particle_phase * relative_distance
            return Point(math.sin(phase), math.cos(phase)) * 2.0 * settings.vfx_particle_speed
        if self.trail_mode is TrailMode.TORPEDO:
            travel_dir = travel.normalized()
            particle_dir = (self.rng.rand_dir_normalized() - travel_dir * 1.5).normalized()
            return particle_dir * settings.vfx_particle_speed
        base_dir = self.rng.rand_dir_normalized()
        direction = Point(base_dir.x * 0.5, 0.4 + abs(base_dir.y))
        return direction * 3.0 * settings.vfx_particle_speed

    def restart(self, position: Point) -> None:
        """Trails do not react to a restart."""


CursorVfx = Union[PointHighlight, ParticleTrail]


def new_cursor_vfx(mode: VfxMode) -> CursorVfx | None:
    """Create the effect for a mode, or None when effects are disabled."""
    highlight = mode.highlight_mode
    if highlight is not None:
        return PointHighlight(highlight)
    trail = mode.trail_mode
    if trail is not None:
        return ParticleTrail(trail)
    return None