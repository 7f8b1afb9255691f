"""
Collision detection system for Pongish

All tests are swept: they look at the segment a ball covered during the
current step (from `old_pos` to `pos` on each axis), so a fast ball cannot
tunnel through a wall or the bat between two updates.
"""

import math
from typing import TYPE_CHECKING

from pongish.core.entities import AxisMotion, Edge

if TYPE_CHECKING:
    from pongish.core.physics import Ball


def adjusted_line(motion: AxisMotion, edge: Edge, radius: float) -> float:
    """Line the ball centre has to reach for the ball surface to touch the edge"""
    if motion.pos > motion.old_pos:
        return edge.pos - radius
    return edge.pos + radius


def strike(motion: AxisMotion, orth: AxisMotion, edge: Edge, radius: float) -> float | None:
    """
    Checks whether a ball crossed an edge during the current step.

    Args:
        motion: Motion along the axis the edge is on
        orth: Motion along the orthogonal axis
        edge: Edge to test against
        radius: Ball radius

    Returns:
        The orthogonal coordinate at the moment of contact, or None if the
        edge was not struck this step
    """
    displacement = motion.displacement
    # A stationary axis cannot cross a line on that axis
    if displacement == 0:
        return None

    line = adjusted_line(motion, edge, radius)
    if displacement > 0:
        crossed = motion.old_pos < line <= motion.pos
    else:
        crossed = motion.pos <= line < motion.old_pos
    if not crossed:
        return None

    strike_pos = orth.old_pos + (line - motion.old_pos) * orth.displacement / displacement
    if edge.start <= strike_pos <= edge.end:
        return strike_pos
    return None


def rebound_normal(motion: AxisMotion, orth: AxisMotion, edge: Edge, radius: float) -> bool:
    """Bounces off a flat edge, mirroring the overshoot. Returns True on rebound"""
    if strike(motion, orth, edge, radius) is None:
        return False

    line = adjusted_line(motion, edge, radius)
    motion.vel = -motion.vel
    motion.pos = 2.0 * line - motion.pos
    return True


def _time_past(motion: AxisMotion, line: float) -> float:
    """Time spent beyond `line` during the current step"""
    if motion.vel == 0:
        return 0.0
    return (motion.pos - line) / motion.vel


def rebound_bat_face(ball: "Ball", bat_x: float, speedup: float) -> bool:
    """
    Bounces a falling ball off the bat face.

    These are not the traditional pong bat rules: the part of the bat the
    ball reaches first sends it back steep, the far end sends it shallow.
    """
    config = ball.config
    radius = config.BALL_RADIUS
    face = ball.court.bat_face(bat_x)

    strike_x = strike(ball.y, ball.x, face, radius)
    if strike_x is None:
        return False

    direction = math.copysign(1.0, ball.x.vel)
    if direction > 0:
        face_pos = strike_x - bat_x
    else:
        face_pos = bat_x + config.BAT_WIDTH - strike_x

    if face_pos < config.STEEP_ZONE * config.BAT_WIDTH:
        x_speed = config.x_vel_steep
    elif face_pos > config.SHALLOW_ZONE * config.BAT_WIDTH:
        x_speed = config.x_vel_shallow
    else:
        x_speed = config.x_vel_normal

    line = adjusted_line(ball.y, face, radius)
    overshoot = _time_past(ball.y, line)

    ball.x.vel = direction * x_speed * speedup
    ball.y.vel = -config.Y_VEL * speedup
    ball.x.pos = strike_x + ball.x.vel * overshoot
    ball.y.pos = line + ball.y.vel * overshoot
    return True


def corner_strike(
    x: AxisMotion, y: AxisMotion, corner: tuple[float, float], radius: float
) -> float | None:
    """
    Finds when a moving ball first touches a point.

    Solves |P(t) - corner| = radius for the segment P(t) swept this step.

    Returns:
        The entry parameter t in [0, 1], or None if the ball does not touch
        the point this step
    """
    dx = x.displacement
    dy = y.displacement
    a = dx * dx + dy * dy
    if a == 0:
        return None

    fx = x.old_pos - corner[0]
    fy = y.old_pos - corner[1]
    b = 2.0 * (fx * dx + fy * dy)
    c = fx * fx + fy * fy - radius * radius

    discriminant = b * b - 4.0 * a * c
    # Tangential contact is a graze, not a hit
    if discriminant <= 0:
        return None

    t = (-b - math.sqrt(discriminant)) / (2.0 * a)
    if not 0.0 <= t <= 1.0:
        return None
    return t


def rebound_bat_corner(ball: "Ball", bat_x: float, speedup: float) -> bool:
    """
    Bounces a falling ball off one of the two bat corners.

    Assumes the face hit has already been ruled out for this step.
    """
    config = ball.config
    bat_y = ball.court.bat_y

    if ball.y.vel <= 0 or ball.y.old_pos >= bat_y:
        return False

    left, right = ball.court.bat_corners(bat_x)
    for corner, direction in ((left, -1.0), (right, 1.0)):
        t = corner_strike(ball.x, ball.y, corner, config.BALL_RADIUS)
        if t is None:
            continue

        contact_y = ball.y.old_pos + t * ball.y.displacement
        if contact_y > bat_y:
            continue
        contact_x = ball.x.old_pos + t * ball.x.displacement

        remaining = (1.0 - t) * ball.y.displacement / ball.y.vel

        ball.x.vel = direction * config.x_vel_steep * speedup
        ball.y.vel = -config.Y_VEL * speedup
        ball.x.pos = contact_x + ball.x.vel * remaining
        ball.y.pos = contact_y + ball.y.vel * remaining
        return True

    return False
