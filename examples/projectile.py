#!/usr/bin/env python3
"""Simulate a projectile under gravity and wind.

Fires a projectile from (0, 1, 0) along the normalized (1, 1, 0) direction
and advances it one tick at a time until it reaches the ground, printing
each position. Optionally plots the trajectory onto a canvas and saves it
as a PPM image.

Usage:
    python -m examples.projectile [options]

Options:
    --speed SPEED       Initial speed multiplier (default: 1.0)
    --gravity G         Downward acceleration per tick (default: 0.1)
    --wind W            Wind acceleration along -x per tick (default: 0.01)
    --ppm PATH          Plot the trajectory and save it to PATH
    --width WIDTH       Plot width in pixels (default: 900)
    --height HEIGHT     Plot height in pixels (default: 550)
    --quiet             Suppress per-tick output

Example:
    python -m examples.projectile --speed 11.25 --ppm projectile.ppm
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from src.python.core.tuples import Tuple, new_colour, new_point, new_vector

# Trajectory colour on the plot
TRAJECTORY_COLOUR = (1.0, 0.7, 0.2)


@dataclass(frozen=True)
class Environment:
    """Constant forces applied every tick."""

    gravity: Tuple
    wind: Tuple


@dataclass(frozen=True)
class Projectile:
    """A position (point) and velocity (vector)."""

    position: Tuple
    velocity: Tuple


def tick(env: Environment, proj: Projectile) -> Projectile:
    """Advance the projectile by one step.

    Args:
        env: The forces acting on the projectile.
        proj: The current projectile state.

    Returns:
        The projectile moved by its velocity, with the velocity updated by
        gravity and wind.
    """
    return Projectile(
        position=proj.position + proj.velocity,
        velocity=proj.velocity + env.gravity + env.wind,
    )


def simulate(
    env: Environment,
    proj: Projectile,
    max_ticks: int = 100_000,
) -> tuple[list[Tuple], int]:
    """Run the simulation until the projectile is at or below the ground.

    Args:
        env: The forces acting on the projectile.
        proj: The starting projectile state.
        max_ticks: Safety limit for projectiles that never land.

    Returns:
        Tuple of (positions visited before landing, tick count).

    Raises:
        RuntimeError: If the projectile has not landed after max_ticks.
    """
    positions: list[Tuple] = []
    ticks = 0
    while proj.position.y > 0.0:
        if ticks >= max_ticks:
            raise RuntimeError(f"Projectile still airborne after {max_ticks} ticks")
        positions.append(proj.position)
        proj = tick(env, proj)
        ticks += 1
    return positions, ticks


def plot_trajectory(positions: list[Tuple], width: int, height: int):
    """Plot positions onto a canvas, y axis pointing up.

    Positions outside the canvas are skipped.

    Returns:
        The canvas with one pixel set per visible position.
    """
    from src.python.canvas import Canvas

    canvas = Canvas(height, width)
    colour = new_colour(*TRAJECTORY_COLOUR)
    for position in positions:
        x = int(round(position.x))
        y = height - int(round(position.y))
        if 0 <= x < width and 0 <= y < height:
            canvas.set_pixel(x, y, colour)
    return canvas


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Simulate a projectile under gravity and wind.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=1.0,
        help="Initial speed multiplier (default: 1.0)",
    )
    parser.add_argument(
        "--gravity",
        type=float,
        default=0.1,
        help="Downward acceleration per tick (default: 0.1)",
    )
    parser.add_argument(
        "--wind",
        type=float,
        default=0.01,
        help="Wind acceleration along -x per tick (default: 0.01)",
    )
    parser.add_argument(
        "--ppm",
        type=str,
        default=None,
        help="Plot the trajectory and save it to this PPM file",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=900,
        help="Plot width in pixels (default: 900)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=550,
        help="Plot height in pixels (default: 550)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress per-tick output",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    proj = Projectile(
        position=new_point(0.0, 1.0, 0.0),
        velocity=new_vector(1.0, 1.0, 0.0).normalize() * args.speed,
    )
    env = Environment(
        gravity=new_vector(0.0, -args.gravity, 0.0),
        wind=new_vector(-args.wind, 0.0, 0.0),
    )

    try:
        positions, ticks = simulate(env, proj)

        if not args.quiet:
            for position in positions:
                print(f"Current position {position.x} {position.y} {position.z}")
        print(f"It took {ticks} ticks to hit the ground")

        if args.ppm is not None:
            from src.python.preview.export import save_ppm

            canvas = plot_trajectory(positions, args.width, args.height)
            output_file = save_ppm(canvas, Path(args.ppm))
            print(f"Saved to: {output_file.absolute()}")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
