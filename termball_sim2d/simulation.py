"""
simulation.py — Loop utama: update fisika → rasterisasi → packing → terminal.

Satu iterasi (satu frame):
    1. BallModel.update   (gravity, pantulan lantai, respawn)
    2. new_grid + draw_circle
    3. pack               (2 pixel vertikal per karakter)
    4. TerminalRenderer.draw + flip (cursor back + pacing)

Loop berjalan sampai di-interrupt (Ctrl+C) atau sampai --frames tercapai.
"""

import argparse
import logging
import sys

import numpy as np

from termball_sim2d.errors import ConfigError, DisplayEncodingError
from termball_sim2d.objects.scene import GlyphSet, SampleMode, SceneConfig
from termball_sim2d.physics.ball_model import BallModel
from termball_sim2d.render.rasterizer import draw_circle, new_grid
from termball_sim2d.render.subcell import pack
from termball_sim2d.render.terminal import TerminalRenderer

logger = logging.getLogger(__name__)


# ======================================================================
# Simulation
# ======================================================================

class Simulation:
    """Pemilik state simulasi: satu bola dan renderer terminal."""

    def __init__(self, cfg: SceneConfig, renderer: TerminalRenderer | None = None):
        self.cfg = cfg.validate()
        self.ball = BallModel.from_config(cfg)
        self.renderer = renderer
        self.frame = 0
        self.grid: np.ndarray | None = None

        logger.info(
            "Simulation initialized: grid=%dx%d fps=%d radius=%.2f sample=%s",
            cfg.width, cfg.height, cfg.fps, self.ball.radius, cfg.sample_mode.value)

    # ------------------------------------------------------------------

    def step(self) -> list[str]:
        """Advance satu frame dan kembalikan baris teks hasil packing."""
        cfg = self.cfg
        self.ball.update(cfg.restitution, cfg.respawn_vx, cfg.fps)

        self.grid = new_grid(cfg.width, cfg.height)
        draw_circle(self.ball.position, self.ball.radius, self.grid, cfg.sample_mode)
        self.frame += 1

        logger.debug("frame %d: %s", self.frame, self.ball.info_dict())
        return pack(self.grid, cfg.glyphs)

    def run(self, max_frames: int | None = None):
        """Jalankan loop frame. max_frames=None → tanpa batas."""
        if self.renderer is None:
            self.renderer = TerminalRenderer(self.cfg)
        renderer = self.renderer

        try:
            while max_frames is None or self.frame < max_frames:
                rows = self.step()
                renderer.draw(rows)
                renderer.flip(fps=self.cfg.fps)
        finally:
            renderer.close()
            logger.info("Simulation stopped after %d frames", self.frame)


# ======================================================================
# Entry point
# ======================================================================

def build_parser() -> argparse.ArgumentParser:
    defaults = SceneConfig()
    parser = argparse.ArgumentParser(
        prog="termball",
        description="Bouncing ball rendered to the terminal with half-height glyphs.")
    parser.add_argument('--width', type=int, default=defaults.width)
    parser.add_argument('--height', type=int, default=defaults.height)
    parser.add_argument('--fps', type=int, default=defaults.fps)
    parser.add_argument('--gravity', type=float, default=defaults.gravity)
    parser.add_argument('--restitution', type=float, default=defaults.restitution)
    parser.add_argument('--radius', type=float, default=None,
                        help="ball radius in pixels (default: height / 4)")
    parser.add_argument('--respawn-vx', type=float, default=defaults.respawn_vx)
    parser.add_argument('--sample', choices=[m.value for m in SampleMode],
                        default=defaults.sample_mode.value)
    parser.add_argument('--glyphs', choices=[g.name.lower() for g in GlyphSet],
                        default=defaults.glyphs.name.lower())
    parser.add_argument('-f', '--frames', type=int, default=None,
                        help="stop after N frames (default: run until interrupted)")
    parser.add_argument('-v', '--verbose', action='count', default=0)
    return parser


def setup_logging(verbosity: int):
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level, stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        sim = Simulation(SceneConfig.from_args(args))
    except ConfigError as e:
        parser.error(str(e))

    logger.info("Starting simulation...")
    try:
        sim.run(max_frames=args.frames)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except DisplayEncodingError as e:
        logger.critical("Cannot render frame: %s", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
