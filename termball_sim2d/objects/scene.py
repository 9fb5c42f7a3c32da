"""
scene.py — Konfigurasi scene: ukuran grid, frame rate, dan konstanta fisika.

Semua koordinat dalam satuan sel pixel grid:
    Origin (0, 0) = pojok kiri atas, X → kanan, Y → bawah
    Lantai berada di Y = height

Default mengikuti konfigurasi yang diamati: grid 128×32, 30 FPS,
gravity 100, restitution -0.65, radius = height / 4.
"""

import math
from dataclasses import dataclass
from enum import Enum

from termball_sim2d.errors import ConfigError


class SampleMode(Enum):
    """Titik sampling tiap sel saat rasterisasi lingkaran."""

    HALF_X = "half-x"    # sampling di (x + 0.5, y), perilaku asli
    CENTER = "center"    # sampling simetris di (x + 0.5, y + 0.5)

    @property
    def offset(self) -> tuple[float, float]:
        if self is SampleMode.CENTER:
            return (0.5, 0.5)
        return (0.5, 0.0)


class GlyphSet(Enum):
    """Tabel 4 glyph, urutan: kosong, bawah saja, atas saja, keduanya."""

    CLASSIC = " _^█"
    ASCII = " _^C"
    BLOCK = " ▄▀█"

    @property
    def table(self) -> tuple[str, str, str, str]:
        return tuple(self.value)


# ======================================================================
# SceneConfig
# ======================================================================

@dataclass
class SceneConfig:
    """Konfigurasi satu scene bola memantul."""

    # Pixel grid
    width: int = 128
    height: int = 32

    # Timing
    fps: int = 30

    # Fisika
    gravity: float = 100.0
    restitution: float = -0.65          # negatif: balik arah + redam
    radius: float | None = None         # None → height / 4
    respawn_vx: float = 50.0

    # Rendering
    sample_mode: SampleMode = SampleMode.HALF_X
    glyphs: GlyphSet = GlyphSet.CLASSIC

    # ------------------------------------------------------------------

    @property
    def ball_radius(self) -> float:
        if self.radius is None:
            return self.height / 4
        return self.radius

    @property
    def rows(self) -> int:
        """Jumlah baris teks hasil sub-cell packing."""
        return self.height // 2

    def validate(self) -> 'SceneConfig':
        """Cek invariant konfigurasi. Raise ConfigError jika ada yang salah.

        Returns
        -------
        SceneConfig — self, supaya bisa di-chain.
        """
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(
                f"grid size must be positive, got {self.width}x{self.height}")
        if self.height % 2:
            raise ConfigError(
                f"grid height must be even for sub-cell packing, got {self.height}")
        if self.fps <= 0:
            raise ConfigError(f"fps must be positive, got {self.fps}")
        if not math.isfinite(self.ball_radius) or self.ball_radius <= 0:
            raise ConfigError(f"radius must be positive, got {self.ball_radius}")
        for name in ("gravity", "restitution", "respawn_vx"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ConfigError(f"{name} must be finite, got {value}")
        if not -1.0 <= self.restitution <= 0.0:
            raise ConfigError(
                f"restitution must be within [-1, 0], got {self.restitution}")
        return self

    @classmethod
    def from_args(cls, args) -> 'SceneConfig':
        """Bangun config dari hasil argparse (lihat simulation.build_parser)."""
        return cls(
            width=args.width,
            height=args.height,
            fps=args.fps,
            gravity=args.gravity,
            restitution=args.restitution,
            radius=args.radius,
            respawn_vx=args.respawn_vx,
            sample_mode=SampleMode(args.sample),
            glyphs=GlyphSet[args.glyphs.upper()],
        )
