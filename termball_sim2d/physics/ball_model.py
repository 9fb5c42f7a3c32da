"""
ball_model.py — Model fisika bola (pure physics, tanpa terminal I/O).

Semua state dalam koordinat pixel grid:
    position : pusat bola (sel), Y → bawah
    velocity : sel / detik
    radius   : radius bola (sel)
    gravity  : percepatan ke bawah (sel / detik²)

Setiap update:
    1. Integrasi semi-implicit Euler
    2. Pantulan lantai  : y > height - r  →  clamp, vy *= restitution
    3. Respawn kanan    : x >= width + 3r →  kembali ke (-r, -r)

Tidak ada pantulan samping / atas; bola yang keluar ke kiri atau atas
tetap bergerak.
"""

import logging

from termball_sim2d.physics.vector import FloatPoint

logger = logging.getLogger(__name__)


class BallModel:
    """Physics model untuk satu bola dalam area width × height."""

    def __init__(self, radius: float, gravity: float,
                 width: int, height: int,
                 position: FloatPoint | None = None,
                 velocity: FloatPoint | None = None):
        """
        Parameters
        ----------
        radius : float
            Radius bola (sel).
        gravity : float
            Percepatan gravitasi (sel/s²), positif = ke bawah.
        width, height : int
            Ukuran area simulasi (sama dengan pixel grid).
        position : FloatPoint | None
            Posisi awal. Default (-radius, -radius), tepat di luar pojok kiri atas.
        velocity : FloatPoint | None
            Velocity awal. Default diam.
        """
        self.radius = radius
        self.gravity = gravity
        self.width = width
        self.height = height

        if position is None:
            position = FloatPoint.splat(-radius)
        if velocity is None:
            velocity = FloatPoint(0.0, 0.0)
        self.position = position
        self.velocity = velocity

        self.respawn_count = 0

    @classmethod
    def from_config(cls, cfg) -> 'BallModel':
        """Bola di titik respawn dengan velocity respawn dari SceneConfig."""
        r = cfg.ball_radius
        return cls(radius=r, gravity=cfg.gravity,
                   width=cfg.width, height=cfg.height,
                   velocity=FloatPoint(cfg.respawn_vx, 0.0))

    # ------------------------------------------------------------------
    # Physics update
    # ------------------------------------------------------------------

    @property
    def floor_y(self) -> float:
        """Posisi Y maksimum pusat bola (bola menyentuh lantai)."""
        return self.height - self.radius

    @property
    def exit_x(self) -> float:
        """Bola di-respawn setelah pusatnya melewati X ini."""
        return self.width + self.radius + self.radius * 2

    def update(self, restitution: float, respawn_vx: float, fps: int):
        """Advance state satu frame.

        Parameters
        ----------
        restitution : float  — pengali vy saat memantul (negatif, |k| < 1)
        respawn_vx : float   — vx setelah respawn (sel/s)
        fps : int            — frame rate; dt = 1 / fps
        """
        dt = 1 / fps
        step = FloatPoint.splat(dt)

        self.velocity = self.velocity.add(FloatPoint(0.0, self.gravity * dt))
        self.position = self.position.add(self.velocity.mul(step))

        if self.position.y > self.floor_y:
            self.position = FloatPoint(self.position.x, self.floor_y)
            self.velocity = FloatPoint(self.velocity.x, self.velocity.y * restitution)

        if self.position.x >= self.exit_x:
            self.respawn(respawn_vx)

    def respawn(self, respawn_vx: float):
        """Pindahkan bola ke luar pojok kiri atas dan lempar ke kanan."""
        self.position = FloatPoint.splat(-self.radius)
        self.velocity = FloatPoint(respawn_vx, 0.0)
        self.respawn_count += 1
        logger.info("Ball respawned (#%d), vx=%.2f", self.respawn_count, respawn_vx)

    # ------------------------------------------------------------------

    def info_dict(self) -> dict:
        return {
            "x": self.position.x,
            "y": self.position.y,
            "vx": self.velocity.x,
            "vy": self.velocity.y,
            "radius": self.radius,
            "respawns": self.respawn_count,
        }
