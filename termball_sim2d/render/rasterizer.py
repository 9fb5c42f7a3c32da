"""
rasterizer.py — Rasterisasi lingkaran penuh ke binary pixel grid.

Pixel grid = numpy array shape (height, width), dtype uint8, row-major:
    grid[y, x] == BACK (0) → kosong
    grid[y, x] == FORE (1) → terisi
"""

import numpy as np

from termball_sim2d.objects.scene import SampleMode
from termball_sim2d.physics.vector import FloatPoint, IntPoint

BACK = 0
FORE = 1


def new_grid(width: int, height: int) -> np.ndarray:
    """Alokasi pixel grid baru, semua BACK."""
    return np.full((height, width), BACK, dtype=np.uint8)


def bounding_box(center: FloatPoint, radius: float) -> tuple[IntPoint, IntPoint]:
    """Bounding box inklusif (sel) yang memuat seluruh lingkaran."""
    extent = FloatPoint.splat(radius)
    begin = center.sub(extent).floor().to_int()
    end = center.add(extent).ceil().to_int()
    return begin, end


def draw_circle(center: FloatPoint, radius: float, grid: np.ndarray,
                sample_mode: SampleMode = SampleMode.HALF_X) -> int:
    """Tandai FORE setiap sel yang titik sampling-nya ada di dalam lingkaran.

    Sel di luar grid dilewati (bounding box boleh melewati tepi grid).
    Sel tidak pernah di-reset ke BACK; caller membuat grid baru tiap frame.
    Pusat non-finite (inf / NaN) tidak menggambar apa pun.

    Parameters
    ----------
    center : FloatPoint   — pusat lingkaran (sel)
    radius : float        — radius (sel)
    grid : np.ndarray     — pixel grid (height, width), dimodifikasi in-place
    sample_mode : SampleMode
        HALF_X: sampling di (x + 0.5, y). Radius 0 tidak menggambar apa pun.
        CENTER: sampling di (x + 0.5, y + 0.5).

    Returns
    -------
    int — jumlah sel yang ditandai FORE (termasuk yang sudah FORE sebelumnya).
    """
    height, width = grid.shape
    offset = FloatPoint(*sample_mode.offset)
    r2 = radius * radius
    begin, end = bounding_box(center, radius)

    # clip bounding box ke grid
    x_range = range(max(begin.x, 0), min(end.x, width - 1) + 1)
    y_range = range(max(begin.y, 0), min(end.y, height - 1) + 1)

    marked = 0
    for y in y_range:
        for x in x_range:
            sample = IntPoint(x, y).to_float().add(offset)
            if center.sub(sample).squared_length() <= r2:
                grid[y, x] = FORE
                marked += 1
    return marked
