"""
subcell.py — Sub-cell packing: 2 pixel vertikal → 1 karakter terminal.

Untuk baris teks y dan kolom x:
    top    = grid[2y,     x]
    bottom = grid[2y + 1, x]
    i      = (top << 1) | bottom      → glyph table[i]

Urutan glyph table: kosong, bawah saja, atas saja, keduanya.
"""

import numpy as np

from termball_sim2d.errors import DisplayEncodingError, GridShapeError
from termball_sim2d.objects.scene import GlyphSet


def pack(grid: np.ndarray, glyphs: GlyphSet = GlyphSet.CLASSIC) -> list[str]:
    """Konversi pixel grid (height, width) ke height // 2 baris teks.

    Raises
    ------
    GridShapeError — grid bukan 2D atau tingginya ganjil.
    """
    if grid.ndim != 2:
        raise GridShapeError(f"pixel grid must be 2D, got shape {grid.shape}")
    height = grid.shape[0]
    if height % 2:
        raise GridShapeError(f"pixel grid height must be even, got {height}")

    top = (grid[0::2] != 0).astype(np.uint8)
    bottom = (grid[1::2] != 0).astype(np.uint8)
    index = (top << 1) | bottom

    table = np.array(glyphs.table)
    return ["".join(row) for row in table[index]]


def encode_rows(rows: list[str], encoding: str) -> list[bytes]:
    """Encode baris teks ke bytes untuk stream terminal.

    Raises
    ------
    DisplayEncodingError — ada glyph yang tidak bisa di-encode.
    """
    encoded = []
    for y, row in enumerate(rows):
        try:
            encoded.append(row.encode(encoding))
        except UnicodeEncodeError as e:
            raise DisplayEncodingError(
                f"display row {y} is not valid {encoding} text: {e}") from e
    return encoded
