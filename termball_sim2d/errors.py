"""
errors.py — Exception hierarchy termball_sim2d.
"""


class TermballError(Exception):
    """Base class semua error termball_sim2d."""


class ConfigError(TermballError, ValueError):
    """Konfigurasi scene tidak valid (ukuran grid, fps, radius, ...)."""


class GridShapeError(TermballError, ValueError):
    """Pixel grid tidak bisa di-pack (tinggi ganjil, bukan 2D, ...)."""


class DisplayEncodingError(TermballError, UnicodeError):
    """Baris display tidak bisa di-encode ke encoding terminal.

    Fatal: berarti glyph table tidak cocok dengan terminal, bukan
    kondisi sementara.
    """
