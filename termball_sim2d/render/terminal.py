"""
terminal.py — Output frame ke terminal dengan redraw in-place.

Protokol per frame:
    1. Tulis height // 2 baris teks (hasil sub-cell packing)
    2. ESC[<width>D  — kursor ke kiri sejauh lebar grid
    3. ESC[<rows>A   — kursor naik sejumlah baris yang ditulis
    4. Tunggu sampai frame berikutnya (pygame Clock)

Tidak memakai alternate screen buffer dan tidak membaca input.
"""

import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from termball_sim2d.objects.scene import SceneConfig  # noqa: E402
from termball_sim2d.render.subcell import encode_rows  # noqa: E402

CSI = "\x1b["


def cursor_back(width: int, rows: int) -> str:
    """Escape sequence untuk kembali ke pojok kiri atas frame."""
    return f"{CSI}{width}D{CSI}{rows}A"


class TerminalRenderer:
    """Tulis frame teks ke stream terminal dan jaga frame rate."""

    def __init__(self, cfg: SceneConfig, stream=None, clock=None):
        """
        Parameters
        ----------
        cfg : SceneConfig
        stream : text stream | None
            Tujuan output. Default sys.stdout.
        clock : pygame.time.Clock | None
            Pacing frame. Default Clock baru.
        """
        self.cfg = cfg
        self.stream = stream if stream is not None else sys.stdout
        self.encoding = getattr(self.stream, "encoding", None) or "utf-8"
        self.clock = clock if clock is not None else pygame.time.Clock()
        self.frames_drawn = 0

    # ==================================================================
    # Public draw API
    # ==================================================================

    def draw(self, rows: list[str]):
        """Tulis satu frame.

        Raises
        ------
        DisplayEncodingError — glyph tidak bisa di-encode ke encoding stream.
        """
        # cek encoding sebelum menulis; frame yang gagal tidak ditulis sebagian
        encode_rows(rows, self.encoding)
        for row in rows:
            self.stream.write(row)
            self.stream.write("\n")
        self.frames_drawn += 1

    def back(self):
        self.stream.write(cursor_back(self.cfg.width, self.cfg.rows))

    def flip(self, fps: int = 30):
        """Kembalikan kursor, flush, lalu tunggu sampai slot frame berikutnya."""
        self.back()
        self.stream.flush()
        self.clock.tick(fps)

    def close(self):
        """Pindahkan kursor ke bawah frame terakhir supaya prompt tidak menimpa."""
        if self.frames_drawn:
            self.stream.write(f"{CSI}{self.cfg.rows}B\n")
            self.stream.flush()
