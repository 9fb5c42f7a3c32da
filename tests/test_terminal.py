import io

import pytest

from termball_sim2d.errors import DisplayEncodingError
from termball_sim2d.objects.scene import SceneConfig
from termball_sim2d.render.terminal import TerminalRenderer, cursor_back


class FakeClock:
    def __init__(self):
        self.ticks = []

    def tick(self, fps=0):
        self.ticks.append(fps)
        return 0


def make_renderer(stream=None, **cfg_kwargs):
    cfg = SceneConfig(**cfg_kwargs)
    stream = stream if stream is not None else io.StringIO()
    return TerminalRenderer(cfg, stream=stream, clock=FakeClock())


def test_cursor_back_sequence():
    assert cursor_back(128, 16) == "\x1b[128D\x1b[16A"


def test_draw_and_flip():
    r = make_renderer(width=4, height=4)
    r.draw(["ab  ", "  cd"])
    r.flip(fps=30)

    assert r.stream.getvalue() == "ab  \n  cd\n\x1b[4D\x1b[2A"
    assert r.clock.ticks == [30]
    assert r.frames_drawn == 1


def test_close_moves_below_last_frame():
    r = make_renderer(width=4, height=4)
    r.draw(["    ", "    "])
    r.flip()
    r.close()
    assert r.stream.getvalue().endswith("\x1b[2A\x1b[2B\n")


def test_close_without_frames_writes_nothing():
    r = make_renderer()
    r.close()
    assert r.stream.getvalue() == ""


def test_unencodable_frame_is_not_written():
    stream = io.TextIOWrapper(io.BytesIO(), encoding="ascii")
    r = make_renderer(stream=stream, width=2, height=2)
    with pytest.raises(DisplayEncodingError):
        r.draw(["█ "])
    assert r.frames_drawn == 0
    stream.flush()
    assert stream.buffer.getvalue() == b""
