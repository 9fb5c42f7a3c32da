import io

import numpy as np
import pytest

from termball_sim2d import simulation as sim_mod
from termball_sim2d.errors import ConfigError, DisplayEncodingError
from termball_sim2d.objects.scene import GlyphSet, SampleMode, SceneConfig
from termball_sim2d.physics.vector import FloatPoint
from termball_sim2d.render.terminal import TerminalRenderer
from termball_sim2d.simulation import Simulation, main


class FakeClock:
    def __init__(self):
        self.ticks = []

    def tick(self, fps=0):
        self.ticks.append(fps)
        return 0


def test_first_frame_with_defaults():
    sim = Simulation(SceneConfig())
    rows = sim.step()

    assert len(rows) == 16
    assert all(len(row) == 128 for row in rows)
    assert set("".join(rows)) <= set(" _^█")
    assert sim.grid.shape == (32, 128)
    assert sim.ball.velocity.y == pytest.approx(100.0 / 30)
    assert sim.ball.position.x == pytest.approx(-8.0 + 50.0 / 30)


def test_ball_becomes_visible():
    sim = Simulation(SceneConfig())
    for _ in range(30):
        rows = sim.step()
    assert np.count_nonzero(sim.grid) > 0
    assert any(ch != " " for ch in "".join(rows))


def test_loop_respawns_ball():
    sim = Simulation(SceneConfig())
    # 152 + 8 cells at 50 cells/s
    for _ in range(100):
        sim.step()
    assert sim.ball.respawn_count == 1
    assert sim.ball.position.x < 152.0


def test_invalid_config_raises():
    with pytest.raises(ConfigError):
        Simulation(SceneConfig(height=33))


def test_run_bounded_frames():
    cfg = SceneConfig()
    stream = io.StringIO()
    clock = FakeClock()
    sim = Simulation(cfg, renderer=TerminalRenderer(cfg, stream=stream, clock=clock))
    sim.run(max_frames=3)

    out = stream.getvalue()
    assert sim.frame == 3
    assert clock.ticks == [30, 30, 30]
    assert out.count("\x1b[128D\x1b[16A") == 3
    assert out.endswith("\x1b[16B\n")


def test_symmetric_sampling_is_used_when_configured():
    cfg = SceneConfig(sample_mode=SampleMode.CENTER, gravity=0.0, respawn_vx=0.0)
    sim = Simulation(cfg)
    sim.ball.position = FloatPoint(10.0, 10.0)
    sim.ball.radius = 1.0
    sim.step()
    assert np.count_nonzero(sim.grid) == 4


def test_main_runs_frames(capsys):
    assert main(["--frames", "2", "--glyphs", "ascii", "--fps", "120"]) == 0
    out = capsys.readouterr().out
    assert out.count("\x1b[16A") == 2


def test_main_rejects_bad_config(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--height", "31"])
    assert excinfo.value.code == 2
    assert "even" in capsys.readouterr().err


def test_main_encoding_failure_exits_1(monkeypatch):
    def boom(self, max_frames=None):
        raise DisplayEncodingError("display row 0 is not valid ascii text")

    monkeypatch.setattr(sim_mod.Simulation, "run", boom)
    assert main(["--frames", "1"]) == 1


def test_main_keyboard_interrupt_exits_0(monkeypatch):
    def interrupted(self, max_frames=None):
        raise KeyboardInterrupt

    monkeypatch.setattr(sim_mod.Simulation, "run", interrupted)
    assert main([]) == 0


def test_glyph_set_reaches_output():
    cfg = SceneConfig(glyphs=GlyphSet.ASCII)
    sim = Simulation(cfg)
    for _ in range(30):
        rows = sim.step()
    assert "█" not in "".join(rows)
    assert set("".join(rows)) <= set(" _^C")


def test_non_finite_ball_state_renders_blank_frames():
    sim = Simulation(SceneConfig(respawn_vx=0.0))
    sim.ball.position = FloatPoint(-16.0, -np.inf)
    sim.ball.velocity = FloatPoint(0.0, -np.inf)
    for _ in range(3):
        rows = sim.step()
    assert not sim.grid.any()
    assert set("".join(rows)) == {" "}


def test_main_rejects_out_of_range_restitution(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--restitution", "-50"])
    assert excinfo.value.code == 2
    assert "restitution" in capsys.readouterr().err
