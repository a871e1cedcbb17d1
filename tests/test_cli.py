import io
import subprocess

import pytest

from rarl.cli import main


class _Stdin(io.BytesIO):
    def __init__(self, sink):
        super().__init__()
        self._sink = sink

    def close(self):
        if not self.closed:
            self._sink.append(self.getvalue())
        super().close()


class _FakeProcess:
    exit_code = 0
    instances = []

    def __init__(self, args, **kwargs):
        self.args = args
        self.kwargs = kwargs
        self.written = []
        self.stdin = _Stdin(self.written)
        _FakeProcess.instances.append(self)

    def wait(self, timeout=None):
        return self.exit_code


@pytest.fixture
def fake_ffmpeg(monkeypatch):
    _FakeProcess.instances = []
    _FakeProcess.exit_code = 0
    monkeypatch.setattr(subprocess, "Popen", _FakeProcess)
    return _FakeProcess


WIDTH, HEIGHT, FPS, DURATION = 200, 50, 2, 6


def _argv(tmp_path):
    return [
        "--duration", str(DURATION),
        "--fps", str(FPS),
        "--width", str(WIDTH),
        "--height", str(HEIGHT),
        "--font-size", "12",
        "--output", str(tmp_path / "title.mp4"),
    ]


def _frames(process):
    data = process.written[0]
    size = WIDTH * HEIGHT * 4
    return [data[start:start + size] for start in range(0, len(data), size)]


def test_main_renders_every_frame(fake_ffmpeg, tmp_path, capsys):
    assert main(_argv(tmp_path)) == 0
    process = fake_ffmpeg.instances[0]
    frames = _frames(process)
    assert len(frames) == DURATION * FPS
    assert all(len(frame) == WIDTH * HEIGHT * 4 for frame in frames)
    assert process.args[-1] == str(tmp_path / "title.mp4")
    out = capsys.readouterr().out
    assert f"Frame: {DURATION * FPS}/{DURATION * FPS}" in out
    assert "Finished" in out


def test_title_hidden_before_reveal_and_shown_after(fake_ffmpeg, tmp_path):
    assert main(_argv(tmp_path)) == 0
    frames = _frames(fake_ffmpeg.instances[0])
    assert len(frames) == DURATION * FPS
    assert frames[0] == bytes((0, 0, 0, 255)) * (WIDTH * HEIGHT)
    assert max(frames[-1][0::4]) > 0


def test_main_reports_encoder_failure(fake_ffmpeg, tmp_path, capsys):
    fake_ffmpeg.exit_code = 1
    assert main(_argv(tmp_path)) == 1
    assert "Finished" in capsys.readouterr().out


def test_main_rejects_short_duration(fake_ffmpeg, tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["--duration", "3", "--output", str(tmp_path / "x.mp4")])
    assert info.value.code == 2
    assert fake_ffmpeg.instances == []