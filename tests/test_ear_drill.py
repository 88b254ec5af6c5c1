import pytest

try:
    import ear_drill
except (ImportError, OSError) as e:  # sounddevice needs the PortAudio library
    pytest.skip(f"sounddevice unavailable: {e}", allow_module_level=True)


def _raise(exc):
    def run(self, rounds=None):
        raise exc
    return run


@pytest.mark.parametrize("exc", [EOFError(), KeyboardInterrupt()])
def test_quitting_prints_scoreboard(exc, monkeypatch, capsys):
    monkeypatch.setattr(ear_drill.Drill, "run", _raise(exc))

    assert ear_drill.main(["--rounds", "1"]) is None

    assert "Final Score" in capsys.readouterr().out


def test_audio_error_exits_with_status_1(monkeypatch, capsys):
    monkeypatch.setattr(ear_drill.Drill, "run",
                        _raise(ear_drill.sd.PortAudioError("no output device")))

    with pytest.raises(SystemExit) as exc:
        ear_drill.main([])

    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert "Audio error: no output device" in out
    assert "Final Score" not in out


def test_play_note_blocks_until_done(monkeypatch):
    calls = []
    monkeypatch.setattr(ear_drill.sd, "play", lambda data, rate: calls.append(("play", len(data), rate)))
    monkeypatch.setattr(ear_drill.sd, "wait", lambda: calls.append(("wait",)))

    ear_drill.play_note(9, 0.5)

    assert calls == [("play", ear_drill.SAMPLE_RATE // 2, ear_drill.SAMPLE_RATE), ("wait",)]
