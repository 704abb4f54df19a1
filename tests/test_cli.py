import pytest

from ray_canvas.cli import main

from .utils import make_settings


def _run(argv: list[str], **overrides) -> int:
    return main(["--log-level", "CRITICAL", *argv], settings=make_settings(**overrides))


def test_blank_canvas_to_stdout(capsys) -> None:
    assert _run(["blank"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("P3\n5 3\n255\n")
    assert out.splitlines()[3] == "0 0 0 0 0 0 0 0 0 0 0 0 0 0 0"


def test_blank_canvas_with_color(capsys) -> None:
    assert _run(["blank", "--width", "2", "--height", "1", "--color", "1.5", "0.5", "-1"]) == 0
    assert capsys.readouterr().out == "P3\n2 1\n255\n255 128 0 255 128 0\n"


def test_colormap_to_file(tmp_path, capsys) -> None:
    target = tmp_path / "colormap.ppm"
    assert _run(["--output", str(target), "colormap", "--width", "30", "--height", "4"]) == 0

    lines = target.read_text(encoding="ascii").splitlines()
    assert lines[:3] == ["P3", "30 4", "255"]
    assert all(len(line) <= 70 for line in lines[3:])
    assert "Wrote 30x4 canvas" in capsys.readouterr().out


def test_projectile_respects_line_width(capsys) -> None:
    assert _run(["--line-width", "20", "projectile", "--width", "12", "--height", "6"]) == 0
    body = capsys.readouterr().out.splitlines()[3:]
    assert body
    assert all(len(line) <= 20 for line in body)


def test_settings_line_width_is_default(capsys) -> None:
    assert _run(["blank", "--width", "10", "--height", "1"], PPM_LINE_WIDTH=12) == 0
    body = capsys.readouterr().out.splitlines()[3:]
    assert all(len(line) <= 12 for line in body)
    assert len(body) == 5


def test_invalid_dimensions_exit_with_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run(["blank", "--width", "0"])
    assert excinfo.value.code == 2
    assert "positive integer" in capsys.readouterr().err


def test_unwritable_output_returns_error(tmp_path, capsys) -> None:
    target = tmp_path / "missing" / "out.ppm"
    assert _run(["-o", str(target), "blank"]) == 1
    assert "Could not write" in capsys.readouterr().err
