import tkinter
from unittest.mock import patch

from fdfview.heightmap import HeightMap
from fdfview.image import COLOR_WHITE
from fdfview.projection import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from fdfview.viewer import Key, Viewer, main, usage


def _write_map(tmp_path, text):
    path = tmp_path / "map.fdf"
    path.write_text(text, encoding="utf-8")
    return path


def test_usage_text(capsys):
    usage()
    assert capsys.readouterr().out == "Usage: fdf <filename.fdf>\n"


def test_main_without_file_prints_usage(capsys):
    assert main([]) == 1
    assert "Usage: fdf <filename.fdf>" in capsys.readouterr().out


def test_main_with_too_many_arguments(capsys):
    assert main(["a.fdf", "b.fdf"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_unreadable_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.fdf")]) == 1
    assert "Error: Cannot read file" in capsys.readouterr().out


def test_escape_closes_viewer():
    viewer = Viewer(HeightMap.allocate(1, 1))
    assert viewer.handle_keypress(Key.SPACE) is False
    assert viewer.closed is False
    assert viewer.handle_keypress(53) is True
    assert viewer.closed is True


def test_render_marks_projected_origin():
    viewer = Viewer(HeightMap.allocate(1, 1))
    image = viewer.render()
    assert image.get_pixel(WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2) == COLOR_WHITE
    assert image.get_pixel(0, 0) == 0x000000


def test_render_clears_previous_drawing():
    viewer = Viewer(HeightMap.allocate(1, 1))
    viewer.image.put_pixel(5, 5, COLOR_WHITE)
    viewer.render()
    assert viewer.image.get_pixel(5, 5) == 0x000000


def test_main_reports_graphics_failure(tmp_path, capsys):
    path = _write_map(tmp_path, "0 1 2\n3 4 5\n")
    with patch("tkinter.Tk", side_effect=tkinter.TclError("no display")):
        status = main([str(path)])
    out = capsys.readouterr().out
    assert status == 1
    assert f"✓ File {path} is valid!" in out
    assert "✓ Map dimensions: 3x2" in out
    assert "✓ Map data loaded successfully" in out
    assert "Error: Failed to initialize graphics" in out


def test_main_opens_window_and_runs_loop(tmp_path, capsys):
    path = _write_map(tmp_path, "0 0\n0 5\n")
    with patch("tkinter.Tk") as tk_cls, patch("tkinter.PhotoImage") as photo_cls, \
            patch("tkinter.Label"):
        status = main([str(path)])
    out = capsys.readouterr().out
    assert status == 0
    root = tk_cls.return_value
    root.title.assert_called_once_with(WINDOW_TITLE)
    root.mainloop.assert_called_once_with()
    assert photo_cls.call_args.kwargs["data"].startswith(b"P6\n")
    assert "Z-range 0 to 5 (range: 5)" in out
    assert "✓ Graphics initialized successfully" in out


def test_escape_destroys_open_window():
    viewer = Viewer(HeightMap.allocate(1, 1))
    with patch("tkinter.Tk") as tk_cls, patch("tkinter.PhotoImage"), patch("tkinter.Label"):
        viewer.run()
        assert viewer.handle_keypress(Key.ESC) is True
    tk_cls.return_value.destroy.assert_called_once_with()
    assert viewer.closed is True