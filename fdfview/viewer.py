"""The wireframe viewer window and its command-line entry point."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Any, Optional, Sequence

from fdfview.heightmap import HeightMap, MapError, get_map_dimensions, is_valid_file
from fdfview.image import COLOR_BLACK, COLOR_WHITE, Image
from fdfview.projection import (
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
    isometric_projection,
)


class Key(IntEnum):
    """Key codes the viewer understands."""

    ESC = 53
    SPACE = 49
    PLUS = 24
    MINUS = 27
    LEFT = 123
    RIGHT = 124
    UP = 126
    DOWN = 125


class MouseButton(IntEnum):
    """Mouse button codes."""

    LEFT_CLICK = 1
    RIGHT_CLICK = 2
    SCROLL_UP = 4
    SCROLL_DOWN = 5


class GraphicsError(RuntimeError):
    """Raised when the window cannot be created."""


class Viewer:
    """Shows a height map's projected points in a window."""

    def __init__(self, height_map: HeightMap, title: str = WINDOW_TITLE) -> None:
        self.height_map = height_map
        self.title = title
        self.image = Image(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.closed = False
        self._root: Any = None
        self._photo: Any = None

    def render(self) -> Image:
        """Draw every map point, projected isometrically, onto the image."""
        self.image.clear(COLOR_BLACK)
        for y, row in enumerate(self.height_map.z_matrix):
            for x in range(len(row)):
                point = isometric_projection(x, y, self.height_map)
                self.image.put_pixel(point.x, point.y, COLOR_WHITE)
        return self.image

    def handle_keypress(self, key: int) -> bool:
        """React to a key; Escape closes the viewer. True when it closed."""
        if key == Key.ESC:
            self.close()
            return True
        return False

    def close(self) -> None:
        """Destroy the window, if open, and mark the viewer closed."""
        if self._root is not None:
            root, self._root = self._root, None
            root.destroy()
        self.closed = True

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        self._init_graphics()
        self._loop()

    def _init_graphics(self) -> None:
        try:
            import tkinter
        except ImportError as exc:
            raise GraphicsError("no windowing toolkit available") from exc
        self.render()
        try:
            root = tkinter.Tk()
            root.title(self.title)
            root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
            photo = tkinter.PhotoImage(master=root, data=self.image.to_ppm(), format="PPM")
            tkinter.Label(root, image=photo, borderwidth=0).pack()
        except tkinter.TclError as exc:
            raise GraphicsError(str(exc)) from exc
        root.bind("<Key>", self._on_key)
        root.protocol("WM_DELETE_WINDOW", self.close)
        self._root = root
        self._photo = photo
        self.closed = False

    def _on_key(self, event: Any) -> None:
        if getattr(event, "keysym", None) == "Escape":
            self.handle_keypress(Key.ESC)
        else:
            self.handle_keypress(getattr(event, "keycode", -1))

    def _loop(self) -> None:
        if self._root is not None:
            self._root.mainloop()


def usage() -> None:
    """Print how to call the program."""
    print("Usage: fdf <filename.fdf>")


def _error(message: str) -> int:
    print(f"Error: {message}")
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the map named on the command line and show it; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        usage()
        return 1
    path = args[0]
    if not is_valid_file(path):
        return _error("Cannot read file")
    print(f"✓ File {path} is valid!")

    try:
        width, height = get_map_dimensions(path)
    except MapError:
        return _error("Failed to get dimensions")
    print(f"✓ Map dimensions: {width}x{height}")

    try:
        height_map = HeightMap.allocate(width, height)
    except (ValueError, MemoryError):
        return _error("Failed to allocate memory")
    print(f"✓ Memory allocated for {width}x{height} map")
    print(f"✓ Ready to store {width * height} total numbers")

    try:
        height_map.load(path)
    except MapError:
        pass
    else:
        print("✓ Map data loaded successfully")
        height_map.compute_stats()
        print(
            f"✓ Map statistics: Z-range {height_map.z_min} to {height_map.z_max} "
            f"(range: {height_map.z_range})"
        )

    viewer = Viewer(height_map)
    try:
        viewer._init_graphics()
    except GraphicsError:
        return _error("Failed to initialize graphics")
    print("✓ Graphics initialized successfully")
    viewer._loop()
    return 0


if __name__ == "__main__":
    sys.exit(main())