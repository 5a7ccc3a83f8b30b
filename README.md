# fdfview

A small viewer for FDF height maps. An FDF file is plain text: each line is a
row of the map, and each space-separated number on it is the height of one
point. `fdfview` reads the map, works out its dimensions and height range,
projects every point isometrically and plots the points in a window. The same
picture can be rendered into an in-memory image and saved as a PPM file.

The package has no third-party dependencies. The window uses `tkinter` from the
standard library.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
fdfview path/to/map.fdf
```

- With no file, or more than one, it prints `Usage: fdf <filename.fdf>` and
  exits with status 1.
- If the file cannot be opened it prints `Error: Cannot read file` and exits
  with status 1.
- Otherwise it prints the map's dimensions, the number of values it holds and
  its height range, then opens a 1200×800 window titled
  `FDF - Wireframe Viewer`.
- If no window can be opened (for example, `tkinter` or a display is missing)
  it prints `Error: Failed to initialize graphics` and exits with status 1.
- Pressing Escape or closing the window ends the program with status 0.

## What it does not do

The viewer plots each map point as a single white pixel; it does not draw the
lines between neighbouring points. The zoom (20), the projection angle (about
30°) and the centring on the window are fixed. Nothing can be panned, zoomed,
rotated or recoloured while the window is open, and keys other than Escape are
ignored. Points that fall outside the window are not drawn. A colour given
after a height in the map file (`10,0xFF0000`) is not read as a colour.

## Library use

```python
from fdfview.heightmap import load_map
from fdfview.projection import isometric_projection
from fdfview.viewer import Viewer

height_map = load_map("maps/42.fdf")
print(height_map.width, height_map.height)
print(height_map.z_min, height_map.z_max, height_map.z_range)

point = isometric_projection(0, 0, height_map)
print(point.x, point.y, point.z)

image = Viewer(height_map).render()
with open("map.ppm", "wb") as out:
    out.write(image.to_ppm())
```

### `fdfview.heightmap`

- `count_words(text, delimiter)` counts words separated by the delimiter or
  newlines.
- `get_map_dimensions(path)` returns `(width, height)`: the widest row's word
  count and the number of lines.
- `is_valid_file(path)` tells whether the file can be opened for reading.
- `HeightMap.allocate(width, height)` creates a map of zeros;
  `HeightMap.load(path)` fills it from a file (extra lines and numbers are
  ignored, cells a short row does not reach keep their value);
  `HeightMap.compute_stats()` sets `z_min`, `z_max` and `z_range`.
- `load_map(path)` does all of the above in one call.

Heights are read like C's `atoi`: leading digits with an optional sign, and
anything after them ignored. A file that cannot be read raises `MapError`.

### `fdfview.projection`

`isometric_projection(x, y, height_map)` returns a `Point(x, y, z)` for map
cell `(x, y)`, zoomed by 20 and centred on a 1200×800 window. The window size,
title and zoom are the module constants `WINDOW_WIDTH`, `WINDOW_HEIGHT`,
`WINDOW_TITLE` and `DEFAULT_ZOOM`.

### `fdfview.image`

`Image(width, height)` is a buffer of 32-bit little-endian pixels
(1200×800 by default). `put_pixel` silently ignores positions outside the
image, `get_pixel` reads a pixel back (raising `IndexError` outside it),
`clear` fills the whole buffer, and `to_ppm` returns the image as binary PPM
bytes. `draw_test_pattern(image)` draws red, green and blue squares and a white
cross on black.

### `fdfview.viewer`

`Viewer(height_map)` holds the map and an `Image`. `render()` draws the
projected points, `handle_keypress(key)` closes the viewer on the Escape code
(`Key.ESC`, 53) and returns whether it closed, `close()` shuts the window, and
`run()` opens the window and waits until it is closed. `main(argv=None)` is the
command-line entry point and returns the exit status.

### XPM images

```python
from fdfview.xpm import load_xpm, parse_xpm, XpmError

image = load_xpm("icon.xpm")
print(image.width, image.height, hex(image.pixel(0, 0)))
```

`load_xpm` strips comments, collects the quoted strings and hands them to
`parse_xpm`, which also accepts a list of strings directly. Colours may be
`#rrggbb` or an X11 colour name; `None` gives transparent pixels
(`0xFF000000`), and unknown names give 0. `strip_comments`, `extract_strings`
and `text_to_rgb` are available on their own. Malformed data raises
`XpmError`.

`fdfview.colors.lookup_color(name)` looks up a colour name, ignoring case
(`KeyError` if unknown), and `fdfview.colors.color_names()` lists every known
name.

### Text and data helpers

- `fdfview.linereader`: `LineReader(stream)` returns a stream's lines one at a
  time, each keeping its newline; `read_lines(path)` reads a whole file that
  way.
- `fdfview.wordtab`: `split_words`, `find_substring` and `find_unquoted`
  (a search that skips double-quoted text).
- `fdfview.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower`, `atoi` and `itoa`.
- `fdfview.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`,
  `strlcpy` and `strlcat`. Searches return an index, or `None` when nothing is
  found.
- `fdfview.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`
  and `memmove(buffer, dest, src, n)` on `bytearray` buffers.
- `fdfview.linkedlist`: `LinkedList` of `Node`s, with `push_front`,
  `push_back`, `last`, `pop_front`, `clear`, `iterate`, `map`, `len()` and
  iteration over the contents.