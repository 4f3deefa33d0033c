# cubparse

`cubparse` reads `.cub` scene description files, the small text format used by
raycasting games. It first checks the six header elements: four wall textures,
one floor colour and one ceiling colour. It then checks the map grid that
follows them.

## File format

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100101
1010N1
111111
```

- The six elements may come in any order. Each one may appear only once.
  Whitespace, including blank lines, may separate them.
- A texture identifier (`NO`, `SO`, `WE`, `EA`) must be followed by at least
  one space or tab. The path runs up to the next space, tab or newline.
- A colour is `R,G,B`. Each component is an integer from 0 to 255. Spaces or
  tabs are allowed only before the first number.
- Blank lines before the map are skipped. Every line after that counts as part
  of the map.
- The map may contain only `1`, `0`, `N`, `S`, `E`, `W`, spaces and newlines.
  Lines whose length differs from that of the last line are padded with spaces.
- The map must hold exactly one player start (`N`, `S`, `E` or `W`). Every cell
  that is not a wall or a space must lie away from the edges of the map and
  must have no space next to it.

## Command line

```
cubparse [path]
```

`path` defaults to `texte.cub` in the current directory. The command does not
check the file's extension.

If the file parses, the command prints the padded map followed by a summary of
the elements, for example `north texture :: ./textures/north.xpm` and
`floor color : 220.100.0`.

If the file has a problem, the command writes `Error` to standard error and
the message to standard output. Examples of messages are `invalid element name`,
`invalid color input`, `missing elements of parsing`, `no map`,
`forbidden character in map`, `missing wall at map edge`, `multiple players`
and `no player`. It then prints a summary of the elements that were read.
If the file cannot be opened, the command writes the path and the system's
reason to standard error. In every case the exit status is 0.

## Library use

```python
from cubparse.stream import CharStream, ParseError
from cubparse.elements import parse_elements
from cubparse.mapgrid import read_map

stream = CharStream.from_path("level.cub")
try:
    config = parse_elements(stream)
    grid = read_map(stream)
except ParseError as exc:
    print("invalid scene:", exc)
else:
    print(config.describe())
    print("".join(grid))
```

- `CharStream` reads text one character or one line at a time (`read_char`,
  `skip_whitespace`, `read_line`, `lines`).
- `parse_elements` returns a `SceneConfig` with `north`, `south`, `east`,
  `west`, `floor` and `ceiling`. When it raises a `ParseError`, the error's
  `partial` attribute holds the `SceneConfig` as far as it was read.
- `read_color` in `cubparse.colors` reads one `R,G,B` colour and returns a
  `Color`. The `Color` prints as `R.G.B`.
- `cubparse.mapgrid` provides `read_map`, along with the steps it is built
  from: `is_blank`, `check_map`, `pad_lines` and `validate_map`. `read_map`
  returns the padded map lines, each with its newline.
- `is_cub` in `cubparse.cli` checks whether a file name ends in `.cub`.

## What it does not do

`cubparse` only checks the text of a scene file. It does not open or load the
texture files, and it does not check that they exist. It does not render
anything.

## Running the tests

Install the package with the `test` extra, then run:

```
pytest
```