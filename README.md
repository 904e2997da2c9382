# revflag

`revflag` draws a flag made of three vertical stripes. Each stripe takes its
colour from a palette file. The finished image is saved as a PNG.

## Installation

```
pip install .
```

## Usage

Run the command from a directory that holds an `assets/` folder containing
`settings.cfg` and `colors.txt`:

```
revflag 3 0 7
```

Up to three arguments are read. Each one is the index of a colour in the
palette, one per stripe from left to right. A stripe uses index `0` if its
argument is missing or if the argument is not made only of digits. An invalid
argument is also reported on standard error. If an index is past the end of
the palette, the stripe is opaque black.

Each stripe is `w // 3` pixels wide. Any columns left over on the right stay
black. A colour with alpha below 255 is blended over the black background.

When `save = 1`, the image is written as an RGBA PNG to
`<save_path><id1> <id2> <id3>.png`, for example `./3 0 7.png`.

The command exits with status 1 in two cases: the settings file has errors, or
the configured size is not positive. Otherwise it exits with 0.

### `assets/settings.cfg`

```
# image size in pixels
w = 300
h = 200
bpp = 32
save = 1
save_path=./
```

The known keys are `w`, `h`, `bpp`, `save` and `save_path`. Text after `#` is
a comment.

- **Whitespace.** Whitespace is dropped from keys and from integer values. In
  the string value `save_path`, any whitespace after the `=` is kept as part of
  the value.
- **References.** An integer value may name a key that was already set, for
  example `h = w`. The key then takes that key's value.
- **Errors.** Each error is reported with its file, line and column, and the
  program stops. Errors are an unknown key, a `=` with no key before it, and a
  value of the wrong type.
- **Defaults.** A missing key takes its default value: `w = 300`, `h = 200`,
  `bpp = 32`, `save = 1` and `save_path = ./`. The configuration is then marked
  as damaged, and a repaired copy is written back when the command finishes.

`bpp` is checked and kept in the file, but it has no effect on the image.

### `assets/colors.txt`

Each line holds one colour. A component is a number followed by one or more
channel letters (`r`, `g`, `b`, `a`, in either case). Components are separated
by commas:

```
255r, 0g, 0b, 255a   # red
255rg, 255a          # yellow: one value for two channels
0rgb, 255a           # black
```

A channel that is not given is `0`, except alpha, which starts at `255`.
Numbers are cut down to their lowest eight bits.

## Library use

```python
from revflag.colors import parse_colors, get_color_from
from revflag.settings import parse_config, save_config
from revflag.flag import parse_stripe_ids, render_flag, saved_filename

colors = parse_colors("assets/colors.txt")
ids = parse_stripe_ids(["1", "2", "3"])
image = render_flag(colors, ids, 300, 200)  # a Pillow Image
image.save(saved_filename("./", ids))
```

### `revflag.colors`

- `Color` holds RGBA values. `to_int()` and `Color.from_int()` convert to and
  from a packed `0xRRGGBBAA` integer.
- `FillMode` lists the channel flags.
- `fill_color(value, fill_mode, color)` returns a copy of `color` with the
  chosen channels set.
- `parse_colors(path)` returns a `ParsedColors`.
- `get_color_from(colors, idx)` returns the colour at `idx`.

### `revflag.settings`

- `ValueType` lists the value types.
- `ConfigValue` holds one value. `str()` of a value of unknown type gives
  `UNKNOWN`.
- `parse_config(path)` returns a `ParsedConfig` with `damaged`, `errors` and
  `values`.
- `create_cfg_value(cfg, token, value_type)` builds one value.
- `config_fill_defaults(cfg)` fills in missing values.
- `save_config(cfg, path)` writes `key = value` lines.

### `revflag.util`

`revflag.util` provides `is_numerical`, `read_file`, `location` and the
`log_info`, `log_error` and `log_success` helpers.

## What it does not do

`revflag` opens no window and shows no preview. It only renders the flag in
memory and, if saving is enabled, writes it to a PNG file.