# ykit

A small library of everyday helpers with no third-party dependencies.

## Modules

- `ykit.chars`: single ASCII character tests and case conversion:
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower` and `char_in_set`. Note that `is_alnum` is true only for a
  character that is both a letter and a digit, so it always returns `False`.
- `ykit.mathutil`: `sign(value)` (-1, 0 or 1) and `clamp(value, lo, hi)`.
- `ykit.vec2`: immutable 2D vectors `IVec2` (integers) and `DVec2` (floats)
  with `+`, `-`, unary `-`, `zero()`, `dot`, `scale`, `divide`, `length`,
  `length_sq` and `normalized`. `IVec2.divide` truncates toward zero,
  `IVec2.dscale` scales by a float and truncates, and `IVec2.normalized`
  returns a `DVec2`. Normalising a zero vector raises `ZeroDivisionError`.
- `ykit.cstr`: C-style string helpers on Python text: `itoa`, `atoi`
  (skips leading whitespace, one optional sign, stops at the first
  non-digit), `ncmp`, `trim`, `sub` and `lcat` (returns the truncated
  result and the length the full concatenation would need).
- `ykit.lineio`: `LineReader`, which reads lines from several file
  descriptors in fixed-size blocks (20 bytes by default) and keeps the
  unread data per descriptor; `get_next_line(fd)` uses a shared reader.
  Also `read_fd_lines`, `read_file_lines`, `open_file` (mode 0644) and
  `write_text`.
- `ykit.strings`: `char_at`, `resize` (pads with NUL characters),
  `find_char`, `find_last_char`, `compare`, `find`, `trim`, `substring`
  (raises `ValueError` on an invalid range), `split` (on one character,
  dropping empty pieces) and `reverse`.
- `ykit.listiter`: `ListIter`, a cursor with `next`, `prev`, `begin`
  and `end` that moves both ways over a sequence and holds the current
  item in `value`.
- `ykit.printf`: printf-style formatting of `%c %s %p %d %i %u %x %X %%`
  with the `# - + space 0` flags, field width and precision. `sformat`
  returns the text; `yprintf` writes it to standard output and returns the
  number of characters counted. For an unknown conversion `yprintf` writes
  the line `Unknown flag specified` (not counted) and `sformat` writes
  nothing. The building blocks `parse_spec`, `conv_type`, `ConvSpec`,
  `ConvType`, `format_argument`, `hex_string` and `pad_number` are public.
- `ykit.seqlist`: `YList`, a list whose out-of-range `get` returns `None`
  and whose out-of-range `set`, `insert_at` and `remove_at` are ignored.
  It has `append`, `remove`, `pop`, `copy`, `apply`, `map`, `reject`,
  `rejected` and indexed variants `iapply`, `imap`, `ireject`,
  `irejected`, plus cursors from `iter`, `iter_first` and `iter_last`.
  The reject helpers drop the items for which the predicate is true.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ykit.vec2 import IVec2
from ykit.printf import sformat
from ykit.strings import split

v = IVec2(3, 4) + IVec2(1, 1)
print(v.length())              # 6.4031...

print(sformat("%05d|%-4s|%#x", -42, "ab", 255))   # -0042|ab  |0xff
print(split("  a b  c ", " "))                   # ['a', 'b', 'c']
```

```python
from ykit.seqlist import YList

items = YList([1, 2, 3, 4])
items.reject(lambda x: x % 2 == 0)   # removes the items the predicate accepts
print(list(items))                   # [1, 3]
```

## What it does not do

ykit is a library only: it installs no command-line program. `yprintf`
does not handle floating-point conversions or the `*` width, and the line
reader decodes bytes as UTF-8, replacing invalid sequences.