# ftls

`ftls` is a library of building blocks for an `ls`-style directory lister.
It collects file metadata without following symbolic links and reads
directories. It also has a `printf`-style formatter that returns bytes,
along with helpers for numbers, strings, wide characters, colours and
byte buffers.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Directory entries: `ftls.entries`

- `FileEntry` is a frozen dataclass with these fields: `name`, `path`,
  `mode`, `nlink`, `uid`, `gid`, `size`, `rdev`, `mtime` (whole seconds),
  `mtime_ns` (the nanosecond part) and `blocks`. Its `is_dir` property
  tests the mode. `FileEntry.from_stat(name, path, st)` builds an entry
  from an `os.stat_result`.
- `join_path(directory, name)` joins the two parts with exactly one `/`.
  It raises `OSError` with `ENAMETOOLONG` when the result is too long.
- `stat_entry(directory, name)` calls `lstat` on the joined path and
  returns a `FileEntry`.
- `read_directory(path, show_hidden)` returns the entries of a directory.
  Names that begin with `.` are skipped unless `show_hidden` is true. When
  it is true, `.` and `..` come first. Entries that cannot be stat'ed are
  left out. If the directory cannot be opened, the `OSError` is raised.
- `longest_name(entries)` returns the length of the longest name, or 0 for
  no entries.
- `sort_names(names)` sorts names by their byte values.

```python
from ftls.entries import read_directory, sort_names, longest_name

entries = read_directory(".", show_hidden=False)
names = sort_names(entry.name for entry in entries)
width = longest_name(entries)
```

## Formatting: `ftls.printf` and `ftls.fmtspec`

`format_printf(fmt, *args)` returns a `Formatted` object. It has these
members:

- `data`: the bytes produced.
- `length`: the length the call reports.
- `text`: `data` decoded as UTF-8.

`printf(fmt, *args)` writes the result to standard output and returns the
reported length.

Supported features:

- **Flags**: `#`, `0`, `-`, `+` and space.
- **Width and precision**: field widths and precision, including `*`.
- **Length modifiers**: `h`, `hh`, `l`, `ll`, `L`, `j` and `z`.
- **Standard conversions**: `d i D u U o O x X b B c C s S p f F %`.
  `%b` prints binary.
- **`%m`**: the message of the OS error currently being handled.
- **`%n`**: appends the count so far to a list argument.
- **Colour tags**: `%{red}`, `%{green}`, `%{yellow}`, `%{blue}`,
  `%{purple}`, `%{cyan}` and `%{eoc}`. Each tag counts as five
  characters in `length`.

```python
from ftls.printf import format_printf

result = format_printf("%5d|%-4s|", 42, "ab")
result.text    # '   42|ab  |'
result.length  # 11
```

`ftls.fmtspec` parses the part of a specification between `%` and the
conversion character. It provides:

- `parse_spec(text, pos, args)`: returns a `ConversionSpec` and the
  position of the conversion character.
- `parse_flags(text, pos, flags)`: reads flag characters into a
  `SpecFlags`.
- `apply_wildcard(spec, value)`: applies the value of a `*`.

## Helper modules

- `ftls.numconv` converts between numbers and text:
  - `atoi`: parses a 32-bit signed value.
  - `htoi`: parses hexadecimal and raises `ValueError` on a bad digit.
  - `itoa`, `itoa_base`, `lltoa` and `ulltoa_base`: integer to text.
  - `format_nbr_base`: integer to text with lower-case digits.
  - `round_scaled` and `ldtoa`: fixed-point text.
- `ftls.wide` works with UTF-8 sizes and encodings:
  - `wchar_len` and `wstr_len`: byte sizes.
  - `encode_wchar` and `encode_wstr`: encoding. An empty or missing
    string gives `(null)`.
  - `wstr_sub`: the longest prefix that fits in a byte budget.
  - `is_wascii`: tests for a 7-bit code point.
- `ftls.strings` has string and character helpers:
  - Byte-wise comparison: `strcmp` and `strncmp`.
  - Splitting and trimming: `split`, `trim` and `trim_char`.
  - Searching and slicing: `find_substring` and `substring`.
  - Bounded copies: `lcat` and `lcpy`.
  - `length_cmp`.
  - ASCII classification: `is_space`, `is_blank`, `is_alpha`, `is_digit`,
    `is_alnum`, `is_print` and `is_ascii`.
  - Case changes: `to_lower` and `to_upper`.
  - `bubble_sort`: a byte-order sort.
- `ftls.colors` has colour helpers:
  - `RGB` and `HSB` value types.
  - Conversions: `hex_to_rgb`, `rgb_to_hex`, `hsb_to_rgb` and
    `hsb_to_hex`.
  - `shade_color`: darkens a colour.
  - `clamp` and `fclamp`.
  - `int_abs`: absolute value with 32-bit wrapping.
- `ftls.mathutil` has `is_power_of`, `int_range` (both ends included) and
  `power`.
- `ftls.memory` works on byte buffers: `mem_set`, `mem_zero`, `mem_copy`,
  `mem_move`, `mem_ccopy`, `mem_chr` and `mem_cmp`.

## What this package does not do

The package does not provide any of the following:

- A command to run.
- Command-line option parsing.
- Sorting of entries by time or size.
- Column layout or long-listing output.

It supplies file metadata, directory reading and formatting helpers. A
listing program has to be built on top of them.