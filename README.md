# libft

A small library of classic C-style helpers for characters, number conversion,
byte buffers, strings and output to file descriptors. The familiar rules are
kept (ASCII-only character tests, `atoi` parsing, `strlcpy`/`strlcat`
truncation and return values), while the interfaces are Python ones. Functions
take `str`, `bytes`, `bytearray` or `memoryview`, return indexes or `None`
where a pointer search would be used, and raise `TypeError` or `ValueError`
on bad arguments.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `libft.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
`to_lower`. Each takes an integer code or a one-character string. The tests
return `bool`. The case conversions change only ASCII letters and return the
same kind of value they were given: an `int` for an `int`, a `str` for a `str`.

### `libft.convert`

- `atoi(text)` skips leading whitespace (space, `\t`, `\n`, `\v`, `\f`, `\r`),
  reads one optional `+` or `-`, then decimal digits up to the first
  non-digit. Text without digits gives `0`.
- `itoa(n)` returns the decimal representation of an integer.

### `libft.memory`

- `memset(buf, c, n)` and `bzero(buf, n)` fill the first `n` bytes of a
  mutable buffer (`bytearray` or writable `memoryview`).
- `memcpy(dest, src, n)` and `memmove(dest, src, n)` copy `n` bytes into
  `dest`; overlapping views are handled safely.
- `memchr(data, c, n)` returns the index of the first matching byte among the
  first `n`, or `None`.
- `memcmp(a, b, n)` returns the difference of the first differing bytes, or `0`.
- `calloc(nmemb, size)` returns a zero-filled `bytearray` of `nmemb * size` bytes.

A length larger than a buffer, or a negative one, raises `ValueError`.

### `libft.text`

`strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strdup`, `substr`,
`strjoin`, `strtrim`, `split`, `strmapi` and `striteri`.

- `strchr`, `strrchr` and `strnstr` return an index or `None`. Searching for
  `"\0"` finds the end of the string; an empty needle is found at `0`.
- `strncmp` returns the character-code difference at the first mismatch.
- `split(s, sep)` drops empty words.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(s, f)` calls `f(index, item)` on each item of a mutable sequence
  (for example a list of characters) and stores any non-`None` result back.

### `libft.buffers`

`strlcpy(dst, src, size)` and `strlcat(dst, src, size)` copy or append
NUL-terminated byte strings into a `bytearray`, writing at most `size` bytes
including the terminating NUL. Both return the length of the string they
tried to create, so a result of `size` or more means the output was truncated.

### `libft.output`

`putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` write to an open file
descriptor. Text is encoded as UTF-8; `putchar_fd` also accepts a byte value
0–255. `putstr_fd` and `putendl_fd` write nothing when given `None`.

## Example

```python
from libft.buffers import strlcpy
from libft.convert import atoi, itoa
from libft.output import putendl_fd
from libft.text import split, strchr, strtrim

assert atoi("  -42abc") == -42
assert itoa(-2147483648) == "-2147483648"
assert split("  hello  world ", " ") == ["hello", "world"]
assert strtrim("xxhixx", "x") == "hi"
assert strchr("hello", "l") == 2

dst = bytearray(4)
assert strlcpy(dst, b"hello", 4) == 5
assert dst == bytearray(b"hel\0")

putendl_fd("done", 1)
```

## Scope

This is a library only: it has no command-line program.