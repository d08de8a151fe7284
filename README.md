# ftkit

A small toolbox of low-level helpers modelled on the classic C string and
memory routines, reworked for Python data types. Positions come back as
indexes, "not found" as `None`, and strings (both `str` and bytes-like)
end at their first NUL character if they have one.

## Modules

- `ftkit.chartype`: ASCII character tests and case mapping (`isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `isspace`, `tolower`,
  `toupper`). Each takes an integer code or a one-character string; the
  case mappers return the same kind they were given.
- `ftkit.convert`: integer parsing and formatting with 32-bit signed
  semantics (`iabs`, `atoi`, `natoi`, `itoa`, and the constants `INT_MIN`,
  `INT_MAX`). `atoi` skips leading whitespace and wraps to 32 bits;
  `natoi` accepts only a whole signed number in range and returns 0
  otherwise.
- `ftkit.memory`: byte-buffer operations (`memset`, `bzero`, `memchr`,
  `memcmp`, `memcpy`, `memmove`, `calloc`, `realloc`). Buffers written to
  must be a `bytearray` or a writable `memoryview`; counts beyond a
  buffer's length raise `ValueError`. `memmove` copies within one buffer
  between two offsets.
- `ftkit.strings`: C-style string routines (`strlen`, `strchr`, `strrchr`,
  `strcmp`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `striteri`,
  `strmapi`). `strlcpy` and `strlcat` write into a `bytearray`.
- `ftkit.textops`: string building and splitting (`strdup`, `substr`,
  `strjoin`, `strtrim`, `split`, `nsplit`, `matlen`). `str` in gives `str`
  out; bytes-like in gives `bytes` out.
- `ftkit.linkedlist`: a singly linked list (`Node`, `LinkedList`) with
  `add_front`, `add_back`, `last`, `clear`, `delete_first`, `iterate` and
  `map`; it supports `len()` and iteration over its contents.
- `ftkit.output`: a minimal printf supporting `%c %s %p %d %i %u %x %X %%`
  with no flags or widths (`format_string`, `printf`, `printfd`) and
  file-descriptor writers (`putchar_fd`, `putstr_fd`, `putendl_fd`,
  `putnbr_fd`). `printf` and `printfd` return the number of bytes written.
- `ftkit.reader`: line-by-line reading from file descriptors with a
  separate buffer per descriptor (`LineReader`, `get_next_line`,
  `safe_close`, and the default `BUFFER_SIZE` of 10). Lines are `bytes`
  and keep their newline; `None` marks the end of the stream.

## Examples

```python
from ftkit.convert import atoi, itoa
from ftkit.textops import split, strtrim
from ftkit.output import format_string

atoi("   -42abc")            # -42
itoa(-2147483648)            # "-2147483648"
split("hello  world", " ")   # ["hello", "world"]
strtrim("  \t hi \n", " \t\n")  # "hi"
format_string("%d items, %x", 3, 255)  # "3 items, ff"
```

```python
import os
import sys
from ftkit.reader import LineReader, safe_close

fd = os.open("notes.txt", os.O_RDONLY)
reader = LineReader(buffer_size=10)
while (line := reader.next_line(fd)) is not None:
    sys.stdout.buffer.write(line)
fd = safe_close(fd)   # -1
```

```python
from ftkit.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.add_front(0)
doubled = items.map(lambda x: x * 2, lambda x: None)
list(doubled)   # [0, 2, 4, 6]
```

## What it does not do

ftkit is a library only: it installs no command-line tool, and its
formatted output has no field widths, precisions or flags.

## Running the tests

```
pip install -e .[test]
pytest
```