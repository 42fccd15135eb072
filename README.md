# ftkit

ftkit gathers small helpers in one place. It has character tests, byte-buffer
operations, string utilities, output to file descriptors and a singly linked
list. It has no dependencies outside the standard library.

## Installation

```
pip install ftkit
```

To run the test suite:

```
pip install "ftkit[test]"
pytest
```

## Modules

### `ftkit.chars`

`isalpha`, `isalnum`, `isascii`, `isdigit`, `isprint`, `tolower` and
`toupper`. Each takes an integer character code or a one-character `str`.
Only the ASCII ranges count. The predicates return `bool`. `tolower` and
`toupper` return the same kind they were given: an `int` for an `int`, a `str`
for a `str`. A `bool` raises `TypeError`, and a `str` longer than one
character raises `ValueError`.

### `ftkit.memory`

These functions work on `bytearray` and other bytes-like data:

- `bzero(buffer, n)` zeroes the first `n` bytes in place.
- `calloc(nmemb, size)` returns a zero-filled `bytearray`.
- `memset(buffer, c, n)` fills the first `n` bytes with the byte `c` and returns the buffer.
- `memcpy(dest, src, n)` copies the first `n` bytes of `src` into `dest` and returns `dest`. If both are `None` it returns `None`.
- `memmove(buffer, dest, src, n)` moves `n` bytes inside one buffer, from offset `src` to offset `dest`. It handles overlapping regions.
- `memchr(data, c, n)` returns the index of the first byte `c` within the first `n` bytes, or `None`.
- `memcmp(a, b, n)` returns the difference of the first unequal pair of bytes, or `0`.

A negative count, or a span that runs past the end of a buffer, raises
`ValueError`.

### `ftkit.output`

`putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` write to an open file
descriptor. Text is encoded as UTF-8. `putstr_fd(None, fd)` writes nothing.
`putendl_fd(None, fd)` writes only the newline.

### `ftkit.strings`

The search functions return an index into the string, or `None` when nothing
is found:

- `strlen(s)` returns the length of `s`.
- `strlcpy(src, size)` returns `(copied_text, len(src))`. The copied text holds at most `size - 1` characters.
- `strlcat(dst, src, size)` returns `(text, attempted_length)`. If `size` is not greater than `len(dst)`, you get `dst` back unchanged with `size + len(src)`.
- `strchr(s, c)` and `strrchr(s, c)` return the first or last index of `c`. Searching for `"\0"` gives `len(s)`.
- `strdup(s)` returns a copy of `s`.
- `strnstr(big, little, length)` finds `little` wholly within the first `length` characters of `big`. An empty `little` gives `0`.
- `strncmp(s1, s2, n)` compares at most `n` characters. The end of a string counts as code 0.
- `atoi(text)` skips leading whitespace and accepts one sign. It stops at the first non-digit and returns `0` if there are no digits. Values outside the 32-bit signed range wrap around.
- `itoa(n)` returns the decimal form of an `int`.

### `ftkit.transform`

- `substr(s, start, length)` returns at most `length` characters from `start`. A start past the end gives `""`.
- `strjoin(s1, s2)` returns the two strings joined.
- `strtrim(s, charset)` strips characters in `charset` from both ends.
- `split(s, sep)` splits on the single character `sep` and drops empty words.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(chars, f)` calls `f(index, char)` on each item of a mutable sequence. A returned string replaces that item.

`substr`, `strjoin`, `strtrim`, `split` and `strmapi` return `None` when they
are given `None` in place of a string.

### `ftkit.linkedlist`

- `Node(content, next=None)` is one link of the list.
- `LinkedList(items=None)` holds its first node in `head`. It supports `len()` and iteration over contents. Its methods are:
  - `add_front(node)` and `add_back(node)` add a node at either end.
  - `last()` returns the final node.
  - `clear(delete)` hands every content to `delete` and empties the list.
  - `for_each(f)` calls `f` on every content.
  - `map(f, delete)` returns a new list of `f(content)`. If `f` returns `None`, the contents already produced are passed to `delete` and `ValueError` is raised.
- `delete_one(node, delete)` passes one node's content to `delete` and cuts the node's link.

## Examples

```python
from ftkit.chars import isdigit, toupper
from ftkit.strings import atoi, itoa, strchr
from ftkit.transform import split, strtrim
from ftkit.linkedlist import LinkedList, Node

isdigit("7")                     # True
toupper("a")                     # "A"
toupper(ord("a"))                # 65

atoi("   -42abc")                # -42
itoa(-2147483648)                # "-2147483648"
strchr("hello", "l")             # 2

split("  hello  world ", " ")    # ["hello", "world"]
strtrim("xxhixx", "x")           # "hi"

items = LinkedList([1, 2, 3])
items.add_front(Node(0))
items.add_back(Node(4))
len(items)                       # 5
list(items)                      # [0, 1, 2, 3, 4]
doubled = items.map(lambda v: v * 2, lambda v: None)
list(doubled)                    # [0, 2, 4, 6, 8]
```

Writing to a file descriptor:

```python
import sys
from ftkit.output import putnbr_fd, putendl_fd

putnbr_fd(-123, sys.stdout.fileno())
putendl_fd("", sys.stdout.fileno())
```

## What it does not do

ftkit is a library only. It has no command-line tool. Buffers and lists live
in memory, and nothing is stored on disk.