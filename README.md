# fdfkit

Small, dependency-free helpers that follow C library conventions, in two parts.

**Text and data helpers**

- `fdfkit.chars`: ASCII classification (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`, `is_valid_sign`) and case conversion (`to_upper`, `to_lower`). They accept a one-character string or an integer code.
- `fdfkit.numbers`: `atoi` and `atol` are lenient decimal parsers. They wrap to 32 and 64 bits. `itoa` formats a 32-bit integer.
- `fdfkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to any text stream.
- `fdfkit.memory`: byte-buffer operations on `bytearray`. These are `memset`, `bzero`, `calloc`, `memcpy`, an overlap-safe `memmove` within one buffer, `memchr` and `memcmp`.
- `fdfkit.linked`: `LinkedList` is a singly linked list of `Node` objects. It has `push_front`, `push_back`, `last`, `len()`, iteration, `for_each`, `map` and `clear`.
- `fdfkit.strings`: C-string operations. Searches (`strchr`, `strrchr`, `strnstr`) return indices or `None`. It also has `strncmp`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi` and `striteri`. `strlcpy` and `strlcat` return the resulting text together with the untruncated length.
- `fdfkit.lines`: `LineReader` reads a file descriptor line by line, in chunks of `buffer_size` bytes (42 by default). It keeps leftover data for each descriptor. `get_next_line(fd)` uses one shared reader.
- `fdfkit.printf`: `format_printf` supports `%c %s %d %i %u %x %X %p %%`. `printf` writes the same text to standard output and returns its length.

**Pixel and render-queue utilities**

- `fdfkit.mlx_utils`: this module provides:
  - `fnv_hash`, the 64-bit FNV-1a hash.
  - `rgba_to_mono`, a luminance greyscale conversion that keeps alpha.
  - `draw_pixel`, which writes an RGBA colour as four bytes into a buffer.
  - `read_line`, which reads the next line of a stream or returns `None` at end of file.
  - `BPP`, the number of bytes per pixel.
- `fdfkit.render_queue`: `DrawCall` pairs an image with an instance index. Its `z()` reads `image.instances[instance_id].z`. `sort_render_queue` sorts a list of calls by depth in place. `remove_image_calls` removes and returns every call for a given image.

## Installation

```
pip install .
pip install ".[test]"   # to run the tests
```

## Examples

```python
from fdfkit.numbers import atoi, itoa
from fdfkit.strings import split, strtrim, strchr, strlcpy
from fdfkit.printf import format_printf

atoi("  -42abc")                         # -42
itoa(-2147483648)                        # "-2147483648"
split("1 2  3", " ")                     # ["1", "2", "3"]
strtrim("xxhixx", "x")                   # "hi"
strchr("hello", "l")                     # 2
strlcpy("hello", 3)                      # ("he", 5)
format_printf("%d %x %s", 10, 255, "ok") # "10 ff ok"
```

```python
from fdfkit.linked import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
len(items)                        # 4
list(items.map(lambda v: v * 2))  # [0, 2, 4, 6]
```

```python
import os
from fdfkit.lines import LineReader

read_fd, write_fd = os.pipe()
os.write(write_fd, b"first\nsecond")
os.close(write_fd)

reader = LineReader()
reader.next_line(read_fd)   # "first\n"
reader.next_line(read_fd)   # "second"
reader.next_line(read_fd)   # None
os.close(read_fd)
```

```python
from types import SimpleNamespace
from fdfkit.render_queue import DrawCall, sort_render_queue
from fdfkit.mlx_utils import draw_pixel

image = SimpleNamespace(instances=[SimpleNamespace(z=5), SimpleNamespace(z=1)])
queue = [DrawCall(image, 0), DrawCall(image, 1)]
sort_render_queue(queue)
[call.z() for call in queue]      # [1, 5]

pixels = bytearray(8)
draw_pixel(pixels, 4, 0xFF0000FF)  # pixels[4:8] == b"\xff\x00\x00\xff"
```

## What it does not do

fdfkit has no image class, no texture or image-file loader and no error-code type. It opens no window, runs no render loop and draws nothing on screen.

The render-queue helpers work with any object that has an `instances` sequence whose items have a `z` attribute. `draw_pixel` writes into a plain `bytearray` that you supply.