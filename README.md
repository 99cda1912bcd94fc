# ftprintf

A compact printf-style formatter. It handles the conversions `c`, `s`, `p`,
`d`, `i`, `u`, `x`, `X` and `%`, and the flags `-`, `0`, `+`, space and `#`,
along with a field width and a precision. A few string helpers come with it.

## Installing

```
pip install .
```

## Formatting

`ftprintf.printf.sprintf` returns the formatted text:

```python
from ftprintf.printf import sprintf

sprintf("%5d|", 42)          # '   42|'
sprintf("%-5d|", 42)         # '42   |'
sprintf("%05d", -42)         # '-0042'
sprintf("%.3d", 7)           # '007'
sprintf("%+d % d", 5, 5)     # '+5  5'
sprintf("%#x %X", 255, 255)  # '0xff FF'
sprintf("%.2s", "hello")     # 'he'
sprintf("%s", None)          # '(null)'
sprintf("%p", 0)             # '(nil)'
sprintf("%p", 0x1234)        # '0x1234'
sprintf("100%%")             # '100%'
```

`ftprintf.printf.printf` writes the same text to standard output and returns
the count of characters the conversions report:

```python
from ftprintf.printf import printf

count = printf("%s has %d items\n", "cart", 3)
```

Things to know:

- An empty format string raises `ValueError`. The format is cut at the first
  `"\0"` character.
- A conversion that needs an argument when none is left raises `TypeError`.
- A `%` followed by no supported conversion character produces no text but
  still adds one to the count returned by `printf`.
- `%c` takes a one-character string or an integer code.
- `%s` takes a string or `None`. With `None` and a precision from 0 to 5,
  nothing is printed.
- `%p` takes an integer address or `None`. When a non-null pointer has a
  precision, the zeros that the precision adds are written but not counted.
- Integers are taken as C would take them. `%d` and `%i` wrap to a 32-bit
  signed value, and `%u`, `%x` and `%X` wrap to a 32-bit unsigned one. For
  example, `sprintf("%u", -1)` gives `'4294967295'`.

### Lower-level pieces

- `ftprintf.spec.parse_spec(fmt, index)` reads the specification whose `%`
  sits at `fmt[index]`. It returns a frozen `Spec` dataclass and the index
  just past the specification.
- `ftprintf.printf.render(spec, args)` renders one `Spec` and takes its
  argument from an iterator.
- `ftprintf.conversions` formats each conversion on its own:
  `format_char`, `format_string`, `format_pointer`, `format_decimal`,
  `format_unsigned`, `format_hex(spec, value, upper)` and `format_percent`.
  Each returns `(text, count)`.
- `ftprintf.padding` holds the padding helpers the conversions are built
  from: `width_padding`, `zero_padding`, `precision_padding`, `sign_flag`,
  `visible_digits` and `digits_length`.

## String helpers

`ftprintf.text` provides small string utilities:

```python
from ftprintf.text import atoi, itoa, split, strtrim, strjoin, strchr

atoi("  -42abc")                 # -42
itoa(-123)                       # '-123'
split("  hello   world  ", " ")  # ['hello', 'world']
strtrim("xxhixx", "x")           # 'hi'
strjoin("Hello ", "World")       # 'Hello World'
strchr("hello", "l")             # 2
```

It also has `substr`, `strnstr`, `strncmp`, `strrchr` and `strmapi`. The
search functions (`strnstr`, `strchr` and `strrchr`) return an index into the
text, or `None` when nothing is found.

## What it does not do

This is a library only. It installs no command-line program. Its formatting
does not support floating-point conversions, length modifiers such as `l` or
`h`, or a width or precision given as `*`.

## Running the tests

```
pip install .[test]
pytest
```