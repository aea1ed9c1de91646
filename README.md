# vago

A small toolkit of everyday helpers:

- `vago.slices` – functions over lists: `index_of`, `find`, `find_idx`,
  `filter_items`, `filter_map`, `fold`, `reduce`, `cut`, `insert`,
  `insert_vector`, `delete`, `delete_order`, `pop`, `pop_front`, `peek` and more.
- `vago.slice` – `Slice`, a `list` subclass offering the same operations as methods.
- `vago.maps` – functions over dicts: `map_entries`, `filter_entries`,
  `filter_in_place`, `filter_map`, `filter_map_tuple`, `reduce`, `fold`,
  `to_list`, `equals`.
- `vago.dec` – `Dec`, an exact decimal that may also be *unset* (nil), with
  JSON and database-value helpers.
- `vago.lol` – a leveled, structured logger writing console or JSON lines.

The package has no dependencies outside the standard library.

## Install

```
pip install vago
```

For running the tests:

```
pip install "vago[test]"
pytest
```

## Lists

```python
from vago import slices

numbers = [1, 2, 3, 4, 5]
slices.filter_items(numbers, lambda n: n % 2 == 0)        # [2, 4]
slices.index_of(numbers, lambda n: n > 2)                  # 2
slices.find(numbers, lambda n: n > 10)                     # None
slices.cut([1, 2, 3, 4, 5], 1, 3)                          # [1, 5]
slices.fold(numbers, lambda acc, n: acc + n, 10)           # 25
slices.filter_map(numbers, lambda n: n * n if n % 2 == 0 else None)  # [4, 16]
```

Notes on behaviour:

- `filter_map` drops results that are `None`; `filter_map_tuple` expects
  `(value, keep)` pairs.
- `reduce` starts from `0`; `fold` starts from the value you give.
- `delete` removes an element by moving the last one into its place (order is
  not kept); `delete_order` keeps order. Both leave the list alone for an
  out-of-range index and change the list they are given.
- `pop`, `pop_front`/`shift`, `peek` and `extract_idx` raise `IndexError` when
  there is no such element. `extract` returns `None` when nothing matches.
- `insert` and `insert_vector` return a new list; an out-of-range index
  returns the list unchanged, and `None` as the list gives a list of just the
  inserted items.
- `cut(items, start, stop)` removes `start..stop` inclusive, clamping both
  bounds; when `start > stop`, `stop` is the number of extra elements removed.
- `to_map_idx` returns `WrappedIdx(value, idx)` entries.

## Slice

```python
from vago.slice import Slice

s = Slice([1, 2, 3])
s.push(4)                          # Slice is [1, 2, 3, 4]
s.map(lambda n: n * n)             # a new Slice [1, 4, 9, 16]
s.get(10)                          # None (negative indices are also out of range)
s.reduce(lambda acc, n: acc + n)   # 10
print(s)                           # one "\t<index> -> <value>" line per element
```

`push`, `append_vector`, `delete`, `map_in_place` and `filter_in_place` change
the slice and return it; `map`, `filter`, `filter_map`, `filter_map_tuple`
and `clone` return new `Slice` objects.

## Dicts

```python
from vago import maps

prices = {"apple": 100, "banana": 50, "cherry": 200}
maps.filter_entries(prices, lambda k, v: v > 75)   # {"apple": 100, "cherry": 200}
maps.reduce(prices, lambda acc, k, v: acc + v)     # 350
maps.map_entries(prices, lambda k, v: (k.upper(), v * 2))
maps.equals({"a": 1}, {"a": 1}, lambda x, y: x == y)   # True
```

`None` passed as the dict is kept as `None` by `map_entries`, `filter_map`,
`filter_map_tuple`, `filter_entries` and `filter_in_place`; `to_list` gives
`[]`, and `fold`/`reduce` return the starting value.

## Decimals

```python
from vago.dec import Dec, must_dec_from_string, new_dec_nil, ZERO

total = must_dec_from_string("123.45").add(must_dec_from_string("67.89"))
str(total)                                                            # "191.34"
str(must_dec_from_string("850").add_percent(must_dec_from_string("15")))  # "977.5"
str(must_dec_from_string("123.456789").round_to(2))                   # "123.46"
str(new_dec_nil())                                                    # "null"
new_dec_nil().or_zero().is_zero()                                     # True
Dec.from_json('"1.5"').to_json()                                      # '"1.5"'
Dec.scan(None).is_nil()                                               # True
```

- Build values with `new_dec_from_string`/`must_dec_from_string` (raise
  `ValueError` on bad text), `new_dec_from_int`, `new_dec_from_float`,
  `new_dec_from_any`/`must_dec_from_any` (raise `TypeError` for other types)
  and `new_dec_nil`. Constants: `ZERO`, `ONE`, `MINUS_ONE`, `NIL`,
  `ONE_HUNDRED`.
- `Dec.scan` accepts `None`, bytes, `str`, `float` or `int` and raises
  `DecScanError` for anything else.
- `div` rounds half away from zero to 16 decimal places; `div` and `mod`
  raise `ZeroDivisionError` for a zero divisor. The operators `+ - * / %`,
  unary `-`, `abs()` and comparisons are also supported.
- Results of arithmetic keep the "set" state of the left operand.
- `value()` and `to_postgres()` give the text form, or `None` when unset;
  `latin_string()` uses a comma as decimal separator; `to_float()` returns
  `(float, exact)`.
- `dec_sum` adds an iterable of decimals starting from zero; `abs_value` is a
  plain absolute value for numbers.

## Logging

```python
import io
from vago.lol import Env, Level, new_logger

out = io.StringIO()
log = new_logger(level=Level.DEBUG, env=Env.PROD, writer=out,
                 fields={"service": "demo"})
log.with_field("user_id", 123).info("User logged in")
# {"level":"info","service":"demo","user_id":123,"time":...,"message":"User logged in"}
```

- `new_logger(level, env, writer, fields, apm, time_field_format)`: `writer`
  is any object with `write(str)`; `None` discards output. `Env.LOCAL` (the
  default) writes human-readable console lines, the other environments write
  JSON lines. With `apm=True` output is JSON without a timestamp.
- `Logger` offers `trace`, `debug`, `print`, `info`, `warn`, `warning`,
  `error`, `fatal` and `panic`, each also in a printf-style `f` variant and a
  `ln` variant, plus `with_field`, `with_fields` and `with_trace`.
- `fatal*` exits with `SystemExit(1)` and `panic*` raises `LoggerPanic`, even
  when their level is filtered out.
- `with_trace(TraceContext(trace_id, transaction_id, span_id))` adds
  `trace.id`, `transaction.id` and `span.id` fields, but only on loggers made
  with `apm=True`.
- Ready-made loggers: `ZERO_LOGGER` (console to stderr, info level),
  `ZERO_TEST_LOGGER` (JSON to stderr, error level) and `ZERO_DISCARD_LOGGER`.

## What this package does not do

- It has no command-line tool; it is a library only.
- The logger does not send anything to a tracing or APM service. Trace
  identifiers must be supplied by the caller in a `TraceContext`; they are only
  written into the log lines.