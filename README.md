# catchy

Small comparison helpers for tests. The comparisons do not return a bare
`True`/`False`. They return a `FalseString`, which is truthy when the values
match. When they do not match, it is falsy and holds a readable reason.

## Installation

```
pip install catchy
```

## FalseString

```python
from catchy.falsestring import FalseString

ok = FalseString.true()
bad = FalseString.false("values differ")

assert ok and ok.is_true()
assert not bad
print(bad.reason)                      # values differ
print(ok)                              # <true>

combined = FalseString.combine(bad, FalseString.false("also this"))
print(combined.reason)                 # values differ\nalso this
```

`FalseString.false("")` raises `ValueError`, because a failed result must
carry a reason. `combine` returns the true result when both inputs are true.
When exactly one input has failed, it returns that one. When both have
failed, it joins the two reasons with a newline.

## Approximate floating-point comparison

```python
from catchy.approx import approx, approximately_equal, ApproxData

assert 0.1 + 0.2 == approx(0.3)
assert 100.0 == approx(101.0).margin(2.0)
assert 1.0 != approx(1.1).epsilon(0.01)

assert approximately_equal(1.0, 1.05, ApproxData(epsilon=0.0, scale=1.0, margin=0.1))
```

An `Approx` starts with these settings:

- `epsilon` is 100 times single-precision machine epsilon.
- `scale` is `1.0`.
- `margin` is `0.0`.

`epsilon`, `margin` and `scale` set the value and return the same object, so
calls can be chained.

A number `x` compared with `approx(v)` is equal in either of two cases:

- it lies within `margin` of `v`;
- it lies within `epsilon * (scale + abs(x))` of `v`.

The checks avoid subtraction, so infinities compare correctly. `str(approx(1.5))`
gives `Approx( 1.5 )`.

## Strings and lists of strings

```python
from catchy.stringeq import string_eq, strings_eq, char_to_string

result = string_eq("hello", "hallo")
print(result.reason)
# lhs: "hello" and rhs: "hallo", lengths are 5 vs 5, first diff at 1 with e/a

assert not strings_eq(["a", "b"], ["a", "c"])
print(char_to_string("\t"))            # <tab>
```

`char_to_string` names invisible characters, such as `<tab>`, `<\n>`,
`<space>` and `<bell>`, and appends a hex code for unusual ones. This makes
invisible differences easy to spot. When one string is a prefix of the other,
the missing character is reported as `<null>`.

`strings_eq` compares two lists of strings. It reports a size mismatch and
the first index at which the strings differ.

## Lists and mappings of any values

```python
from catchy.vectorequals import vector_equals
from catchy.mapeq import map_eq

print(vector_equals([1, 2, 3], [1, 2, 4]).reason)
print(map_eq({"a": 1, "b": 2}, {"a": 1, "c": 3}).reason)
# b missing in rhs
# c missing in lhs
```

Both functions take an optional `compare(left, right)` callable that returns
a `FalseString`. The default reports `"left != right"`. `vector_equals` also
takes an optional `to_string` callable, used when the lists are shown in the
message. `map_eq` lists every issue, one per line: a key missing on either
side, or a shared key whose values differ.

`vector_to_string` and `vector_to_string_ex` in `catchy.vectortostring`
format lists the same way the failure messages do. A list whose one-line form
is shorter than 20 characters stays on one line. A longer list is spread over
several lines, with each entry numbered.

## What it does not do

These are plain functions that return results. The package does not hook
into any test runner and does not rewrite assertions. To fail a test, assert
on the returned `FalseString` and show its `reason` yourself.

## Running the tests

```
pip install -e ".[test]"
pytest
```