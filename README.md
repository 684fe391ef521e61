# fixedmap

A small, immutable lookup table. You give it its entries once, as key/value
pairs. Duplicate keys are refused when the map is built. Lookups scan the
entries in the order they were given, so the map suits small tables of
constants.

## Installation

```
pip install fixedmap
```

## Usage

```python
from fixedmap.lookup import LookupMap, create_lookup_map

codes = create_lookup_map((0, 42), (13, 37))

len(codes)            # 2
13 in codes           # True
codes.contains(9001)  # False
codes.get(13)         # 37
codes[0]              # 42

codes[235]            # raises KeyError
```

`LookupMap` can also be built directly from its pairs. Iterating over a map
yields its keys in the order they were given:

```python
table = LookupMap((0, 0), (13, 37), (42, 9001))
list(table)           # [0, 13, 42]
```

Keys are compared with `==` only, so any key type that supports `==` works,
including objects that are not hashable.

Building a map checks its entries:

- the same key given twice raises `ValueError`:

  ```python
  LookupMap((13, 37), (13, 42))   # ValueError
  ```

- an entry that is not a two-element pair raises `TypeError`.

The map has no way to add, change or remove entries after it is built.

## Demo

A short command that builds a two-entry map and prints its size and the
value stored for key 13:

```
fixedmap-demo
```

It prints:

```
Size: 2
map[13]: 37
```

## Running the tests

```
pip install -e ".[test]"
pytest
```