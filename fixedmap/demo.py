"""Small command exercising a LookupMap at runtime."""

from __future__ import annotations

from typing import Sequence

from fixedmap.lookup import create_lookup_map


def main(argv: Sequence[str] | None = None) -> int:
    """Build a two-entry map, print its size and the value for key 13."""
    lookup = create_lookup_map((0, 42), (13, 37))

    if len(lookup) != 2:
        print("map size not yet working :)")
    print(f"Size: {len(lookup)}")
    if not lookup.contains(13):
        print("map membership not yet working :)")
    if lookup.get(13) != 37:
        print("map value fetching not yet working :)")
    print(f"map[13]: {lookup.get(13)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())