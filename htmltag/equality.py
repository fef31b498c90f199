# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Helpers for structural comparison and hashing of attribute mappings.'

from typing import Any, Collection, Hashable, Iterable, Mapping, TypeVar


K = TypeVar('K', bound=Hashable)
V = TypeVar('V')


def dicts_equal(a:Mapping[K,V], b:Mapping[K,V], exclude:Collection[K]=()) -> bool:
  'Compare two mappings as unordered sets of items, ignoring any keys in `exclude`.'
  if a is b: return True
  a_keys = {k for k in a if k not in exclude}
  b_keys = {k for k in b if k not in exclude}
  if a_keys != b_keys: return False
  return all(a[k] == b[k] for k in a_keys)


def sorted_items(d:Mapping[str,V], exclude:Collection[str]=()) -> tuple[tuple[str,V],...]:
  'Return the items of `d`, minus any keys in `exclude`, sorted by key.'
  return tuple(sorted((k, v) for k, v in d.items() if k not in exclude))


def combine_hashes(parts:Iterable[Any]) -> int:
  'Combine the hashes of `parts` in order.'
  h = 17
  for p in parts:
    h = (h * 23 + hash(p)) & _hash_mask
  return h


_hash_mask = (1 << 61) - 1
