# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Codecs for the two structured attributes: `class` (space-separated words) and `style` (`key:value` rules joined by `;`).
'''

from typing import Iterable, Mapping

from .exceptions import InvalidArgumentError, StyleError


def split_classes(cl:str|None) -> list[str]:
  '''
  Split a `class` attribute value on single spaces.
  Repeated spaces yield empty words; this mirrors what is stored rather than normalizing it.
  '''
  if cl is None: return []
  return cl.split(' ')


def class_words(names:str) -> list[str]:
  'Split an argument such as "a b" into class names, dropping empty words.'
  if names is None: raise InvalidArgumentError('class names cannot be None.')
  return [n for n in names.split(' ') if n]


def join_classes(classes:Iterable[str]) -> str:
  return ' '.join(classes)


def union_classes(existing:Iterable[str], added:Iterable[str]) -> list[str]:
  'Ordered set union: existing classes first in their order, then new ones in the order given.'
  return list(dict.fromkeys([*existing, *added]))


def parse_styles(style:str|None) -> dict[str,str]:
  '''
  Parse a `style` attribute value into an ordered dict.
  Rules are split on ';' and then on the first ':'; keys and values are stripped.
  Empty rules (e.g. after a trailing ';') are skipped.
  Raises StyleError listing every rule that lacks a ':' or a key.
  '''
  styles:dict[str,str] = {}
  if not style: return styles
  invalid:list[str] = []
  for rule in style.split(';'):
    if not rule.strip(): continue
    key, sep, val = rule.partition(':')
    key = key.strip()
    if not sep or not key:
      invalid.append(rule)
      continue
    styles[key] = val.strip()
  if invalid: raise StyleError(invalid)
  return styles


def fmt_styles(styles:Mapping[str,str]) -> str:
  'Format styles as `key:value` pairs joined by ";", without a trailing separator.'
  return ';'.join(f'{k}:{v}' for k, v in styles.items())


def validate_style_item(key:str, val:str) -> None:
  'Reject keys and values that would corrupt the `style` serialization.'
  if key is None: raise InvalidArgumentError('style key cannot be None.')
  if val is None: raise InvalidArgumentError('style value cannot be None.')
  if not key: raise InvalidArgumentError('style key cannot be empty.')
  if ';' in key or ':' in key: raise InvalidArgumentError(f"style key cannot contain ';' or ':'; key: {key!r}")
  if ';' in val: raise InvalidArgumentError(f"style value cannot contain ';'; value: {val!r}")
