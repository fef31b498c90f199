# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes for building, rendering, and parsing tags.
Each class subclasses the builtin exception that callers would naturally catch.
'''

from typing import Any, Iterable


class InvalidArgumentError(ValueError):
  'Raised when a required argument is None, has the wrong type, or violates a local constraint.'


class InsertIndexError(IndexError):
  'Raised when an insertion index lies outside of `[0, len(contents)]`.'


class RenderStateError(ValueError):
  'Raised when a tag cannot be rendered in the requested mode, e.g. self-closing with contents.'


class ConflictingAttributeError(KeyError):
  '''
  Raised when an attribute is added under a key that already exists.
  Since it arises from a key collision, it subclasses KeyError.
  '''
  def __init__(self, *, key:str, existing:Any, incoming:Any) -> None:
    self.key = key
    self.existing = existing
    self.incoming = incoming
    super().__init__(key) # Initialized like a KeyError.


class StyleError(ValueError):
  'Raised when a `style` attribute contains rules that are not `key:value` pairs.'

  def __init__(self, rules:Iterable[str]) -> None:
    self.rules = list(rules)
    super().__init__(f'invalid style rules: {", ".join(repr(r) for r in self.rules)}')


class HtmlSyntaxError(ValueError):
  'Raised when the markup parser reports one or more errors. `errors` holds the `ParseError` records.'

  def __init__(self, errors:Iterable[Any]) -> None:
    self.errors = list(errors)
    lines = '\n'.join(f'  {e}' for e in self.errors)
    super().__init__(f'parse errors found:\n{lines}')


class FragmentShapeError(InvalidArgumentError):
  'Raised when parsed markup does not consist of exactly one root element.'
