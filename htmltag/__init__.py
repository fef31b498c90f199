# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`htmltag` represents HTML elements as mutable trees of `Tag` and `Text` nodes,
with attribute, class and style helpers, rendering to markup, parsing from markup, and structural equality.
'''

from .element import Element, Text
from .exceptions import (ConflictingAttributeError, FragmentShapeError, HtmlSyntaxError, InsertIndexError,
  InvalidArgumentError, RenderStateError, StyleError)
from .parse import HtmlDocument, parse_tag, ParseError
from .tag import RenderMode, Tag


__all__ = [
  'ConflictingAttributeError',
  'Element',
  'FragmentShapeError',
  'HtmlDocument',
  'HtmlSyntaxError',
  'InsertIndexError',
  'InvalidArgumentError',
  'parse_tag',
  'ParseError',
  'RenderMode',
  'RenderStateError',
  'StyleError',
  'Tag',
  'Text',
]
