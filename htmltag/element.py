# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`Element` is the base of everything that can appear in a tag's contents;
`Text` is the leaf variant holding raw text that is escaped when rendered.
'''

from html import escape
from typing import Iterable, Optional, TYPE_CHECKING, Union
from weakref import ref

from .exceptions import InvalidArgumentError
from .reprs import repr_lim


if TYPE_CHECKING:
  from .tag import Tag


class Element:
  '''
  Abstract renderable node.
  The parent is held as a weak reference and is set by the owning tag when the element is inserted.
  '''

  __slots__ = ('_parent_ref', '__weakref__')

  _parent_ref:Optional['ref[Tag]']

  def __init__(self) -> None:
    self._parent_ref = None


  @property
  def parent(self) -> Optional['Tag']:
    'The tag that this element was most recently inserted into, or None.'
    r = self._parent_ref
    return None if r is None else r()


  def _set_parent(self, parent:'Tag') -> None:
    self._parent_ref = ref(parent)


  def render(self) -> str: raise NotImplementedError


  def __str__(self) -> str: return self.render()


  def __html__(self) -> str: return self.render()



class Text(Element):
  'An immutable text leaf. The text is stored raw and escaped during rendering.'

  __slots__ = ('_text',)

  def __init__(self, text:str) -> None:
    if not isinstance(text, str): raise InvalidArgumentError(f'Text requires a `str`; received: {text!r}')
    super().__init__()
    self._text = text


  @property
  def text(self) -> str: return self._text


  def render(self) -> str: return escape(self._text, quote=False)


  def __repr__(self) -> str: return f'Text({repr_lim(self._text)})'


  def __eq__(self, other:object) -> bool:
    if not isinstance(other, Text): return NotImplemented
    return self._text == other._text


  def __hash__(self) -> int: return hash(self._text)



ElementLax = Union[Element,str]


def element_for(child:ElementLax) -> Element:
  'Coerce `child` to an Element: strings are wrapped in `Text`; anything else that is not an Element is rejected.'
  if isinstance(child, Element): return child
  if isinstance(child, str): return Text(child)
  if child is None: raise InvalidArgumentError('element cannot be None.')
  raise InvalidArgumentError(f'invalid element type: {type(child)!r}; value: {repr_lim(child)}')


def elements_for(children:Iterable[ElementLax]) -> list[Element]:
  'Coerce every item of `children`; all items are validated before the list is returned.'
  if children is None: raise InvalidArgumentError('elements cannot be None.')
  if isinstance(children, (str, Element)): return [element_for(children)]
  return [element_for(c) for c in children]
