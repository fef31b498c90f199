# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`tag` provides the `Tag` class, a mutable HTML element holding attributes and ordered contents.

Contents interleave child tags and `Text` nodes.
Mutating methods return the tag itself so that construction can be chained:
`Tag('input').set_type('checkbox').checked(True).add_class('toggle')`.
'''

from enum import Enum
from html import escape
from itertools import chain
from typing import Any, Callable, ClassVar, Iterable, Iterator, Mapping, overload, TextIO, TYPE_CHECKING, Union

from .element import Element, ElementLax, element_for, elements_for, Text
from .equality import combine_hashes, dicts_equal, sorted_items
from .exceptions import ConflictingAttributeError, InsertIndexError, InvalidArgumentError, RenderStateError
from .reprs import attr_summary, text_summary
from .styles import (class_words, fmt_styles, join_classes, parse_styles, split_classes, union_classes,
  validate_style_item)


if TYPE_CHECKING:
  from .parse import HtmlDocument


AttrVal = Union[str,int,float]
TagPred = Callable[['Tag'],bool]


class RenderMode(Enum):
  'Which portion of a tag to render.'
  normal, start_tag, end_tag, self_closing = range(4)


class Tag(Element):
  '''
  An HTML tag: a name, an attribute mapping, and ordered contents.

  The attribute mapping is exposed directly: `tag['href']`, `'href' in tag`, `len(tag)`, `tag.items()`, etc.
  Iterating over a tag yields attribute names, as for a dict; use `contents` or `children` for the subtree.

  Each inserted element gets a weak reference to this tag as its parent.
  Inserting an element that already belongs to another tag does not remove it from that tag;
  only the parent reference moves. Cycles are not detected.
  '''

  data_prefix:ClassVar[str] = 'data-'
  structured_attrs:ClassVar[tuple[str,...]] = ('class', 'style') # Compared as sets rather than as raw strings.

  __slots__ = ('_name', 'attrs', '_contents')

  # Instance attributes.
  attrs:dict[str,str]
  _contents:list[Element]

  def __init__(self, name:str, *contents:ElementLax, attrs:Mapping[str,AttrVal]|None=None) -> None:
    if not isinstance(name, str): raise InvalidArgumentError(f'tag name must be a `str`; received: {name!r}')
    if not name: raise InvalidArgumentError('tag name cannot be empty.')
    super().__init__()
    self._name = name
    self.attrs = {}
    self._contents = []
    if attrs is not None: self.merge(attrs)
    if contents: self.extend(*contents)


  @property
  def name(self) -> str:
    'The tag name, exactly as given to the initializer.'
    return self._name

  @property
  def tag(self) -> str: return self._name


  def __repr__(self) -> str: return f'{type(self).__name__}{self.summary()}'


  def __bool__(self) -> bool: return True # Otherwise `len()` (the attribute count) would make attribute-less tags falsy.


  # Contents.

  @property
  def contents(self) -> tuple[Element,...]:
    'A snapshot of the ordered contents, including both tags and text.'
    return tuple(self._contents)

  @contents.setter
  def contents(self, val:Iterable[ElementLax]) -> None:
    elements = elements_for(val)
    self._contents = elements
    for el in elements: el._set_parent(self)


  @property
  def children(self) -> list['Tag']:
    'The child tags in content order. Text nodes are not children; see `contents`.'
    return [c for c in self._contents if isinstance(c, Tag)]


  @property
  def parents(self) -> list['Tag']:
    'The ancestors of this tag, from the immediate parent outward to the root.'
    ancestors:list[Tag] = []
    p = self.parent
    while p is not None:
      ancestors.append(p)
      p = p.parent
    return ancestors


  @property
  def siblings(self) -> list['Tag']:
    'The other children of the parent, or an empty list for a root.'
    p = self.parent
    if p is None: return []
    return [c for c in p.children if c is not self]


  def find(self, pred:TagPred) -> list['Tag']:
    '''
    Return all descendant tags matching `pred`:
    first the matching direct children, then the results of `find` on each child in turn.
    '''
    children = self.children
    return [*filter(pred, children), *chain.from_iterable(c.find(pred) for c in children)]


  @property
  def texts(self) -> Iterator[str]:
    'Yield the text of the tree sequentially.'
    for c in self._contents:
      if isinstance(c, Text): yield c.text
      elif isinstance(c, Tag): yield from c.texts


  @property
  def text(self) -> str:
    'Return the text of the tree joined as a single string.'
    return ''.join(self.texts)


  def insert(self, index:int, element:ElementLax) -> 'Tag':
    el = element_for(element)
    if index < 0 or index > len(self._contents):
      raise InsertIndexError(
        f'cannot insert element {el!r} at index {index}; content elements count: {len(self._contents)}')
    self._contents.insert(index, el)
    el._set_parent(self)
    return self


  def prepend(self, element:ElementLax) -> 'Tag':
    return self.insert(0, element)


  def append(self, element:ElementLax) -> 'Tag':
    el = element_for(element)
    self._contents.append(el)
    el._set_parent(self)
    return self


  def extend(self, *elements:ElementLax) -> 'Tag':
    'Append each of `elements`. All are validated before any is appended.'
    els = [element_for(e) for e in elements]
    self._contents.extend(els)
    for el in els: el._set_parent(self)
    return self


  # Attribute mapping.

  def __getitem__(self, key:str) -> str: return self.attrs[key]

  def __setitem__(self, key:str, val:AttrVal) -> None: self.attribute(key, val)

  def __delitem__(self, key:str) -> None: del self.attrs[key]

  def __contains__(self, key:object) -> bool: return key in self.attrs

  def __iter__(self) -> Iterator[str]: return iter(self.attrs)

  def __len__(self) -> int: return len(self.attrs)

  def get(self, key:str, default:Any=None) -> Any: return self.attrs.get(key, default)

  def keys(self): return self.attrs.keys()

  def values(self): return self.attrs.values()

  def items(self): return self.attrs.items()

  def pop(self, key:str, *default:Any) -> Any: return self.attrs.pop(key, *default)

  def clear(self) -> None: self.attrs.clear()


  def add(self, key:str, val:AttrVal) -> None:
    'Add a new attribute, or raise ConflictingAttributeError if the key already exists.'
    try: existing = self.attrs[key]
    except KeyError: pass
    else: raise ConflictingAttributeError(key=key, existing=existing, incoming=val)
    self.attribute(key, val)


  def has_attribute(self, key:str) -> bool: return key in self.attrs


  def attribute(self, key:str, val:AttrVal, replace_existing=True) -> 'Tag':
    '''
    Set an attribute. If `replace_existing` is False and the key is already present, the call has no effect.
    Numeric values are converted to strings.
    '''
    if key is None: raise InvalidArgumentError('attribute name cannot be None.')
    if not isinstance(key, str): raise InvalidArgumentError(f'attribute name must be a `str`; received: {key!r}')
    if not key: raise InvalidArgumentError('attribute name cannot be empty.')
    v = attr_str(key, val)
    if replace_existing or key not in self.attrs:
      self.attrs[key] = v
    return self


  def remove_attribute(self, key:str) -> 'Tag':
    self.attrs.pop(key, None)
    return self


  def merge(self, attrs:Mapping[str,Any], replace_existing=True) -> 'Tag':
    'Merge all items of `attrs`, converting each value with `str()`. Values are checked before any are set.'
    if attrs is None: raise InvalidArgumentError('attrs cannot be None.')
    items = [(k, _str_val(k, v)) for k, v in attrs.items()]
    for k, v in items:
      self.attribute(k, v, replace_existing)
    return self


  # Conventional attributes. These use a `set_` prefix because `name` is the tag name.

  def set_name(self, name:str, replace_existing=True) -> 'Tag':
    return self.attribute('name', _required('name', name), replace_existing)

  def set_title(self, title:str, replace_existing=True) -> 'Tag':
    return self.attribute('title', _required('title', title), replace_existing)

  def set_id(self, id:str, replace_existing=True) -> 'Tag':
    return self.attribute('id', _required('id', id), replace_existing)

  def set_type(self, type:str, replace_existing=True) -> 'Tag':
    return self.attribute('type', _required('type', type), replace_existing)


  # Boolean attributes.

  def toggle_attribute(self, key:str, present:bool) -> 'Tag':
    'Set `key` to itself (e.g. `disabled="disabled"`) if `present` is truthy, otherwise remove it.'
    if key is None: raise InvalidArgumentError('attribute name cannot be None.')
    if present: return self.attribute(key, key)
    return self.remove_attribute(key)

  def checked(self, checked:bool) -> 'Tag': return self.toggle_attribute('checked', checked)

  def disabled(self, disabled:bool) -> 'Tag': return self.toggle_attribute('disabled', disabled)

  def selected(self, selected:bool) -> 'Tag': return self.toggle_attribute('selected', selected)


  # Data attributes.

  @overload
  def data(self, key:str, val:Any, replace_existing:bool=True) -> 'Tag': ...

  @overload
  def data(self, key:Mapping[str,Any], replace_existing:bool=True) -> 'Tag': ...

  def data(self, key, val=None, replace_existing=True):
    '''
    Set a `data-` attribute, adding the prefix to `key` unless it is already present.
    Alternatively, pass a mapping as `key` to set several data attributes; its values are converted with `str()`.
    In that form the second positional argument, if given, is `replace_existing`.
    '''
    if key is None: raise InvalidArgumentError('data attribute name cannot be None.')
    if isinstance(key, Mapping):
      if isinstance(val, bool): replace_existing = val
      elif val is not None:
        raise InvalidArgumentError(f'data mapping form takes a bool `replace_existing`; received: {val!r}')
      items = [(self.data_key(k), _str_val(k, v)) for k, v in key.items()]
      for k, v in items:
        self.attribute(k, v, replace_existing)
      return self
    return self.attribute(self.data_key(key), val, replace_existing)


  @classmethod
  def data_key(cls, key:str) -> str:
    if not isinstance(key, str): raise InvalidArgumentError(f'data attribute name must be a `str`; received: {key!r}')
    if not key: raise InvalidArgumentError('data attribute name cannot be empty.')
    return key if key.startswith(cls.data_prefix) else cls.data_prefix + key


  # Classes.

  @property
  def classes(self) -> list[str]:
    'The `class` attribute split on spaces.'
    return split_classes(self.attrs.get('class'))

  @classes.setter
  def classes(self, val:Iterable[str]) -> None:
    if isinstance(val, str): val = split_classes(val)
    classes = list(val)
    if classes: self.attrs['class'] = join_classes(classes)
    else: self.attrs.pop('class', None)


  def has_class(self, cl:str) -> bool: return cl in self.classes


  def add_class(self, cl:str) -> 'Tag':
    'Add each space-separated class name in `cl` that is not already present.'
    self.classes = union_classes(self.classes, class_words(cl))
    return self


  def remove_class(self, cl:str) -> 'Tag':
    'Remove each space-separated class name in `cl`.'
    removed = set(class_words(cl))
    self.classes = [c for c in self.classes if c not in removed]
    return self


  # Styles.

  @property
  def styles(self) -> dict[str,str]:
    'The `style` attribute parsed into an ordered dict. Raises StyleError if any rule is malformed.'
    return parse_styles(self.attrs.get('style'))

  @styles.setter
  def styles(self, val:Mapping[str,str]) -> None:
    if val:
      for k, v in val.items(): validate_style_item(k, v)
      self.attrs['style'] = fmt_styles(val)
    else:
      self.attrs.pop('style', None)


  def style(self, key:str, val:str, replace_existing=True) -> 'Tag':
    validate_style_item(key, val)
    styles = self.styles
    if replace_existing or key not in styles:
      styles[key] = val
    self.styles = styles
    return self


  def remove_style(self, key:str) -> 'Tag':
    if key is None: raise InvalidArgumentError('style key cannot be None.')
    styles = self.styles
    if styles.pop(key, None) is not None:
      self.styles = styles
    return self


  def width(self, width:str, replace_existing=True) -> 'Tag':
    return self.style('width', _required('width', width), replace_existing)

  def height(self, height:str, replace_existing=True) -> 'Tag':
    return self.style('height', _required('height', height), replace_existing)


  # Rendering.

  def fmt_attr_items(self) -> str:
    'Return a string that is either empty or with a leading space, containing all of the formatted attributes.'
    return ''.join(f' {k}="{escape(v, quote=True)}"' for k, v in self.attrs.items())


  def render(self, mode:RenderMode=RenderMode.normal) -> str:
    '''
    Render the tag as markup.
    `start_tag` and `end_tag` modes never include the contents.
    `self_closing` raises RenderStateError if the tag has contents.
    '''
    if mode == RenderMode.start_tag: return f'<{self._name}{self.fmt_attr_items()}>'
    if mode == RenderMode.end_tag: return f'</{self._name}>'
    if mode == RenderMode.self_closing:
      if self._contents:
        raise RenderStateError(
          f'cannot render {self!r} as self-closing because it has contents; count: {len(self._contents)}')
      return f'<{self._name}{self.fmt_attr_items()} />'
    return ''.join(self._render())


  def _render(self) -> Iterator[str]:
    'Recursive helper to `render`.'
    yield f'<{self._name}{self.fmt_attr_items()}>'
    for c in self._contents:
      if isinstance(c, Tag): yield from c._render()
      else: yield c.render()
    yield f'</{self._name}>'


  def render_contents(self) -> str:
    'Render only the contents.'
    return ''.join(c.render() for c in self._contents)


  def summary(self, text_limit=32) -> str:
    'A one-line description of the tag, its id and class, and the text of its immediate contents.'
    words = ''.join(chain(
      (attr_summary(k, v, text_limit=text_limit, all_attrs=False) for k, v in self.attrs.items()),
      (f' {c._name}' if isinstance(c, Tag) else text_summary(c.text, text_limit) if isinstance(c, Text) else ''
        for c in self._contents)))
    return f'<{self._name}:{words}>'


  # Parsing.

  @classmethod
  def parse(cls, source:Union[str,TextIO,'HtmlDocument']) -> 'Tag':
    'Parse markup containing a single root element. See `htmltag.parse.parse_tag`.'
    from .parse import parse_tag
    return parse_tag(source)


  # Structural equality.

  def __eq__(self, other:object) -> bool:
    '''
    Tags are equal if they have the same name, the same attributes, the same styles and classes regardless of order,
    and equal contents in the same order.
    '''
    if not isinstance(other, Tag): return NotImplemented
    if self is other: return True
    return (
      self._name == other._name and
      len(self.attrs) == len(other.attrs) and
      dicts_equal(self.attrs, other.attrs, exclude=self.structured_attrs) and
      dicts_equal(self.styles, other.styles) and
      sorted(self.classes) == sorted(other.classes) and
      self._contents == other._contents)


  def __hash__(self) -> int:
    'Combine the name, the unstructured attributes, the styles and the classes. Contents do not contribute.'
    return combine_hashes(chain(
      (self._name,),
      sorted_items(self.attrs, exclude=self.structured_attrs),
      sorted_items(self.styles),
      sorted(self.classes)))



def attr_str(key:str, val:AttrVal) -> str:
  'Validate an attribute value, converting numbers to strings.'
  if isinstance(val, str): return val
  if val is None: raise InvalidArgumentError(f'attribute value cannot be None; attribute: {key!r}')
  if isinstance(val, bool): raise InvalidArgumentError(f'attribute value cannot be a bool; use `toggle_attribute`: {key!r}')
  if isinstance(val, (int, float)): return str(prefer_int(val))
  raise InvalidArgumentError(f'attribute value must be `str`, `int`, or `float`; attribute: {key!r}; received: {val!r}')


def prefer_int(v:Union[float,int]) -> Union[float,int]:
  'Convert integral floats to int.'
  if isinstance(v, float) and v.is_integer(): return int(v)
  return v


def _str_val(key:str, val:Any) -> str:
  if not isinstance(key, str) or not key:
    raise InvalidArgumentError(f'attribute name must be a non-empty `str`; received: {key!r}')
  if val is None: raise InvalidArgumentError(f'attribute value cannot be None; attribute: {key!r}')
  if isinstance(val, bool): raise InvalidArgumentError(f'attribute value cannot be a bool; use `toggle_attribute`: {key!r}')
  if isinstance(val, (int, float)): return str(prefer_int(val))
  return str(val)


def _required(desc:str, val:Any) -> Any:
  if val is None: raise InvalidArgumentError(f'{desc} cannot be None.')
  return val
