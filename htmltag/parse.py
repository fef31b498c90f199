# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Parse markup fragments into `Tag` trees.

Tokenization and tree construction are delegated to html5lib's fragment parser,
using the standard library element tree builder.
The resulting tree is then translated into `Tag` and `Text` nodes.
'''

import re
from dataclasses import dataclass
from typing import ClassVar, Iterator, TextIO, Union
from xml.etree.ElementTree import Element as EtElement

from html5lib import getTreeBuilder, HTMLParser
from html5lib.constants import E as html5lib_error_messages, prefixes as html5lib_ns_prefixes

from .element import Text
from .exceptions import FragmentShapeError, HtmlSyntaxError, InvalidArgumentError
from .reprs import html_ws_re, repr_lim
from .tag import Tag


@dataclass(frozen=True)
class ParseError:
  'A diagnostic reported by the markup parser.'
  code:str
  line:int # 1-based.
  column:int # 1-based.
  source_text:str # The source line containing the error.
  reason:str

  def __str__(self) -> str:
    return f'code = {self.code}, {self.line}:{self.column}, source text = {self.source_text!r}, reason = {self.reason}'


class HtmlDocument:
  '''
  A parsed markup fragment: the html5lib fragment root element and the errors reported while parsing.
  `container` names the context element that the fragment is parsed as if it were inside.
  When not specified, the container is chosen from the root start tag: table parts need a table context,
  as given by `fragment_containers`; anything else uses `default_container`.
  '''

  default_container:ClassVar[str] = 'div'
  fragment_containers:ClassVar[dict[str,str]] = {
    'caption': 'table',
    'col': 'colgroup',
    'colgroup': 'table',
    'tbody': 'table',
    'td': 'tr',
    'tfoot': 'table',
    'th': 'tr',
    'thead': 'table',
    'tr': 'tbody',
  }

  def __init__(self, root:EtElement, parse_errors:list[ParseError], source:str='', container:str='div') -> None:
    self.root = root
    self.parse_errors = parse_errors
    self.source = source
    self.container = container


  def __repr__(self) -> str:
    return f'{type(self).__name__}(source={repr_lim(self.source)}, errors={len(self.parse_errors)})'


  @classmethod
  def load(cls, source:Union[str,TextIO], container:str|None=None) -> 'HtmlDocument':
    'Parse a markup string or readable text stream.'
    if source is None: raise InvalidArgumentError('source cannot be None.')
    if not isinstance(source, str):
      try: read = source.read
      except AttributeError as e: raise InvalidArgumentError(f'source must be `str` or a text stream; received: {source!r}') from e
      source = read()
      if not isinstance(source, str): raise InvalidArgumentError(f'source stream must produce `str`; received: {type(source)!r}')
    parser = HTMLParser(tree=getTreeBuilder('etree'), namespaceHTMLElements=False)
    if container is None: container = cls.container_for(source)
    root = parser.parseFragment(source, container=container)
    lines = source.splitlines()
    errors = [parse_error_for(pos, code, datavars, lines) for pos, code, datavars in parser.errors]
    return cls(root=root, parse_errors=errors, source=source, container=container)


  @classmethod
  def container_for(cls, source:str) -> str:
    'Choose the fragment context element from the name of the first start tag in `source`.'
    m = _root_start_re.match(source)
    if m is None: return cls.default_container
    return cls.fragment_containers.get(m[1].lower(), cls.default_container)


  @property
  def top_level_nodes(self) -> Iterator[EtElement|str]:
    'Yield the top level elements and non-whitespace text. Comments are omitted.'
    yield from _child_nodes(self.root, keep_ws=False)



def parse_error_for(pos:tuple[int,int], code:str, datavars:dict|None, lines:list[str]) -> ParseError:
  'Create a ParseError from an html5lib error triple.'
  line, col = pos
  try: reason = html5lib_error_messages[code] % (datavars or {})
  except (KeyError, TypeError, ValueError): reason = code
  source_text = lines[line-1] if 0 < line <= len(lines) else ''
  return ParseError(code=code, line=line, column=col+1, source_text=source_text, reason=reason)


def parse_tag(source:Union[str,TextIO,HtmlDocument]) -> Tag:
  '''
  Parse `source`, which must contain exactly one root element, into a new `Tag`.
  Raises HtmlSyntaxError if the parser reports any errors,
  and FragmentShapeError if the top level is not a single element.
  '''
  if source is None: raise InvalidArgumentError('source cannot be None.')
  doc = source if isinstance(source, HtmlDocument) else HtmlDocument.load(source)
  if doc.parse_errors: raise HtmlSyntaxError(doc.parse_errors)
  nodes = list(doc.top_level_nodes)
  if len(nodes) != 1 or isinstance(nodes[0], str):
    raise FragmentShapeError(
      f'markup must contain exactly one root element; found {len(nodes)} top level nodes; input: {repr_lim(doc.source)}')
  return tag_from_etree(nodes[0])


def tag_from_etree(el:EtElement) -> Tag:
  '''
  Translate an element tree node into a Tag. The source tree is not modified.
  Foreign (SVG and MathML) names are converted from Clark notation back to their markup form.
  '''
  tag = Tag(_local_name(el.tag))
  for k, v in el.attrib.items():
    tag.attribute(_qualified_attr_name(k), v)
  for child in _child_nodes(el, keep_ws=True):
    if isinstance(child, str): tag.append(Text(child))
    else: tag.append(tag_from_etree(child))
  return tag


def _child_nodes(el:EtElement, keep_ws:bool) -> Iterator[EtElement|str]:
  '''
  Yield the text and child elements of `el` in document order.
  Comments (whose tag is not a string) are omitted; the text on either side of a comment is joined.
  '''
  text = el.text or ''
  for child in el:
    if isinstance(child.tag, str):
      if _is_kept(text, keep_ws): yield text
      text = ''
      yield child
    text += child.tail or ''
  if _is_kept(text, keep_ws): yield text


def _is_kept(text:str, keep_ws:bool) -> bool:
  return bool(text) and (keep_ws or not html_ws_re.fullmatch(text))


def _local_name(name:str) -> str:
  'Strip the `{namespace}` prefix that html5lib adds to foreign element names.'
  if not name.startswith('{'): return name
  return name.partition('}')[2]


def _qualified_attr_name(name:str) -> str:
  'Convert a Clark-notation attribute name such as `{http://www.w3.org/1999/xlink}href` to `xlink:href`.'
  if not name.startswith('{'): return name
  ns, _, local = name[1:].partition('}')
  prefix = html5lib_ns_prefixes.get(ns)
  if prefix is None: return local
  if prefix == 'xmlns' and local == 'xmlns': return local
  return f'{prefix}:{local}'


_root_start_re = re.compile(r'\s*(?:<!--.*?-->\s*)*<([A-Za-z][^\s/>]*)', flags=re.DOTALL)
