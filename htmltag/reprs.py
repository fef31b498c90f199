# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Bounded reprs used by node summaries and error messages.'

import re
from typing import Any


def repr_lim(obj:Any, limit=64) -> str:
  'Return a repr of `obj` that is at most `limit` characters long.'
  r = repr(obj)
  if limit > 2 and len(r) > limit:
    q = r[0]
    if q in '\'"': return f'{r[:limit-2]}{q}…'
    else: return f'{r[:limit-1]}…'
  return r


def attr_summary(key:str, val:Any, *, text_limit:int, all_attrs:bool) -> str:
  'Summarize an attribute as a leading-space word. Only `id` and `class` values are shown unless `all_attrs` is set.'
  ks = key if _word_re.fullmatch(key) else repr(key)
  if all_attrs or key in ('id', 'class'): return f' {ks}={repr_lim(val, text_limit)}'
  return f' {ks}=…'


def text_summary(text:str, text_limit:int) -> str:
  'Summarize a text child as a leading-space word, with whitespace runs collapsed.'
  return ' ' + repr_lim(html_ws_re.sub(newline_or_space_for_ws, text), limit=text_limit)


def newline_or_space_for_ws(match:re.Match) -> str:
  'Collapse whitespace to either a newline or single space.'
  return '\n' if '\n' in match[0] else ' '


# HTML defines ASCII whitespace as "U+0009 TAB, U+000A LF, U+000C FF, U+000D CR, or U+0020 SPACE."
html_ws_re = re.compile(r'[\t\n\f\r ]+')

_word_re = re.compile(r'[-\w]+')
