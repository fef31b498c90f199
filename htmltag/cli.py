# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
`htmltag` command line tool: format, check, and compare single-tag HTML fragments.
'''

from argparse import _SubParsersAction, ArgumentParser, Namespace
from functools import cached_property
from sys import stderr, stdin
from typing import Callable, Sequence, TextIO

from .exceptions import FragmentShapeError, HtmlSyntaxError, StyleError
from .parse import HtmlDocument, parse_tag
from .tag import Tag


class CommandParser(ArgumentParser):
  '''
  An ArgumentParser that is configured with subcommand parsers.
  Use `add_command()` to add subcommands; each one sets a `main_fn` default that `run()` dispatches to.
  '''

  @cached_property
  def _commands_subparsers(self) -> _SubParsersAction:
    commands = self.add_subparsers(required=True, dest='command', help='Available commands.')
    self.epilog = "For help with a specific command, pass '-h' to that command."
    return commands


  def add_command(self, main_fn:Callable[[Namespace],int], name:str|None=None, **kwargs) -> 'CommandParser':
    '''
    Add a command to the parser.
    By default, `name` is derived from `main_fn` by removing any 'main_' prefix and replacing underscores with hyphens.
    '''
    if not name:
      name = main_fn.__name__.removeprefix('main_').replace('_', '-')
    command = self._commands_subparsers.add_parser(name, **kwargs)
    assert isinstance(command, CommandParser)
    command.set_defaults(main_fn=main_fn)
    return command


  def run(self, args:Sequence[str]|None=None) -> int:
    ns = self.parse_args(args)
    return ns.main_fn(ns)



def main(args:Sequence[str]|None=None) -> None:
  parser = CommandParser(prog='htmltag', description='Format, check, and compare single-tag HTML fragments.')

  fmt = parser.add_command(main_fmt, help='Parse each fragment and print its normalized rendering.')
  fmt.add_argument('paths', nargs='*', help='paths to HTML fragments (defaults to stdin).')

  check = parser.add_command(main_check, help='Report parse errors and fragments that are not a single tag.')
  check.add_argument('paths', nargs='*', help='paths to HTML fragments (defaults to stdin).')

  eq = parser.add_command(main_eq, help='Exit with status 0 if two fragments are structurally equal.')
  eq.add_argument('a', help='path to the first fragment.')
  eq.add_argument('b', help='path to the second fragment.')

  exit(parser.run(args))


def main_fmt(args:Namespace) -> int:
  status = 0
  for path, file in open_inputs(args.paths):
    try: tag = Tag.parse(file)
    except (HtmlSyntaxError, FragmentShapeError) as e:
      errL(f'{path}: {e}')
      status = 1
      continue
    print(tag.render())
  return status


def main_check(args:Namespace) -> int:
  status = 0
  for path, file in open_inputs(args.paths):
    doc = HtmlDocument.load(file)
    for e in doc.parse_errors:
      errL(f'{path}:{e.line}:{e.column}: {e.code}: {e.reason}')
      status = 1
    if doc.parse_errors: continue
    try: parse_tag(doc)
    except FragmentShapeError as e:
      errL(f'{path}: {e}')
      status = 1
  return status


def main_eq(args:Namespace) -> int:
  tags:list[Tag] = []
  for path, file in open_inputs([args.a, args.b]):
    try: tags.append(Tag.parse(file))
    except (HtmlSyntaxError, FragmentShapeError) as e:
      errL(f'{path}: {e}')
      return 2
  a, b = tags
  try: equal = (a == b)
  except StyleError as e:
    errL(e)
    return 2
  if not equal:
    print('not equal')
    return 1
  return 0


def open_inputs(paths:list[str]) -> list[tuple[str,TextIO]]:
  'Open each path, or return stdin if `paths` is empty. Exits with a message if a file is missing.'
  if not paths: return [('<stdin>', stdin)]
  try: return [(path, open(path)) for path in paths]
  except FileNotFoundError as e: exit(f'file not found: {e.filename}')


def errL(*items:object) -> None: print(*items, sep='', file=stderr)
