# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from contextlib import redirect_stdout
from io import StringIO
from os.path import join as path_join
from tempfile import TemporaryDirectory

from htmltag.cli import main
from utest import utest


def run(*args:str) -> tuple[object,str]:
  'Run the command line tool, returning the exit code and the captured stdout.'
  out = StringIO()
  with redirect_stdout(out):
    try: main(list(args))
    except SystemExit as e: return (e.code, out.getvalue())
  return (None, out.getvalue())


fragments = {
  'a.html': '<div class="b a"><i>x</i></div>',
  'b.html': '<div class="a b"><i>x</i></div>\n',
  'c.html': '<div><i>y</i></div>',
  'bad.html': '<div></span></div>',
  'multi.html': '<i>1</i><i>2</i>',
}

with TemporaryDirectory() as dir:
  paths = {}
  for name, text in fragments.items():
    paths[name] = path_join(dir, name)
    with open(paths[name], 'w') as f: f.write(text)

  utest((0, '<div class="b a"><i>x</i></div>\n'), run, 'fmt', paths['a.html'])
  utest((0, '<div class="b a"><i>x</i></div>\n<div class="a b"><i>x</i></div>\n'), run, 'fmt', paths['a.html'], paths['b.html'])
  utest((1, ''), run, 'fmt', paths['multi.html'])
  utest((1, ''), run, 'fmt', paths['bad.html'])

  utest((0, ''), run, 'check', paths['a.html'], paths['b.html'])
  utest((1, ''), run, 'check', paths['bad.html'])
  utest((1, ''), run, 'check', paths['multi.html'])

  utest((0, ''), run, 'eq', paths['a.html'], paths['b.html'])
  utest((1, 'not equal\n'), run, 'eq', paths['a.html'], paths['c.html'])
  utest((2, ''), run, 'eq', paths['a.html'], paths['bad.html'])

  utest(('file not found: ' + path_join(dir, 'missing.html'), ''), run, 'fmt', path_join(dir, 'missing.html'))
