# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Pytest discovery for the `test/**/*.ut.py` utest scripts.
Each script is run as its own subprocess; a nonzero exit status is a failure.
'''

import subprocess
import sys

import pytest


def pytest_collect_file(parent, file_path):
  if file_path.name.endswith('.ut.py'):
    return UtestScript.from_parent(parent, path=file_path)


class UtestScript(pytest.File):

  def collect(self):
    yield UtestItem.from_parent(self, name=self.path.name)


class UtestItem(pytest.Item):

  def runtest(self):
    proc = subprocess.run([sys.executable, str(self.path)], capture_output=True, text=True)
    if proc.returncode != 0:
      raise UtestFailure(proc)

  def repr_failure(self, excinfo):
    if isinstance(excinfo.value, UtestFailure):
      proc = excinfo.value.proc
      return f'{self.path} exited with status {proc.returncode}\n{proc.stdout}{proc.stderr}'
    return super().repr_failure(excinfo)

  def reportinfo(self):
    return self.path, 0, f'utest: {self.name}'


class UtestFailure(Exception):

  def __init__(self, proc):
    super().__init__(proc.returncode)
    self.proc = proc
