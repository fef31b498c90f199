# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import find_packages, setup


setup(
  name='htmltag',
  version='0.1.0',
  description='Mutable HTML tag trees: attributes, classes and styles, rendering, parsing, and structural equality.',
  license='CC0-1.0',

  packages=find_packages(include=['htmltag', 'htmltag.*']),
  py_modules=['utest'],
  python_requires='>=3.10',
  install_requires=[
    'html5lib>=1.1',
  ],
  entry_points={
    'console_scripts': [
      'htmltag=htmltag.cli:main',
    ],
  },
)
