# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from htmltag import StyleError, Tag, Text
from htmltag.equality import combine_hashes, dicts_equal, sorted_items
from utest import utest, utest_exc, utest_val


# Class order is ignored.
ba = Tag('div').add_class('b a')
ab = Tag('div').add_class('a b')
utest_val(ba, ab, 'class order')
utest_val(hash(ba), hash(ab), 'class order hash')

# Attribute and style order are ignored.
utest_val(Tag('a', attrs={'href': '/', 'id': 'x'}), Tag('a', attrs={'id': 'x', 'href': '/'}), 'attribute order')
s12 = Tag('p').style('a', '1').style('b', '2')
s21 = Tag('p').style('b', '2').style('a', '1')
utest_val(s12, s21, 'style order')
utest_val(hash(s12), hash(s21), 'style order hash')
utest_val(Tag('p', attrs={'style': 'a:1;b:2'}), Tag('p', attrs={'style': 'b: 2; a: 1;'}), 'style formatting')

# Content order is significant.
utest_val(False, Tag('div', 'x', Tag('b')) == Tag('div', Tag('b'), 'x'), 'content order')
utest_val(Tag('div', 'x', Tag('b', 'y')), Tag('div', 'x', Tag('b', 'y')), 'equal contents')
utest_val(False, Tag('div', 'x') == Tag('div', 'y'), 'different text')
utest_val(False, Tag('div', 'x') == Tag('div', Tag('x')), 'text versus tag')
utest_val(False, Tag('div', 'x') == Tag('div', 'x', 'x'), 'content length')

# Everything else must match.
utest_val(False, Tag('div') == Tag('span'), 'name')
utest_val(False, Tag('div').set_id('a') == Tag('div').set_id('b'), 'attribute value')
utest_val(False, Tag('div').set_id('a') == Tag('div').set_id('a').set_title('t'), 'attribute count')
utest_val(False, Tag('div').set_id('a') == Tag('div').set_title('a'), 'attribute key')
utest_val(False, Tag('div').add_class('a') == Tag('div'), 'class presence')
utest_val(False, Tag('div').add_class('a') == Tag('div').add_class('b'), 'class value')
utest_val(False, Tag('div').style('a', '1') == Tag('div').style('a', '2'), 'style value')
utest_val(False, Tag('b') == Text('b'), 'tag versus text')
utest_val(False, Tag('b') == 'b', 'tag versus str')

# Parents do not participate.
child = Tag('i')
Tag('p').append(child)
utest_val(Tag('i'), child, 'parent ignored')

utest_val(1, len({Tag('i', 'x'), Tag('i', 'x')}), 'set of equal tags')
utest_val(2, len({Tag('i').set_id('a'), Tag('i').set_id('b')}), 'set of unequal tags')

# A malformed style cannot be compared.
utest_exc(StyleError, lambda: Tag('p', attrs={'style': 'bad'}) == Tag('p', attrs={'style': 'bad'}))
utest_exc(StyleError, hash, Tag('p', attrs={'style': 'bad'}))


# Helpers.

utest(True, dicts_equal, {'a': 1, 'b': 2}, {'b': 2, 'a': 1})
utest(False, dicts_equal, {'a': 1}, {'a': 2})
utest(False, dicts_equal, {'a': 1}, {'a': 1, 'b': 2})
utest(True, dicts_equal, {'a': 1, 'x': 1}, {'a': 1, 'x': 2}, exclude=('x',))
utest(True, dicts_equal, {'a': 1, 'x': 1}, {'a': 1}, exclude=('x',))
utest(((('a', '1'), ('c', '3'))), sorted_items, {'c': '3', 'b': '2', 'a': '1'}, exclude=('b',))
utest(combine_hashes(['a', 'b']), combine_hashes, ('a', 'b'))
utest_val(False, combine_hashes(['a', 'b']) == combine_hashes(['b', 'a']), 'combine_hashes is order sensitive')
