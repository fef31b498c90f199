# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from htmltag import RenderMode, RenderStateError, Tag
from utest import utest, utest_exc, utest_val


a = Tag('a', attrs={'href': '/x?a=1&b=2', 'title': 'say "hi"'}).append('Tom & <Jerry>')

utest('<a href="/x?a=1&amp;b=2" title="say &quot;hi&quot;">Tom &amp; &lt;Jerry&gt;</a>', a.render)
utest('<a href="/x?a=1&amp;b=2" title="say &quot;hi&quot;">', a.render, RenderMode.start_tag)
utest('</a>', a.render, RenderMode.end_tag)
utest_exc(RenderStateError, a.render, RenderMode.self_closing)
utest_exc(ValueError, a.render, RenderMode.self_closing)
utest_val(a.render(), str(a), 'str')
utest_val(a.render(), a.__html__(), '__html__')
utest('Tom &amp; &lt;Jerry&gt;', a.render_contents)

utest('<br />', Tag('br').render, RenderMode.self_closing)
utest('<br></br>', Tag('br').render)
utest('<img src="a.png" alt="" />', Tag('img', attrs={'src': 'a.png', 'alt': ''}).render, RenderMode.self_closing)
utest_exc(RenderStateError, Tag('br').append('x').render, RenderMode.self_closing)

# Start and end tags never include contents.
utest('<ul class="list">', Tag('ul', Tag('li', 'x')).add_class('list').render, RenderMode.start_tag)

utest('<ul><li>one</li>\n<li>two <b>2</b></li></ul>',
  Tag('ul', Tag('li', 'one'), '\n', Tag('li', 'two ', Tag('b', '2'))).render)

# Attributes render in insertion order.
utest('<div id="x" class="c" data-n="1"></div>', Tag('div').set_id('x').add_class('c').data('n', 1).render)
utest('<p title="it&#x27;s"></p>', Tag('p', attrs={'title': "it's"}).render)
utest('<input type="checkbox" checked="checked" disabled="disabled">',
  Tag('input').set_type('checkbox').checked(True).disabled(True).render, RenderMode.start_tag)
