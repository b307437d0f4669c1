"""Test utilities for the sidenotes test suite.

Shared HTML documents and a whitespace-insensitive comparison helper.
"""

import re

THIN_SPACE = "\u2009"

# A GFM document with a single footnote referenced from inside a div
SIMPLE_DOCUMENT = """<main>
  <div id="the-container">
    <p>This is some text.</p>
    <p id="the-parent">This is some text with a footnote ref.<sup><a id="user-content-fnref-1" href="#user-content-fn-1">1</a></sup></p>
    <p>Some more text.</p>
  </div>
  <section data-footnotes="">
    <ol>
      <li id="user-content-fn-1"><p>This is the footnote.</p></li>
    </ol>
  </section>
</main>"""

# A GFM article body with one reference in a paragraph and one in a blockquote
ARTICLE_DOCUMENT = """<div class="ArticleBody-inner" id="article-body">
<p id="p-1">Building social capital can 'just happen' for many.<sup><a href="#user-content-fn-3" id="user-content-fnref-3" data-footnote-ref="" aria-describedby="footnote-label">1</a></sup> It doesn't take much thought.</p>
<blockquote id="blockquote-1">
  <p id="p-2">These things must be done purposefully.<sup><a href="#user-content-fn-4" id="user-content-fnref-4" data-footnote-ref="" aria-describedby="footnote-label">2</a></sup></p>
</blockquote>
<section data-footnotes="" class="footnotes">
  <h2 class="sr-only" id="footnote-label">Footnotes</h2>
  <ol>
    <li id="user-content-fn-3">
      <p>For most people, much of the time. <a href="#user-content-fnref-3" data-footnote-backref="" aria-label="Back to reference 1" class="data-footnote-backref">↩</a></p>
    </li>
    <li id="user-content-fn-4">
      <p>Wayne Turmel, <em>The Connected Manager</em>, 2014. <a href="#user-content-fnref-4" data-footnote-backref="" aria-label="Back to reference 2" class="data-footnote-backref">↩</a></p>
    </li>
  </ol>
</section>
</div>"""

# Multimarkdown output: the id sits on the <sup>, the container is div.footnotes
MULTIMARKDOWN_DOCUMENT = """<p>Some text.<sup id="fnref:1"><a href="#fn:1" title="see footnote" class="footnote">1</a></sup></p>

<div class="footnotes">
<hr />
<ol>

<li id="fn:1">
<p>A Multimarkdown footnote. <a href="#fnref:1" title="return to body" class="reversefootnote">&#160;&#8617;&#xfe0e;</a></p>
</li>

</ol>
</div>
"""


# The smallest complete case: one footnote referenced from the second paragraph of a div
END_TO_END_INPUT = (
    "<main><div><p>This is some text.</p>\n"
    '<p>This is some text with a footnote ref.<sup><a id="user-content-fnref-1" href="#user-content-fn-1">1</a>'
    "</sup></p></div>\n"
    '<section data-footnotes=""><ol><li id="user-content-fn-1"><p>This is the footnote.</p></li></ol></section>'
    "</main>"
)

END_TO_END_OUTPUT = (
    "<main><div><p>This is some text.</p>\n"
    '<p>This is some text with a footnote ref.<sup><a id="user-content-fnref-1" href="#user-content-fn-1">1</a>'
    "</sup></p>\n "
    '<aside class="Sidenote" id="user-content-fn-1" role="doc-footnote">\n '
    '<p><small class="Sidenote-small"><sup class="Sidenote-number">1' + THIN_SPACE + "</sup>"
    "This is the footnote.</small></p>\n </aside></div>\n</main>"
)


def normalize_html(html: str) -> str:
    """Collapse runs of spaces and blank lines so layout whitespace does not matter."""
    html = re.sub(r"  +", " ", html)
    return re.sub(r"\n\s*\n", "\n", html)
