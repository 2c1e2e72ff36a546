"""templates: Output templates and the built in stylesheet.

The templates use `str.format()` fields named after the Document
attributes (`title`, `author`, `date`, `style`).  The stylesheet itself
contains braces and is therefore only ever inserted as a field value.

"""

STYLESHEET_LINK: str = "<link rel='stylesheet' href='{href}' type='text/css'>"

HTML_TEMPLATE: str = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8" />
  <meta name="generator" content="docmark" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta name="title" content="{title}">
  <meta name="author" content="{author}">
  <title>{title}</title>
{style}
</head>
<body>
"""

HTML_TITLE: str = """<div class="title"><h1>{title}</h1></div>
<div class="author"><h3>{author}</h3></div>
<div class="date"><h3>{date}</h3></div>
"""

HTML_CLOSE: str = "</body>\n</html>\n"

MARKDOWN_HEADER: str = """# {title}

### {author}

### {date}
"""

DEFAULT_STYLE: str = """<style>
body {
    margin-left: 5%; margin-right: 5%;
    font-family: Palatino, "Palatino Linotype", "Palatino LT STD",
                 "Book Antiqua", Georgia, serif;
}
pre {
    padding-top: 1ex;
    padding-bottom: 1ex;
    padding-left: 2ex;
    padding-right: 1ex;
    width: 100%;
    color: black;
    background: #ffefdf;
    border-top: 1px solid black;
    border-bottom: 1px solid black;
    font-family: Monaco, Consolas, "Liberation Mono", Menlo, Courier,
                 monospace;
}
pre.synopsis {
    background: #cceeff;
}
pre.python code, pre.code code.python {
    background-color: #eeffee;
}
code {
    font-family: Consolas, "Liberation Mono", Menlo, Courier, monospace;
}
h1, h2, h3, h4 {
    font-family: sans-serif;
    background: transparent;
}
h1 {
    font-size: 120%;
    text-align: center;
}
h2 {
    margin-top: 1em;
    font-size: 110%;
    color: #005A9C;
    text-align: left;
}
h3, h4 {
    margin-top: 1em;
    font-size: 100%;
    color: #005A9C;
    text-align: left;
}
div.title h1 {
    font-size: 120%;
    text-align: center;
    color: black;
}
div.author h3, div.date h3 {
    font-size: 110%;
    text-align: center;
    color: black;
}
</style>"""


def stylesheet_link(href: str) -> str:
    """Return the HTML markup that links the stylesheet *href*."""
    return STYLESHEET_LINK.format(href=href)
