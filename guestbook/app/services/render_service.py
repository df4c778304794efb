"""
HTML rendering for the guestbook page.

The page is small enough that a template engine would be overkill:
it is assembled from string templates, and every piece of user
content passes through ``html.escape`` before it is embedded.
"""

import html
from typing import Iterable


PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<h1>{title}</h1>
<form method="post" action="/">
<input type="text" name="message" maxlength="{max_length}" autofocus required>
<button type="submit">Sign</button>
</form>
<ul id="messages">
{items}
</ul>
</body>
</html>
"""

ITEM_TEMPLATE = "<li>{content}</li>"


class RenderService:
    """Builds the render view."""

    @classmethod
    def render_item(cls, content: str) -> str:
        return ITEM_TEMPLATE.format(content=html.escape(content, quote=True))

    @classmethod
    def render_page(cls, messages: Iterable[str], title: str, max_length: int) -> str:
        """Return the full HTML document for ``messages`` in the given order."""
        items = "\n".join(cls.render_item(message) for message in messages)
        return PAGE_TEMPLATE.format(
            title=html.escape(title),
            max_length=max_length,
            items=items,
        )
