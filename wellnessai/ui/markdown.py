"""Small markdown-to-HTML renderer for assistant chat bubbles.

Handles fenced code, inline code, bold, italic, links and bullet or
numbered lists. Input is HTML-escaped first and only http(s) or mailto link
targets become anchors, so the output is safe to pass to
``ui.html(..., sanitize=False)``.
"""

import html
import re

_FENCE = re.compile(r"```\w*\n?([\s\S]*?)```")
_CODE = re.compile(r"`([^`]+)`")
_BOLD = re.compile(r"\*\*(.+?)\*\*|__(.+?)__")
_ITALIC = re.compile(r"\*([^*]+)\*|_([^_]+)_")
_LINK = re.compile(r"\[([^\]]+)\]\(([^)\s]+)\)")
_BULLET = re.compile(r"^[-*]\s+(.*)$")
_NUMBERED = re.compile(r"^\d+\.\s+(.*)$")
_SAFE_URL = re.compile(r"^(?:https?://|mailto:)", re.IGNORECASE)


def _tag(name: str):
    def repl(match: re.Match[str]) -> str:
        return f"<{name}>{match.group(1) or match.group(2)}</{name}>"
    return repl


def _link(match: re.Match[str]) -> str:
    label, url = match.group(1), match.group(2)
    if not _SAFE_URL.match(url):
        return label
    return f'<a href="{url}" class="text-indigo-600 underline" target="_blank">{label}</a>'


def _inline(text: str) -> str:
    text = _CODE.sub(r'<code class="bg-gray-200 text-pink-600 px-1 rounded">\1</code>', text)
    text = _BOLD.sub(_tag("strong"), text)
    text = _ITALIC.sub(_tag("em"), text)
    return _LINK.sub(_link, text)


def _render_lines(text: str) -> str:
    out: list[str] = []
    open_list: str | None = None
    for line in text.split("\n"):
        stripped = line.strip()
        item = _BULLET.match(stripped) or _NUMBERED.match(stripped)
        kind = None if item is None else "ul" if _BULLET.match(stripped) else "ol"
        if kind != open_list:
            if open_list:
                out.append(f"</{open_list}>")
            if kind:
                out.append(f'<{kind} class="list-inside my-1">')
            open_list = kind
        if item is not None:
            out.append(f"<li>{_inline(item.group(1))}</li>")
        else:
            out.append(_inline(line) + "<br>")
    if open_list:
        out.append(f"</{open_list}>")
    return "".join(out).removesuffix("<br>")


def markdown_to_html(text: str) -> str:
    """Render chat markdown to HTML."""
    escaped = html.escape(text)
    parts: list[str] = []
    last = 0
    for match in _FENCE.finditer(escaped):
        parts.append(_render_lines(escaped[last:match.start()]))
        parts.append(
            '<pre class="bg-gray-800 text-gray-100 rounded p-3 my-2 overflow-x-auto text-xs">'
            f"<code>{match.group(1)}</code></pre>"
        )
        last = match.end()
    parts.append(_render_lines(escaped[last:]))
    return "".join(parts)
