"""Lightweight markdown rendering for chat bubbles."""

import html
import re

_CODE_BLOCK = re.compile(r"```(\w*)\n?([\s\S]*?)```")
_PLACEHOLDER = "\x00{index}\x00"
_TABLE_SEPARATOR = re.compile(r"^\|?\s*:?-{3,}:?\s*(\|\s*:?-{3,}:?\s*)*\|?$")
_HEADING = re.compile(r"^(#{1,6})\s+(.*)$")
_BULLET_ITEM = re.compile(r"^[-*]\s+(.*)$")
_NUMBERED_ITEM = re.compile(r"^\d+\.\s+(.*)$")
_INLINE_CODE = re.compile(r"`([^`]+)`")
_LINK = re.compile(r"\[([^\]]+)\]\(([^)\s]+)\)")
_INLINE_PLACEHOLDER = "\x01{index}\x01"
# Anything else (javascript:, data:, relative paths) stays plain text
_LINK_SCHEMES = ("http://", "https://", "mailto:")

_HEADING_CLASSES = {
    1: "text-xl font-semibold my-2",
    2: "text-lg font-semibold my-2",
    3: "text-base font-semibold my-1",
}


def _render_emphasis(text: str) -> str:
    # Bold (**text** or __text__)
    text = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", text)
    text = re.sub(r"__(.+?)__", r"<strong>\1</strong>", text)

    # Italic (*text* or _text_)
    text = re.sub(r"\*([^*]+)\*", r"<em>\1</em>", text)
    return re.sub(r"(?<!\w)_([^_]+)_(?!\w)", r"<em>\1</em>", text)


def _render_inline(text: str) -> str:
    # Code spans and links are rendered first and kept away from emphasis
    kept: list[str] = []

    def keep(fragment: str) -> str:
        kept.append(fragment)
        return _INLINE_PLACEHOLDER.format(index=len(kept) - 1)

    def code(match: re.Match[str]) -> str:
        return keep(
            '<code class="bg-gray-200 text-pink-600 px-1.5 py-0.5 rounded text-xs">'
            f"{match.group(1)}</code>"
        )

    def link(match: re.Match[str]) -> str:
        label, url = match.group(1), match.group(2)
        if not url.lower().startswith(_LINK_SCHEMES):
            return match.group(0)
        return keep(
            f'<a href="{url}" class="text-blue-600 underline" target="_blank" '
            f'rel="noopener noreferrer">{_render_emphasis(label)}</a>'
        )

    text = _INLINE_CODE.sub(code, text)
    text = _LINK.sub(link, text)
    text = _render_emphasis(text)

    # Later fragments may contain earlier placeholders (code inside a link label)
    for index, fragment in reversed(list(enumerate(kept))):
        text = text.replace(_INLINE_PLACEHOLDER.format(index=index), fragment)
    return text


def _split_row(line: str) -> list[str]:
    return [cell.strip() for cell in line.strip().strip("|").split("|")]


def _render_table(rows: list[str]) -> str:
    header, body = _split_row(rows[0]), [_split_row(row) for row in rows[2:]]
    parts = ['<table class="table-auto border-collapse my-2 text-xs">', "<thead><tr>"]
    parts.extend(f'<th class="border px-2 py-1">{_render_inline(cell)}</th>' for cell in header)
    parts.append("</tr></thead><tbody>")
    for cells in body:
        parts.append("<tr>")
        parts.extend(f'<td class="border px-2 py-1">{_render_inline(cell)}</td>' for cell in cells)
        parts.append("</tr>")
    parts.append("</tbody></table>")
    return "".join(parts)


def _render_blocks(lines: list[str]) -> list[str]:
    result: list[str] = []
    list_tag: str | None = None
    i = 0

    def close_list() -> None:
        nonlocal list_tag
        if list_tag:
            result.append(f"</{list_tag}>")
            list_tag = None

    while i < len(lines):
        line = lines[i]
        stripped = line.strip()

        # Tables: header row, separator row, body rows
        if (
            stripped.startswith("|")
            and i + 1 < len(lines)
            and _TABLE_SEPARATOR.match(lines[i + 1].strip())
        ):
            close_list()
            rows = [stripped, lines[i + 1].strip()]
            i += 2
            while i < len(lines) and lines[i].strip().startswith("|"):
                rows.append(lines[i].strip())
                i += 1
            result.append(_render_table(rows))
            continue

        if heading := _HEADING.match(stripped):
            close_list()
            level = len(heading.group(1))
            css = _HEADING_CLASSES.get(level, "text-sm font-semibold my-1")
            result.append(f'<h{level} class="{css}">{_render_inline(heading.group(2))}</h{level}>')
        elif bullet := _BULLET_ITEM.match(stripped):
            if list_tag != "ul":
                close_list()
                result.append('<ul class="list-disc list-inside my-2 space-y-1">')
                list_tag = "ul"
            result.append(f"<li>{_render_inline(bullet.group(1))}</li>")
        elif numbered := _NUMBERED_ITEM.match(stripped):
            if list_tag != "ol":
                close_list()
                result.append('<ol class="list-decimal list-inside my-2 space-y-1">')
                list_tag = "ol"
            result.append(f"<li>{_render_inline(numbered.group(1))}</li>")
        else:
            close_list()
            result.append(_render_inline(line))
        i += 1

    close_list()
    return result


def markdown_to_html(text: str) -> str:
    """Convert markdown to HTML for chat display.

    Supports: headings, bold, italic, inline code, code blocks, links,
    lists, pipe tables.
    """
    text = html.escape(text)

    # Keep code blocks out of the line-oriented passes
    blocks: list[str] = []

    def stash(match: re.Match[str]) -> str:
        blocks.append(
            '<pre class="bg-gray-800 text-gray-100 rounded-lg p-3 my-2 overflow-x-auto text-xs">'
            f"<code>{match.group(2)}</code></pre>"
        )
        return _PLACEHOLDER.format(index=len(blocks) - 1)

    text = _CODE_BLOCK.sub(stash, text)

    lines = text.split("\n")
    rendered = "\n".join(_render_blocks(lines))

    # Line breaks, except right after block elements
    rendered = re.sub(r"(</(?:h\d|ul|ol|li|table)>|<(?:ul|ol)[^>]*>)\n", r"\1", rendered)
    rendered = rendered.replace("\n", "<br>")

    for index, block in enumerate(blocks):
        rendered = rendered.replace(_PLACEHOLDER.format(index=index), block)
    return rendered


def plain_to_html(text: str) -> str:
    """Render user text literally, preserving whitespace."""
    return f'<div style="white-space: pre-wrap">{html.escape(text)}</div>'
