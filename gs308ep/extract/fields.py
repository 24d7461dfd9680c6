"""
gs308ep.extract.fields
======================
Landmark-relative scanners for the switch's HTML.

The GS308EP firmware emits markup that is neither well-formed nor stable
between revisions, and quotes attributes with ``"`` or ``'`` more or less at
random.  The only dependable contract is the relative order of marker tokens,
so instead of building a DOM these helpers walk forward (or backward) from a
known landmark with plain ``str.find``.

Every helper returns ``None`` when a landmark is missing instead of raising.
"""

FORWARD = "forward"
BACKWARD = "backward"

_SPAN_OPEN = "<span>"
_SPAN_CLOSE = "</span>"


def _quoted_value_from(html: str, pos: int) -> str | None:
    """Return the quoted text following the next ``value`` token at or after *pos*."""
    value_pos = html.find("value", pos)
    if value_pos == -1:
        return None

    dq = html.find('"', value_pos)
    sq = html.find("'", value_pos)
    candidates = [p for p in (dq, sq) if p != -1]
    if not candidates:
        return None

    start = min(candidates)
    delim = html[start]
    end = html.find(delim, start + 1)
    if end == -1:
        return None
    return html[start + 1:end]


def extract_quoted_attribute(html: str, field_name: str) -> str | None:
    """
    Return the ``value`` of the form field called *field_name*.

    Accepts ``name="f"`` or ``name='f'`` (double-quoted form tried first) and
    whichever quote character opens the value; the value must be closed by
    the same character.  Returns None when the field, its ``value`` token or
    a matching closing quote is missing.
    """
    pos = html.find(f'name="{field_name}"')
    if pos == -1:
        pos = html.find(f"name='{field_name}'")
    if pos == -1:
        return None
    return _quoted_value_from(html, pos)


def extract_bounded_span(
    html: str,
    anchor: int,
    label: str,
    direction: str,
    window: int,
    opener: str = _SPAN_OPEN,
) -> str | None:
    """
    Return the stripped text of the first span following *label*.

    *label* is looked up within *window* characters of *anchor*:

    * ``FORWARD``  – the first occurrence starting in ``[anchor, anchor+window]``;
      the span itself may extend past the window.
    * ``BACKWARD`` – the last occurrence in ``html[anchor-window:anchor]``;
      the span must close before *anchor*.

    *opener* is the token that ends the opening tag, ``<span>`` for bare spans
    or ``>`` for markup like ``<span class="powClassShow">text</span>``.
    """
    if direction == FORWARD:
        label_pos = html.find(label, anchor)
        if label_pos == -1 or label_pos > anchor + window:
            return None
        area = html
    elif direction == BACKWARD:
        area = html[max(0, anchor - window):anchor]
        label_pos = area.rfind(label)
        if label_pos == -1:
            return None
    else:
        raise ValueError(f"unknown direction: {direction!r}")

    start = area.find(opener, label_pos + len(label))
    if start == -1:
        return None
    start += len(opener)
    end = area.find(_SPAN_CLOSE, start)
    if end == -1:
        return None
    return area[start:end].strip()


def extract_cookie_value(headers: str, cookie_name: str) -> str | None:
    """
    Return the value of *cookie_name* from a raw response-header block.

    The value runs up to the first ``;``, ``\\r`` or ``\\n`` (or the end of
    the text).  An empty value counts as missing.
    """
    marker = f"{cookie_name}="
    pos = headers.find(marker)
    if pos == -1:
        return None
    start = pos + len(marker)

    end = len(headers)
    for stop in (";", "\r", "\n"):
        idx = headers.find(stop, start)
        if idx != -1 and idx < end:
            end = idx
    return headers[start:end] or None
