"""
Plain text extraction from eAIP HTML fragments.

eAIP pages interleave the visible values with hidden metadata spans
(class "sdParams", style "display: none;") and keep amended values inside
<del> elements. clean_text() returns only what a reader of the page would
see, one line per block element.
"""

from typing import List, Union

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

LINE_BREAK_TAGS = {'br', 'p'}
STRUCK_TAGS = {'del', 's', 'strike'}
INLINE_TAGS = {'span', 'strong', 'i', 'em'}
HIDDEN_STYLE = 'display: none;'


def clean_text(fragment: Union[str, Tag]) -> str:
    """
    Flatten an HTML fragment to plain text.

    Args:
        fragment: HTML text, or a parsed element whose content (not the
            element itself) is flattened

    Returns:
        The visible text, with a newline at every block boundary and no
        blank lines, stripped of surrounding whitespace
    """
    if isinstance(fragment, str):
        fragment = BeautifulSoup(fragment, 'html.parser')

    out: List[str] = []
    ignore_chain: List[str] = []

    def ends_with_newline() -> bool:
        for chunk in reversed(out):
            if chunk:
                return chunk.endswith('\n')
        return False

    # Depth-first walk; a Tag is pushed twice, once to open and once to close
    pending = [(child, False) for child in reversed(list(fragment.children))]
    while pending:
        node, closing = pending.pop()

        if isinstance(node, Tag):
            name = node.name.lower()
            if closing:
                if not ends_with_newline() and name not in INLINE_TAGS:
                    out.append('\n')
                if ignore_chain and ignore_chain[-1] == name:
                    ignore_chain.pop()
                continue

            if name in LINE_BREAK_TAGS:
                if not ends_with_newline():
                    out.append('\n')
            if name in STRUCK_TAGS or node.get('style') == HIDDEN_STYLE:
                ignore_chain.append(name)

            pending.append((node, True))
            pending.extend((child, False) for child in reversed(list(node.children)))
        elif isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            if not ignore_chain:
                out.append(node.strip())

    return ''.join(out).strip()
