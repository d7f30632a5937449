#!/usr/bin/env python3
"""
Math protection utilities.
Protects LaTeX math (and verbatim text) from text processing and restores it afterward.
"""
import html
import re
from dataclasses import dataclass
from typing import Dict

from . import config

# Not preceded by an unescaped backslash
_UNESCAPED = r'(?<!(?<!\\)\\)'

VERBATIM_BLOCK_RE = re.compile(r'\\begin\{verbatim\*?\}(.*?)\\end\{verbatim\*?\}', re.DOTALL)
VERB_INLINE_RE = re.compile(r'\\verb\*?([^a-zA-Z\s*])(.*?)\1')

DISPLAY_PATTERNS = [
    re.compile(r'(?<!\\)\\\[(.*?)\\\]', re.DOTALL),
    re.compile(_UNESCAPED + r'\$\$(.*?)\$\$', re.DOTALL),
    re.compile(
        r'\\begin\{(?:%s)\*?\}(.*?)\\end\{(?:%s)\*?\}' % (
            '|'.join(config.MATH_ENVIRONMENTS), '|'.join(config.MATH_ENVIRONMENTS)),
        re.DOTALL),
]
INLINE_PATTERN = re.compile(_UNESCAPED + r'(?<!\$)\$(?!\$)([^$\n]*?)\$')

_SENTINELS_RE = re.compile('[%s%s]' % (config.TOKEN_OPEN, config.TOKEN_CLOSE))
BLOCK_TOKEN_RE = re.compile(r'^%s(?:%s|%s)\d+%s' % (
    config.TOKEN_OPEN, config.KIND_DISPLAY, config.KIND_VERBATIM, config.TOKEN_CLOSE))


@dataclass(frozen=True)
class MathFragment:
    raw_expression: str
    display_mode: bool


@dataclass(frozen=True)
class VerbatimFragment:
    body: str
    block: bool


class MathStore:
    """Placeholder table for a single conversion call."""

    def __init__(self):
        self.fragments: Dict[str, MathFragment] = {}
        self.verbatim: Dict[str, VerbatimFragment] = {}
        self._counter = 0

    def _next_token(self, kind: str) -> str:
        token = f"{config.TOKEN_OPEN}{kind}{self._counter}{config.TOKEN_CLOSE}"
        self._counter += 1
        return token

    def add_math(self, expression: str, display_mode: bool) -> str:
        token = self._next_token(config.KIND_DISPLAY if display_mode else config.KIND_INLINE)
        self.fragments[token] = MathFragment(expression.strip(), display_mode)
        return token

    def add_verbatim(self, body: str, block: bool) -> str:
        token = self._next_token(config.KIND_VERBATIM if block else config.KIND_CODE)
        self.verbatim[token] = VerbatimFragment(body, block)
        return token

    def __len__(self):
        return len(self.fragments) + len(self.verbatim)


def protect_verbatim(content: str, store: MathStore) -> str:
    """Mask verbatim blocks and inline \\verb so nothing downstream rewrites them."""
    def repl_block(m):
        return f"\n\n{store.add_verbatim(m.group(1), block=True)}\n\n"

    def repl_inline(m):
        return store.add_verbatim(m.group(2), block=False)

    content = VERBATIM_BLOCK_RE.sub(repl_block, content)
    return VERB_INLINE_RE.sub(repl_inline, content)


def protect_math(content: str, store: MathStore) -> str:
    """Replace LaTeX math containers with placeholder tokens."""
    content = _SENTINELS_RE.sub('', content or '')
    content = protect_verbatim(content, store)

    def repl_display(m):
        # Blank lines around the token keep display math out of paragraphs
        return f"\n\n{store.add_math(m.group(1), display_mode=True)}\n\n"

    def repl_inline(m):
        return store.add_math(m.group(1), display_mode=False)

    # 1. Display forms, longest delimiters first
    for pattern in DISPLAY_PATTERNS:
        content = pattern.sub(repl_display, content)

    # 2. Inline (after display, so $$ is never read as two $)
    return INLINE_PATTERN.sub(repl_inline, content)


def math_container(fragment: MathFragment) -> str:
    """Element the math engine typesets in place."""
    expr = html.escape(fragment.raw_expression, quote=True)
    if fragment.display_mode:
        return (f'<div class="{config.CSS_CLASSES["math_display"]}" '
                f'data-math="{expr}" data-display="true"></div>')
    return f'<span data-math="{expr}" data-display="false"></span>'


def verbatim_container(fragment: VerbatimFragment) -> str:
    if fragment.block:
        body = html.escape(fragment.body.strip(), quote=False)
        return f'<pre class="{config.CSS_CLASSES["pre"]}"><code>{body}</code></pre>'
    return f'<code class="{config.CSS_CLASSES["code"]}">{html.escape(fragment.body, quote=False)}</code>'


def is_block_token(segment: str) -> bool:
    """True if the segment starts with a display math or verbatim block token."""
    return bool(BLOCK_TOKEN_RE.match(segment))


def restore_math(content: str, store: MathStore) -> str:
    """Restore placeholders to renderable containers."""
    if not len(store):
        return content
    rendered = {k: math_container(v) for k, v in store.fragments.items()}
    rendered.update({k: verbatim_container(v) for k, v in store.verbatim.items()})
    pattern = re.compile("|".join(re.escape(k) for k in rendered.keys()))

    def repl(m):
        return rendered[m.group(0)]
    return pattern.sub(repl, content)
