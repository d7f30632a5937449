#!/usr/bin/env python3
"""
LaTeX -> HTML conversion pipeline.

Phases, each text in / text out:
    1) Protect math (and verbatim) behind placeholder tokens.
    2) Strip preamble directives, tables, comments; lift title/author/date.
    3) Transform structure and formatting.
    4) Fallback sanitize: drop any command still left.
    5) Paragraphize, then restore math as data-math containers.

The placeholder table lives on a MathStore built per call, so conversions
share no state.
"""
import re
from dataclasses import dataclass

from . import config
from .formatting import convert_inline, normalize_escapes, transform
from .math_protection import MathStore, protect_math, restore_math
from .paragraphs import paragraphize
from .preamble import FrontMatter, FRONT_MATTER_FIELDS, strip_preamble
from .sanitizer import sanitize

AUTHOR_SEPARATOR_RE = re.compile(r'\s*\\and(?![a-zA-Z])\s*')


@dataclass
class ConversionResult:
    html: str
    front_matter: FrontMatter
    store: MathStore


def finish_front_matter(front: FrontMatter) -> FrontMatter:
    """Run captured header fields through the inline passes and the sanitizer."""
    for field in FRONT_MATTER_FIELDS:
        value = getattr(front, field)
        if value is None:
            continue
        value = AUTHOR_SEPARATOR_RE.sub(', ', value)
        value = sanitize(normalize_escapes(convert_inline(value)))
        value = ' '.join(value.split())
        setattr(front, field, value or None)
    return front


def convert(source: str, asset_base: str = None) -> ConversionResult:
    """Convert a LaTeX document into an HTML fragment."""
    if asset_base is None:
        asset_base = config.get_asset_base()
    store = MathStore()

    content = protect_math(source or "", store)
    content, front = strip_preamble(content)
    content = transform(content, asset_base)
    content = sanitize(content)
    body = paragraphize(content)

    header = finish_front_matter(front).to_html()
    html = restore_math(header + body, store)
    return ConversionResult(html=html, front_matter=front, store=store)


def convert_latex_to_html(source: str, asset_base: str = None) -> str:
    return convert(source, asset_base).html


def convert_fragment(source: str, asset_base: str = None) -> str:
    """
    Convert a LaTeX snippet without paragraph wrapping or front-matter.
    Used for inline raw LaTeX (e.g. from pandoc) where <p> would be wrong.
    """
    if asset_base is None:
        asset_base = config.get_asset_base()
    store = MathStore()
    content = protect_math(source or "", store)
    content = sanitize(transform(content, asset_base))
    return restore_math(' '.join(content.split()), store)
