#!/usr/bin/env python3
"""
Server-side math rendering.

Finds every data-math container in converted HTML and typesets it to MathML.
Each container is handled on its own: an expression that fails to convert keeps
its raw LaTeX as visible text and the rest of the page is unaffected.
"""
import re

from bs4 import BeautifulSoup
from latex2mathml.converter import convert as latex2mathml_convert


def prepare_expression(tex: str) -> str:
    """Clean LaTeX that is meaningful to a typesetter but not to MathML."""
    # \bm -> \boldsymbol
    tex = re.sub(r'\\bm(?![a-zA-Z])', r'\\boldsymbol', tex)
    # Numbering and labels have no rendering
    tex = re.sub(r'\\label\{[^}]*\}', '', tex)
    tex = re.sub(r'\\(?:nonumber|notag)(?![a-zA-Z])', '', tex)
    return tex.strip()


def typeset(tex: str, display: bool) -> str:
    return latex2mathml_convert(prepare_expression(tex), display="block" if display else "inline")


def render_math(html: str) -> str:
    """Typeset all math containers not rendered yet. Safe to run twice."""
    soup = BeautifulSoup(html, 'html.parser')
    for elem in soup.find_all(attrs={'data-math': True}):
        if elem.get('data-rendered') == 'true':
            continue
        tex = elem.get('data-math', '')
        is_display = elem.get('data-display') == 'true'
        try:
            mathml = typeset(tex, is_display)
        except Exception as e:
            print(f"    [MathWarn] Could not typeset {tex[:60]!r}: {e}")
            elem.string = tex
        else:
            elem.clear()
            for node in list(BeautifulSoup(mathml, 'html.parser').contents):
                elem.append(node)
        elem['data-rendered'] = 'true'
    return str(soup)
