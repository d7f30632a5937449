#!/usr/bin/env python3
"""
Structural and formatting transformer.

Rewrites the known LaTeX vocabulary into HTML:
    - sectioning commands -> h2..h5
    - inline formatting (\\textbf, \\emph, \\texttt, ...) -> <strong>/<em>/<code>/<span>
    - \\\\ and \\newline -> <br />
    - itemize/enumerate -> <ul>/<ol>
    - \\footnote, \\cite*, \\ref, \\eqref, \\label -> inert markers and anchors
    - figure -> caption-only <figure>, \\includegraphics -> <img>
    - symbol escapes (\\$, \\%, \\{, --, ``...) -> literal characters

Block-level output is padded with blank lines so the paragraph segmenter sees it
as a separate segment.
"""
import html
import re

from . import config
from .paragraphs import SEGMENT_SPLIT_RE, is_block

OPT_ARG = r'(?:\s*\[[^\]]*\])?'
_OPT_RE = re.compile(r'\s*\[[^\]]*\]')

# (command names, tag, css key)
INLINE_FORMATS = [
    (('textbf',), 'strong', 'strong'),
    (('textit', 'emph', 'textsl'), 'em', 'em'),
    (('texttt',), 'code', 'code'),
    (('textsc',), 'span', 'smallcaps'),
    (('textrm',), 'span', 'serif'),
    (('textsf',), 'span', 'sans'),
    (('textup',), 'span', 'upright'),
    (('underline',), 'span', 'underline'),
]

LINE_BREAK_RE = re.compile(r'\\\\\*?(?:\[[^\]]*\])?|\\newline(?![a-zA-Z])')

LIST_RE = re.compile(
    r'\\begin\{(itemize|enumerate)\}'
    r'((?:(?!\\begin\{(?:itemize|enumerate)\}).)*?)'
    r'\\end\{\1\}',
    re.DOTALL)
ITEM_RE = re.compile(r'\\item(?![a-zA-Z])\s*(?:\[([^\]]*)\])?')

FIGURE_RE = re.compile(r'\\begin\{figure\*?\}(.*?)\\end\{figure\*?\}', re.DOTALL)
INCLUDEGRAPHICS_RE = re.compile(r'\\includegraphics\*?' + OPT_ARG + r'\s*\{([^}]+)\}')

# Order matters: \textbackslash before the single-char escapes, --- before --
SYMBOL_ESCAPES = [
    (re.compile(r'\\textbackslash(?![a-zA-Z])(?:\{\})?'), '&#92;'),
    (re.compile(r'\\\$'), '$'),
    (re.compile(r'\\%'), '%'),
    (re.compile(r'\\\{'), '&#123;'),
    (re.compile(r'\\\}'), '&#125;'),
    (re.compile(r'\\_'), '_'),
    (re.compile(r'\\&'), '&amp;'),
    (re.compile(r'---'), '\u2014'),
    (re.compile(r'--'), '\u2013'),
    (re.compile(r'``'), '"'),
    (re.compile(r"''"), '"'),
    (re.compile(r'(?<!\\)~'), '&nbsp;'),
]


def _block(markup: str) -> str:
    return f"\n\n{markup}\n\n"


def _collapse(text: str) -> str:
    return ' '.join(text.split())


def _group_end(s: str, i: int) -> int:
    """Given s[i] == '{', return the index just past its matching '}', or -1."""
    depth = 0
    j = i
    n = len(s)
    while j < n:
        c = s[j]
        if c == '\\':
            j += 2
            continue
        if c == '{':
            depth += 1
        elif c == '}':
            depth -= 1
            if depth == 0:
                return j + 1
        j += 1
    return -1


def replace_command(content: str, names, handler, nargs: int = 1) -> str:
    """
    Replace every \\name[opt]{arg}... with handler(name, args).

    Arguments are matched with balanced braces, so nested groups stay intact
    inside the argument. Occurrences without enough arguments are left alone.
    """
    pattern = re.compile(r'\\(%s)(?![a-zA-Z])\*?' % '|'.join(names))
    out = []
    pos = 0
    n = len(content)
    while True:
        m = pattern.search(content, pos)
        if not m:
            break
        j = m.end()
        opt = _OPT_RE.match(content, j)
        if opt:
            j = opt.end()
        args = []
        while len(args) < nargs:
            while j < n and content[j] in ' \t':
                j += 1
            if j >= n or content[j] != '{':
                break
            end = _group_end(content, j)
            if end == -1:
                break
            args.append(content[j + 1:end - 1])
            j = end
        if len(args) < nargs:
            out.append(content[pos:m.end()])
            pos = m.end()
            continue
        out.append(content[pos:m.start()])
        out.append(handler(m.group(1), args))
        pos = j
    out.append(content[pos:])
    return ''.join(out)


def find_argument(content: str, name: str):
    """Return the first argument of the first \\name in content, or None."""
    found = []

    def grab(_name, args):
        if not found:
            found.append(args[0])
        return ''
    replace_command(content, (name,), grab)
    return found[0] if found else None


# --- Sections ---

def convert_sections(content: str) -> str:
    def repl(name, args):
        tag = config.HEADING_LEVELS[name]
        return _block(f'<{tag} class="{config.CSS_CLASSES[tag]}">{_collapse(args[0])}</{tag}>')
    return replace_command(content, tuple(config.HEADING_LEVELS), repl)


# --- Inline formatting ---

def _wrap(tag: str, css_key: str):
    open_tag = f'<{tag} class="{config.CSS_CLASSES[css_key]}">'

    def repl(_name, args):
        # Inner commands first, so blocks they produce are visible here
        body = convert_formatting(args[0])
        segments = SEGMENT_SPLIT_RE.split(body)
        if len(segments) == 1:
            return f'{open_tag}{body}</{tag}>'
        # A block inside the argument closes the wrapper and reopens it after
        pieces = []
        for piece in segments:
            if piece.strip() and not is_block(piece.strip()):
                piece = f'{open_tag}{piece}</{tag}>'
            pieces.append(piece)
        return '\n\n'.join(pieces)
    return repl


def convert_formatting(content: str, formats=INLINE_FORMATS) -> str:
    for names, tag, css_key in formats:
        content = replace_command(content, names, _wrap(tag, css_key))
    return replace_command(content, ('texorpdfstring',), lambda _n, args: args[0], nargs=2)


def convert_line_breaks(content: str) -> str:
    return LINE_BREAK_RE.sub('<br />', content)


def convert_inline(content: str) -> str:
    """Formatting and line breaks only; used for front-matter fields."""
    return convert_formatting(convert_line_breaks(content))


# --- Lists ---

# Item bodies only get bold/italic re-applied
_ITEM_FORMATS = [
    (('textbf',), 'strong', 'strong'),
    (('textit',), 'em', 'em'),
]


def split_items(body: str) -> list:
    """Split a list body into (label, text) pairs at each \\item."""
    markers = list(ITEM_RE.finditer(body))
    items = []
    for idx, m in enumerate(markers):
        end = markers[idx + 1].start() if idx + 1 < len(markers) else len(body)
        text = convert_formatting(_collapse(body[m.end():end]), formats=_ITEM_FORMATS)
        items.append((m.group(1), text))
    return items


def _render_list(kind: str, body: str) -> str:
    tag = 'ol' if kind == 'enumerate' else 'ul'
    li = ""
    for idx, (label, text) in enumerate(split_items(body), start=1):
        if label is None:
            label = f"{idx}." if tag == 'ol' else config.BULLET
        li += (f'<li class="{config.CSS_CLASSES["list_item"]}">'
               f'<span class="{config.CSS_CLASSES["list_label"]}">{label}</span>'
               f'<span>{text}</span></li>')
    return f'<{tag} class="{config.CSS_CLASSES["list"]}">{li}</{tag}>'


def convert_lists(content: str) -> str:
    """Convert itemize/enumerate, innermost environment first."""
    while True:
        new = LIST_RE.sub(lambda m: _block(_render_list(m.group(1), m.group(2))), content)
        if new == content:
            return new
        content = new


# --- Notes, citations, cross references ---

def convert_references(content: str) -> str:
    sup = config.CSS_CLASSES['sup']
    ref = config.CSS_CLASSES['ref']

    content = replace_command(content, ('footnote',), lambda _n, a: f'<sup class="{sup}">[*]</sup>')
    content = replace_command(content, ('cite', 'citep', 'citet'),
                              lambda _n, a: f'<sup class="{sup}">[citation]</sup>')

    def anchor(name, args):
        key = args[0].strip()
        target = html.escape(key, quote=True)
        if name == 'label':
            return f'<a id="{target}"></a>'
        text = f"({key})" if name == 'eqref' else f"Ref. {key}"
        return f'<a href="#{target}" class="{ref}">{text}</a>'
    return replace_command(content, ('ref', 'eqref', 'label'), anchor)


# --- Figures and images ---

def convert_figures(content: str) -> str:
    """Keep only the caption of each figure; drop everything else inside it."""
    def repl(m):
        caption = find_argument(m.group(1), 'caption')
        if caption is None:
            return ''
        return _block(f'<figure class="{config.CSS_CLASSES["figure"]}">'
                      f'<figcaption class="{config.CSS_CLASSES["figcaption"]}">{_collapse(caption)}</figcaption>'
                      f'</figure>')
    return FIGURE_RE.sub(repl, content)


def image_src(path: str, asset_base: str) -> str:
    """Asset URL for an \\includegraphics path: base + final path segment."""
    return f"{asset_base}{path.strip().split('/')[-1]}"


def convert_images(content: str, asset_base: str) -> str:
    def repl(m):
        src = image_src(m.group(1), asset_base)
        return f'<img src="{src}" alt="figure" class="{config.CSS_CLASSES["img"]}" loading="lazy" />'
    return INCLUDEGRAPHICS_RE.sub(repl, content)


# --- Symbols ---

def normalize_escapes(content: str) -> str:
    for pattern, rep in SYMBOL_ESCAPES:
        content = pattern.sub(rep, content)
    return content


def transform(content: str, asset_base: str = None) -> str:
    """Run every structural and formatting rewrite in order."""
    if asset_base is None:
        asset_base = config.get_asset_base()
    # Breaks first: a \\ must never be read as the start of a command
    content = convert_line_breaks(content)
    content = convert_sections(content)
    content = convert_formatting(content)
    content = convert_lists(content)
    content = convert_references(content)
    content = convert_figures(content)
    content = convert_images(content, asset_base)
    return normalize_escapes(content)
