#!/usr/bin/env python3
"""
Converter configuration and shared constants.
Shared across all converter modules.
"""
from pathlib import Path

# --- CONFIGURATION ---
ASSET_BASE = "/assets/"  # Set via --asset-base argument
HTML_OUTPUT_DIR = Path("html_output")

# --- PLACEHOLDERS ---
# STX/ETX never appear in real LaTeX; stray ones are dropped from the input.
TOKEN_OPEN = "\x02"
TOKEN_CLOSE = "\x03"
KIND_DISPLAY = "DISPLAY"
KIND_INLINE = "INLINE"
KIND_VERBATIM = "VERBATIM"
KIND_CODE = "CODE"

# --- MATH ---
MATH_ENVIRONMENTS = ("equation", "align", "gather", "eqnarray", "multline")

# --- STRUCTURE ---
HEADING_LEVELS = {
    'section': 'h2',
    'subsection': 'h3',
    'subsubsection': 'h4',
    'paragraph': 'h5',
}

# Segments starting with one of these tags are never wrapped in <p>
BLOCK_TAGS = ('h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'ul', 'ol', 'div',
              'figure', 'img', 'table', 'blockquote', 'pre', 'br')

CSS_CLASSES = {
    'title': "text-5xl font-bold mb-4 text-white",
    'author': "text-lg text-gray-400 mb-2",
    'date': "text-sm text-gray-500 mb-8",
    'h2': "text-4xl font-bold mt-12 mb-6 text-white border-b-2 border-orange-500 pb-3",
    'h3': "text-3xl font-semibold mt-10 mb-5 text-gray-100",
    'h4': "text-2xl font-semibold mt-8 mb-4 text-gray-200",
    'h5': "text-xl font-semibold mt-6 mb-3 text-gray-300",
    'strong': "font-bold",
    'em': "italic",
    'code': "bg-cosmic-800 px-2 py-1 rounded text-sm font-mono",
    'smallcaps': "uppercase tracking-wide text-sm",
    'serif': "font-serif",
    'sans': "font-sans",
    'upright': "not-italic",
    'underline': "underline",
    'list': "my-4",
    'list_item': "ml-4 mb-2 flex items-start",
    'list_label': "mr-3",
    'sup': "text-xs text-orange-400",
    'ref': "text-orange-500 hover:underline",
    'figure': "my-8",
    'figcaption': "text-sm text-gray-400 italic mt-2",
    'img': "max-w-full h-auto rounded-lg my-4",
    'pre': "bg-cosmic-800 p-4 rounded overflow-x-auto text-sm my-4",
    'math_display': "my-6 overflow-x-auto",
    'paragraph': "mb-4 leading-relaxed text-gray-200",
}

BULLET = "•"

LIGATURES = {
    'ﬀ': 'ff', 'ﬂ': 'fl', 'ﬃ': 'ffi', 'ﬄ': 'ffl', 'ﬁ': 'fi', 'ﬅ': 'st'
}

# KaTeX build loaded by standalone pages
KATEX_VERSION = "0.16.11"


def set_asset_base(url: str):
    """Set the base path that image references are resolved against."""
    global ASSET_BASE
    ASSET_BASE = url if url.endswith('/') else url + '/'


def get_asset_base() -> str:
    """Get the current asset base path."""
    return ASSET_BASE
