#!/usr/bin/env python3
"""
Preamble and front-matter stripping.
Removes layout-only directives and lifts \\title, \\author and \\date into a header block.
"""
import re
from dataclasses import dataclass
from typing import Optional

from . import config
from .formatting import find_argument, replace_command

PREAMBLE_PATTERNS = [
    re.compile(r'\\documentclass(?:\[[^\]]*\])?\{[^}]*\}'),
    re.compile(r'\\usepackage(?:\[[^\]]*\])?\{[^}]*\}'),
    re.compile(r'\\geometry\{[^}]*\}'),
    re.compile(r'\\(?:this)?pagestyle\{[^}]*\}'),
    re.compile(r'\\setcounter\{[^}]*\}\{[^}]*\}'),
    re.compile(r'\\renewcommand\{[^}]*\}\{[^}]*\}'),
    re.compile(r'\\begin\{document\}'),
    re.compile(r'\\end\{document\}'),
    re.compile(r'\\begin\{abstract\}.*?\\end\{abstract\}', re.DOTALL),
    re.compile(r'\\maketitle'),
]

# Tables are out of scope; drop them with their contents
TABLE_PATTERNS = [
    re.compile(r'\\begin\{table\*?\}.*?\\end\{table\*?\}', re.DOTALL),
    re.compile(r'\\begin\{tabular\*?\}.*?\\end\{tabular\*?\}', re.DOTALL),
]

COMMENT_RE = re.compile(r'(?<!(?<!\\)\\)%[^\n]*')

FRONT_MATTER_FIELDS = ('title', 'author', 'date')


@dataclass
class FrontMatter:
    title: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = None

    def __bool__(self):
        return any((self.title, self.author, self.date))

    def to_html(self) -> str:
        """Header block: title heading, author byline, muted date."""
        html = ""
        if self.title:
            html += f'<h1 class="{config.CSS_CLASSES["title"]}">{self.title}</h1>\n'
        if self.author:
            html += f'<p class="{config.CSS_CLASSES["author"]}">{self.author}</p>\n'
        if self.date:
            html += f'<p class="{config.CSS_CLASSES["date"]}">{self.date}</p>\n'
        return html


def strip_comments(content: str) -> str:
    return COMMENT_RE.sub('', content)


def extract_front_matter(content: str) -> tuple:
    """
    Capture the first \\title, \\author and \\date and remove every occurrence.
    Returns: (content: str, front_matter: FrontMatter)
    """
    front = FrontMatter()
    for field in FRONT_MATTER_FIELDS:
        setattr(front, field, find_argument(content, field))
        content = replace_command(content, (field,), lambda _name, _args: '')
    return content, front


def strip_preamble(content: str) -> tuple:
    """
    Remove preamble directives, tables and comments; lift front-matter.
    Returns: (content: str, front_matter: FrontMatter)
    """
    content = strip_comments(content)
    for pattern in PREAMBLE_PATTERNS + TABLE_PATTERNS:
        content = pattern.sub('', content)
    return extract_front_matter(content)
