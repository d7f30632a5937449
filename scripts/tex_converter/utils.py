#!/usr/bin/env python3
"""
Utility functions for the converter CLI.
Includes text normalization, source discovery, output paths and validation.
"""
import re
from pathlib import Path

from . import config

EXEMPT_RES = [
    re.compile(r'<pre\b.*?</pre>', re.DOTALL),
    re.compile(r'<code\b.*?</code>', re.DOTALL),
    re.compile(r'<(span|div)\b[^>]*data-math[^>]*>.*?</\1>', re.DOTALL),
]
RAW_COMMAND_RE = re.compile(r'\\[a-zA-Z]+')
PLACEHOLDER_RE = re.compile(r'%s([A-Z]+\d+)%s' % (config.TOKEN_OPEN, config.TOKEN_CLOSE))


def normalize_text(text: str) -> str:
    """Normalize text by replacing ligatures."""
    if not text:
        return ""
    for lig, rep in config.LIGATURES.items():
        text = text.replace(lig, rep)
    return text.strip()


def discover_sources(inputs) -> list:
    """Expand files and directories into a sorted, de-duplicated list of .tex files."""
    found = []
    for raw in inputs:
        p = Path(raw)
        if p.is_dir():
            found.extend(sorted(p.rglob("*.tex")))
        elif p.is_file():
            found.append(p)
        else:
            print(f"  Warning: {p} not found, skipping")
    unique = []
    for p in found:
        if p not in unique:
            unique.append(p)
    return unique


def output_path_for(source: Path, output_dir: Path) -> Path:
    return output_dir / f"{source.stem}.html"


def validate_output_safety(html_content: str, filename: str) -> tuple:
    """
    Validates that converted HTML is safe to write.
    Returns: (is_safe: bool, error_message: str)
    """
    # Check 1: No unrestored placeholders
    m = PLACEHOLDER_RE.search(html_content)
    if m:
        return False, f"Unrestored math placeholder {m.group(1)} in {filename}"

    # Check 2: No raw LaTeX commands outside math and code
    text = html_content
    for pattern in EXEMPT_RES:
        text = pattern.sub('', text)
    leftover = RAW_COMMAND_RE.search(text)
    if leftover:
        return False, f"Raw LaTeX command {leftover.group(0)} leaked into {filename}"

    return True, ""
