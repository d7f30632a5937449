#!/usr/bin/env python3
"""
TeX -> HTML Converter
=====================

Turns LaTeX documents into HTML fragments or standalone pages, with math
left to KaTeX in the browser or typeset to MathML up front.

This script is the CLI entry point when the package is not installed.

Usage:
    python run_converter.py paper.tex                       # -> html_output/paper.html
    python run_converter.py chapters/ --output-dir site     # every .tex under chapters/
    python run_converter.py paper.tex --render-math         # MathML instead of KaTeX

Features:
    - Sections, lists, figure captions, verbatim blocks
    - Inline and display math preserved for the math engine
    - Title/author/date header
    - Unknown commands dropped instead of leaking into the page
"""

import sys
import os

# Ensure the scripts directory is in the path
script_dir = os.path.dirname(os.path.abspath(__file__))
if script_dir not in sys.path:
    sys.path.insert(0, script_dir)


def main():
    """Main entry point for the converter."""
    from tex_converter import run_with_args
    return run_with_args()


if __name__ == "__main__":
    sys.exit(main())
