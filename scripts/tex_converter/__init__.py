#!/usr/bin/env python3
"""
TeX Converter Package
=====================

This package turns a constrained subset of LaTeX into semantic HTML,
leaving math typesetting to KaTeX (in the browser) or to a MathML pass.

Modules:
    - config: Configuration constants and asset base
    - math_protection: Math/verbatim tokenization and restoration
    - preamble: Preamble stripping and title/author/date extraction
    - formatting: Structural and formatting rewrites
    - sanitizer: Fallback removal of unknown commands
    - paragraphs: Paragraph segmentation
    - core: The conversion pipeline
    - math_renderer: Server-side MathML typesetting
    - page_renderer: Standalone HTML page generation
    - utils: Utility functions (text normalization, discovery, validation)

Usage:
    from tex_converter import convert_latex_to_html
    html = convert_latex_to_html(r"\\section{Intro} Hello $x^2$ world.")

    # Or convert files from the command line:
    tex-converter paper.tex --output-dir html_output
"""

__version__ = "1.0.0"

import re
import sys
from pathlib import Path

from tqdm import tqdm


def run(inputs, output_dir=None, asset_base: str = "", render: bool = False,
        fragment: bool = False) -> int:
    """
    Convert every .tex file found in inputs and write one .html per source.

    Args:
        inputs: Files and/or directories to search for .tex sources.
        output_dir: Destination directory (defaults to config.HTML_OUTPUT_DIR).
        asset_base: Base path for image references (e.g. "/assets/").
        render: Typeset math to MathML server-side instead of via KaTeX.
        fragment: Write the bare fragment without the page skeleton.

    Returns:
        Process exit code: 0 ok, 2 no sources, 3 some outputs failed.
    """
    from . import config
    from .core import convert
    from .math_renderer import render_math
    from .page_renderer import render_page_html
    from .utils import discover_sources, normalize_text, output_path_for, validate_output_safety

    if asset_base:
        asset_base = asset_base if asset_base.endswith('/') else asset_base + '/'
        print(f"--> Using asset base: {asset_base}")
    else:
        asset_base = config.get_asset_base()

    out_dir = Path(output_dir) if output_dir else config.HTML_OUTPUT_DIR
    sources = discover_sources(inputs)
    if not sources:
        print("ERROR: No .tex sources found", file=sys.stderr)
        return 2

    out_dir.mkdir(parents=True, exist_ok=True)
    failures = 0
    for src in tqdm(sources, desc="Converting", unit="file"):
        try:
            source = normalize_text(src.read_text(encoding='utf-8', errors='replace'))
        except OSError as e:
            print(f"ERROR: Could not read {src}: {e}", file=sys.stderr)
            failures += 1
            continue

        result = convert(source, asset_base=asset_base)
        body = render_math(result.html) if render else result.html

        is_safe, error = validate_output_safety(body, src.name)
        if not is_safe:
            print(f"   [Skip] {error}", file=sys.stderr)
            failures += 1
            continue

        if not fragment:
            title = re.sub(r'<[^>]+>', '', result.front_matter.title or "") or src.stem
            body = render_page_html(title, body, client_math=not render)

        target = output_path_for(src, out_dir)
        target.write_text(body, encoding='utf-8')
        print(f"   [DONE] {src.name} -> {target}")

    return 3 if failures else 0


def run_with_args(argv=None) -> int:
    """
    Run the converter with command-line arguments.
    This is the CLI entry point.
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="Convert LaTeX documents into HTML with KaTeX-ready math.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    tex-converter paper.tex                      # -> html_output/paper.html
    tex-converter src/ --output-dir site         # every .tex under src/
    tex-converter paper.tex --render-math        # MathML instead of KaTeX
        """
    )
    parser.add_argument("inputs", nargs="+", help=".tex files or directories")
    parser.add_argument("--output-dir", default=None, help="Directory for generated HTML")
    parser.add_argument(
        "--asset-base",
        default="",
        help="Base path for images (default '/assets/')"
    )
    parser.add_argument("--render-math", action="store_true",
                        help="Typeset math to MathML instead of leaving it to KaTeX")
    parser.add_argument("--fragment", action="store_true",
                        help="Write the HTML fragment without the page skeleton")

    args = parser.parse_args(argv)
    return run(args.inputs, output_dir=args.output_dir, asset_base=args.asset_base,
               render=args.render_math, fragment=args.fragment)


def main() -> None:
    sys.exit(run_with_args())


# Export key functions and classes for direct imports
from .config import (
    HTML_OUTPUT_DIR,
    set_asset_base,
    get_asset_base,
)

from .core import (
    ConversionResult,
    convert,
    convert_fragment,
    convert_latex_to_html,
)

from .math_protection import (
    MathFragment,
    MathStore,
    protect_math,
    restore_math,
)

from .preamble import (
    FrontMatter,
    strip_preamble,
)

from .formatting import (
    transform,
    normalize_escapes,
)

from .sanitizer import (
    sanitize,
)

from .paragraphs import (
    paragraphize,
)

from .math_renderer import (
    render_math,
)

from .page_renderer import (
    render_page_html,
)

from .utils import (
    normalize_text,
    discover_sources,
    validate_output_safety,
)


__all__ = [
    # Main entry points
    'run',
    'run_with_args',
    'main',
    # Config
    'HTML_OUTPUT_DIR',
    'set_asset_base',
    'get_asset_base',
    # Pipeline
    'ConversionResult',
    'convert',
    'convert_fragment',
    'convert_latex_to_html',
    # Phases
    'MathFragment',
    'MathStore',
    'protect_math',
    'restore_math',
    'FrontMatter',
    'strip_preamble',
    'transform',
    'normalize_escapes',
    'sanitize',
    'paragraphize',
    # Rendering
    'render_math',
    'render_page_html',
    # Utils
    'normalize_text',
    'discover_sources',
    'validate_output_safety',
]
