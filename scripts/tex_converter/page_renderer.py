#!/usr/bin/env python3
"""
Page renderer - standalone HTML page generation.
Wraps a converted fragment in a full document. When math is left to the
browser, the page loads KaTeX and renders every data-math container.
"""
import html

from . import config


def get_common_head(title: str, client_math: bool = True) -> str:
    """<head> content: metadata, plus the KaTeX assets when math renders client-side."""
    head = f"""<meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{html.escape(title)}</title>"""
    if client_math:
        cdn = f"https://cdn.jsdelivr.net/npm/katex@{config.KATEX_VERSION}/dist"
        head += f"""
    <link rel="stylesheet" href="{cdn}/katex.min.css">
    <script defer src="{cdn}/katex.min.js"></script>"""
    return head


def get_js_footer() -> str:
    """Typeset math containers in place; a bad expression shows its source."""
    return """<script>
    document.addEventListener('DOMContentLoaded', function () {
        document.querySelectorAll('[data-math]').forEach(function (elem) {
            var tex = elem.getAttribute('data-math') || '';
            var isDisplay = elem.getAttribute('data-display') === 'true';
            try {
                katex.render(tex, elem, { displayMode: isDisplay, throwOnError: false });
            } catch (err) {
                console.error('KaTeX error:', err);
                elem.textContent = tex;
            }
        });
    });
    </script>"""


def render_page_html(title: str, body_content: str, client_math: bool = True,
                     extra_styles: str = "") -> str:
    """
    Unified page renderer - the only function that creates the HTML skeleton.

    Args:
        title: Page title
        body_content: Converted HTML fragment
        client_math: Load KaTeX and render data-math containers in the browser.
                     Pass False when math was already typeset server-side.
        extra_styles: Additional CSS styles
    """
    head_html = get_common_head(title, client_math)
    js_html = get_js_footer() if client_math else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    {head_html}
    <style>{extra_styles}</style>
</head>
<body>
    <main class="content-scroll" id="content_area">
        <div class="prose-tex space-y-4" id="doc_content">
            <!-- content-start -->
            {body_content}
            <!-- content-end -->
        </div>
    </main>
    {js_html}
</body>
</html>"""
