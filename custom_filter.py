import re
from pandocfilters import toJSONFilter, RawInline, RawBlock

from tex_converter import convert_fragment, convert_latex_to_html

# Base path for image assets, matching the web host's layout
IMAGE_PATH_PREFIX = "/assets/"

# Raw LaTeX that only configures the document and has no HTML output
PREAMBLE_ONLY = re.compile(r'^\s*\\(?:documentclass|usepackage|geometry|pagestyle|setcounter|renewcommand)\b')


def convert_raw_block(content):
    """Convert a raw LaTeX block (environment, paragraph) into HTML."""
    if PREAMBLE_ONLY.match(content):
        return RawBlock("html", "")
    return RawBlock("html", convert_latex_to_html(content, asset_base=IMAGE_PATH_PREFIX))


def convert_raw_inline(content):
    """Convert inline raw LaTeX (\\cite, \\ref, \\includegraphics...) into HTML."""
    return RawInline("html", convert_fragment(content, asset_base=IMAGE_PATH_PREFIX))


def custom_filter(key, value, format, meta):
    """Main filter function: hand raw LaTeX that pandoc could not parse to the converter."""
    if format not in ("html", "html4", "html5"):
        return None

    if key == "RawBlock" and value[0] in ("latex", "tex"):
        return convert_raw_block(value[1])

    if key == "RawInline" and value[0] in ("latex", "tex"):
        return convert_raw_inline(value[1])

    return None

if __name__ == "__main__":
    toJSONFilter(custom_filter)
