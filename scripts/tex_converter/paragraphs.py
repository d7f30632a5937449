#!/usr/bin/env python3
"""
Paragraph segmentation.
Wraps blank-line separated text runs in <p>, leaving block-level markup alone.
"""
import re

from . import config
from .math_protection import is_block_token

SEGMENT_SPLIT_RE = re.compile(r'\n(?:[ \t]*\n)+')
BLOCK_START_RE = re.compile(r'^<(?:%s)(?![a-zA-Z0-9])' % '|'.join(config.BLOCK_TAGS), re.IGNORECASE)


def is_block(segment: str) -> bool:
    return bool(BLOCK_START_RE.match(segment)) or is_block_token(segment)


def paragraphize(content: str) -> str:
    """Split on blank lines; wrap every non-block, non-empty segment in <p>."""
    blocks = []
    for para in SEGMENT_SPLIT_RE.split(content):
        para = para.strip()
        if not para:
            continue

        # Don't wrap block elements
        if is_block(para):
            blocks.append(para)
            continue

        # A manual line wrap inside a source paragraph is not a break
        para = ' '.join(para.split())
        blocks.append(f'<p class="{config.CSS_CLASSES["paragraph"]}">{para}</p>')
    return "\n".join(blocks)
