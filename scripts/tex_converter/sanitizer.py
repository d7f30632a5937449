#!/usr/bin/env python3
"""
Fallback sanitizer.
Strips every LaTeX command the transformer did not recognise, so no raw
backslash syntax reaches the output. Lossy by intent: the argument of an
unknown command is dropped together with the command.
"""
import re

from .formatting import replace_command

# Any command name; the argument is matched with balanced braces
ANY_COMMAND = r'[a-zA-Z]+'
BARE_COMMAND_RE = re.compile(r'\\[a-zA-Z]+\*?')
# Backslash + symbol. A backslash right before generated markup goes alone.
SYMBOL_RE = re.compile(r'\\(?:(?=<)|[^a-zA-Z<]|$)')
BRACES_RE = re.compile(r'[{}]')


def strip_commands_with_args(content: str) -> str:
    """\\cmd{arg}, \\cmd*[opt]{arg}; nested groups go with the outer argument."""
    return replace_command(content, (ANY_COMMAND,), lambda _name, _args: '')


def strip_bare_commands(content: str) -> str:
    return BARE_COMMAND_RE.sub('', content)


def strip_symbol_commands(content: str) -> str:
    return SYMBOL_RE.sub('', content)


def strip_braces(content: str) -> str:
    """Drop leftover grouping braces; literal braces are entities by now."""
    return BRACES_RE.sub('', content)


def sanitize(content: str) -> str:
    content = strip_commands_with_args(content)
    content = strip_bare_commands(content)
    content = strip_symbol_commands(content)
    return strip_braces(content)
