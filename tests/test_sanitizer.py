import re

import pytest

from tex_converter.sanitizer import sanitize


def test_unknown_command_and_argument_discarded():
    assert sanitize(r"\unknowncmd{ignored} Visible") == " Visible"


def test_nested_unknown_commands_discarded():
    assert sanitize(r"\foo{a \bar{b}} c") == " c"


def test_optional_argument_discarded_too():
    assert sanitize(r"\foo*[opt]{x}y") == "y"


def test_bare_command_name_discarded():
    assert sanitize(r"\centering Text") == " Text"


def test_symbol_commands_discarded():
    assert sanitize(r"a\,b\;c\ d") == "abcd"


def test_grouping_braces_discarded():
    assert sanitize(r"{\bf grouped}") == " grouped"


def test_generated_markup_untouched():
    html = '<em class="italic">x</em> &#123;y&#125;'
    assert sanitize(html) == html


def test_backslash_before_markup_does_not_eat_tag():
    assert sanitize('\\<strong class="font-bold">x</strong>') == '<strong class="font-bold">x</strong>'


@pytest.mark.parametrize("text", [
    r"\a\b{c}\d[e]{f} \\ \{ \} \& \$ \% \_ \~{n} trailing \\",
    r"\begin{center}centered\end{center}",
    "\\",
])
def test_no_command_tokens_survive(text):
    out = sanitize(text)
    assert not re.search(r"\\[a-zA-Z]", out)
    assert "\\" not in out


def test_argument_with_plain_nested_group_discarded():
    assert sanitize(r"\unknowncmd{a {b} c} Visible") == " Visible"
    assert sanitize(r"\foo{x {y {z}} w}\bar*[o]{p {q}}end") == "end"


def test_unbalanced_argument_keeps_text():
    assert sanitize(r"\foo{open text") == "open text"
