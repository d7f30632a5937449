import pytest
from bs4 import BeautifulSoup

from tex_converter.formatting import (
    convert_figures,
    convert_formatting,
    convert_images,
    convert_line_breaks,
    convert_lists,
    convert_references,
    convert_sections,
    normalize_escapes,
    replace_command,
    split_items,
    transform,
)


@pytest.mark.parametrize("command,tag", [
    ("section", "h2"),
    ("subsection", "h3"),
    ("subsubsection", "h4"),
    ("paragraph", "h5"),
])
def test_sections_map_to_heading_levels(command, tag):
    for star in ("", "*"):
        out = convert_sections(r"\%s%s{Title}" % (command, star))
        heading = BeautifulSoup(out, "html.parser").find(tag)
        assert heading.get_text() == "Title"
        assert out.startswith("\n\n") and out.endswith("\n\n")


def test_section_short_title_ignored():
    out = convert_sections(r"\section[Short]{Long title}")
    assert ">Long title</h2>" in out
    assert "Short" not in out


def test_nested_formatting():
    out = convert_formatting(r"\textbf{a \emph{b}}")
    assert out == '<strong class="font-bold">a <em class="italic">b</em></strong>'


@pytest.mark.parametrize("command", ["textit", "emph", "textsl"])
def test_italic_family_shares_wrapper(command):
    assert convert_formatting(r"\%s{x}" % command) == '<em class="italic">x</em>'


def test_span_formats_and_code():
    out = convert_formatting(r"\texttt{t} \textsc{s} \textrm{r} \textsf{f} \textup{u}")
    soup = BeautifulSoup(out, "html.parser")
    assert soup.code.get_text() == "t"
    assert [s.get_text() for s in soup.find_all("span")] == ["s", "r", "f", "u"]


def test_texorpdfstring_keeps_first_argument():
    assert convert_formatting(r"\texorpdfstring{$x$}{x}") == "$x$"


def test_unmatched_command_left_alone():
    assert replace_command(r"\textbf oops", ("textbf",), lambda n, a: "X") == r"\textbf oops"


def test_line_breaks():
    assert convert_line_breaks(r"a\\b\newline c\\[3pt]d") == "a<br />b<br /> c<br />d"


def test_itemize_items_in_order():
    items = split_items(r"\item First\item Second")
    assert items == [(None, "First"), (None, "Second")]


def test_items_spanning_lines_are_joined():
    body = "\n  \\item One\n  continues\n  \\item Two\n"
    assert [text for _, text in split_items(body)] == ["One continues", "Two"]


def test_item_formatting_reapplied():
    [(_, text)] = split_items(r"\item \textbf{B} and \textit{I}")
    assert text == '<strong class="font-bold">B</strong> and <em class="italic">I</em>'


def test_enumerate_labels():
    out = convert_lists(r"\begin{enumerate}\item a\item b\item c\end{enumerate}")
    soup = BeautifulSoup(out, "html.parser")
    labels = [li.find_all("span")[0].get_text() for li in soup.ol.find_all("li")]
    assert labels == ["1.", "2.", "3."]


def test_itemize_bullets_and_custom_label():
    out = convert_lists(r"\begin{itemize}\item a\item[(x)] b\end{itemize}")
    soup = BeautifulSoup(out, "html.parser")
    labels = [li.find_all("span")[0].get_text() for li in soup.ul.find_all("li")]
    assert labels == ["\u2022", "(x)"]


def test_nested_lists():
    src = "\\begin{itemize}\n\\item outer\n\\begin{enumerate}\n\\item inner\n\\end{enumerate}\n\\item last\n\\end{itemize}"
    soup = BeautifulSoup(convert_lists(src), "html.parser")
    outer = soup.find("ul")
    assert outer.find("ol").li.find_all("span")[1].get_text() == "inner"
    assert len(outer.find_all("li", recursive=False)) == 2


def test_citations_and_notes_are_inert():
    out = convert_references(r"a\footnote{note} b\cite{k} c\citep[p.~2]{k} d\citet{k}")
    assert out.count("[citation]") == 3
    assert "[*]" in out
    assert "note" not in out


def test_refs_and_labels_are_anchors():
    out = convert_references(r"\label{eq:1} see \ref{sec:a} and \eqref{eq:1}")
    soup = BeautifulSoup(out, "html.parser")
    anchors = soup.find_all("a")
    assert anchors[0]["id"] == "eq:1"
    assert anchors[1]["href"] == "#sec:a" and anchors[1].get_text() == "Ref. sec:a"
    assert anchors[2]["href"] == "#eq:1" and anchors[2].get_text() == "(eq:1)"


def test_figure_keeps_only_caption():
    src = (r"\begin{figure}[h]\centering\includegraphics[width=3in]{figs/plot.png}"
           r"\caption{A \emph{plot}}\label{fig:p}\end{figure}")
    out = transform(src, "/assets/")
    soup = BeautifulSoup(out, "html.parser")
    assert soup.figure.figcaption.get_text() == "A plot"
    assert "plot.png" not in out
    assert soup.find("img") is None


def test_figure_without_caption_is_dropped():
    assert convert_figures(r"x\begin{figure*}\includegraphics{a.png}\end{figure*}y") == "xy"


def test_image_outside_figure_uses_basename():
    out = convert_images(r"\includegraphics[width=0.5\linewidth]{images/sub/cat.jpg}", "/assets/")
    assert BeautifulSoup(out, "html.parser").img["src"] == "/assets/cat.jpg"


def test_symbol_escapes():
    out = normalize_escapes(r"\$5 \% \{x\} a\_b ``q'' 1--2 a---b \textbackslash{} R\&D")
    assert out == '$5 % &#123;x&#125; a_b "q" 1\u20132 a\u2014b &#92; R&amp;D'


@pytest.mark.parametrize("text", [
    r"\$5 and \% and \{\} and \_",
    r"``quoted'' --- and -- and \textbackslash",
    r"plain text ~ here",
])
def test_escape_normalization_is_idempotent(text):
    once = normalize_escapes(text)
    assert normalize_escapes(once) == once


def test_block_inside_wrapper_splits_it():
    out = convert_formatting("\\textbf{see \n\n\x02DISPLAY0\x03\n\n now}")
    assert out == ('<strong class="font-bold">see </strong>\n\n\x02DISPLAY0\x03\n\n'
                   '<strong class="font-bold"> now</strong>')
