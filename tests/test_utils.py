from tex_converter.utils import discover_sources, normalize_text, output_path_for, validate_output_safety


def test_normalize_text_replaces_ligatures():
    assert normalize_text("  ﬁnd the ﬂow ") == "find the flow"
    assert normalize_text("") == ""
    assert normalize_text(None) == ""


def test_discover_sources(tmp_path, capsys):
    (tmp_path / "a.tex").write_text("a")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.tex").write_text("b")
    (sub / "notes.txt").write_text("c")

    found = discover_sources([tmp_path, tmp_path / "a.tex", tmp_path / "missing.tex"])
    assert found == [tmp_path / "a.tex", sub / "b.tex"]
    assert "missing.tex not found" in capsys.readouterr().out


def test_output_path_for(tmp_path):
    assert output_path_for(tmp_path / "src" / "paper.tex", tmp_path) == tmp_path / "paper.html"


def test_validation_accepts_math_and_code():
    html = ('<p>See <span data-math="\\alpha" data-display="false"></span></p>'
            '<pre class="x"><code>\\begin{x}</code></pre><code>\\verb</code>')
    assert validate_output_safety(html, "ok.html") == (True, "")


def test_validation_rejects_leaked_command():
    ok, msg = validate_output_safety("<p>left \\emph over</p>", "bad.html")
    assert not ok
    assert "\\emph" in msg and "bad.html" in msg


def test_validation_rejects_placeholder():
    ok, msg = validate_output_safety("<p>\x02INLINE3\x03</p>", "bad.html")
    assert not ok
    assert "INLINE3" in msg
