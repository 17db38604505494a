import io
import json
import subprocess
import sys
from pathlib import Path

import pytest

from taghelper.cli import main

REPO_ROOT = Path(__file__).resolve().parents[1]

DOCUMENT = """
nodes:
  - tag: ul
    attrs:
      class: list
      id: null
    children:
      - tag: li
        text: a & b
      - tag: li
        children:
          - x
"""


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_render_prints_html(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    doc = _write(tmp_path / "page.yaml", DOCUMENT)

    main(["render", "--in", str(doc)])

    out = capsys.readouterr().out
    assert out == '<ul class="list"><li>a &amp; b</li><li>x</li></ul>\n'


def test_render_writes_output_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    doc = _write(tmp_path / "page.yaml", DOCUMENT)
    out_path = tmp_path / "out" / "page.html"

    main(["render", "--in", str(doc), "--out", str(out_path)])

    assert out_path.read_text(encoding="utf-8") == '<ul class="list"><li>a &amp; b</li><li>x</li></ul>\n'
    assert "Wrote 1 node(s)" in capsys.readouterr().out


def test_render_accepts_json_node_list(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    doc = tmp_path / "page.json"
    doc.write_text(json.dumps([{"tag": "input", "attrs": {"disabled": True, "name": "q"}, "void": True}]), encoding="utf-8")

    main(["render", "--in", str(doc)])

    assert capsys.readouterr().out == '<input disabled="disabled" name="q" />\n'


def test_render_without_escaping(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    doc = _write(
        tmp_path / "page.yaml",
        "nodes:\n  - tag: p\n    attrs:\n      title: 'a \"b\" <c>'\n    text: hi\n",
    )

    main(["render", "--in", str(doc), "--no-escape"])

    assert capsys.readouterr().out == '<p title="a &quot;b&quot; <c>">hi</p>\n'


def test_document_can_disable_escaping(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    doc = _write(tmp_path / "page.yaml", "escape: false\nnodes:\n  - tag: my tag\n")

    main(["render", "--in", str(doc)])

    assert capsys.readouterr().out == "<my tag></my tag>\n"


def test_render_rejects_invalid_documents(tmp_path: Path) -> None:
    doc = _write(tmp_path / "bad.yaml", "nodes:\n  - text: no tag\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["render", "--in", str(doc)])
    assert "Invalid markup document" in str(excinfo.value)


def test_render_rejects_unparseable_documents(tmp_path: Path) -> None:
    doc = _write(tmp_path / "bad.json", "{not json")

    with pytest.raises(SystemExit) as excinfo:
        main(["render", "--in", str(doc)])
    assert "Could not parse" in str(excinfo.value)


def test_render_rejects_non_utf8_documents(tmp_path: Path) -> None:
    doc = tmp_path / "latin1.yaml"
    doc.write_bytes(b"nodes:\n  - tag: p\n    text: caf\xe9 \xff\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["render", "--in", str(doc)])
    assert "Could not read" in str(excinfo.value)


def test_render_rejects_directories(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["render", "--in", str(tmp_path)])
    assert "Could not read" in str(excinfo.value)


def test_render_missing_document(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["render", "--in", str(tmp_path / "missing.yaml")])
    assert "Document not found" in str(excinfo.value)


def test_render_empty_document_warns(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    doc = _write(tmp_path / "empty.yaml", "")

    main(["render", "--in", str(doc)])

    captured = capsys.readouterr()
    assert "nothing to render" in captured.err
    assert captured.out == "\n"


def test_escape_command(capsys: pytest.CaptureFixture[str]) -> None:
    main(["escape", "1 < 2 &amp; 3"])
    assert capsys.readouterr().out == "1 &lt; 2 &amp; 3\n"


def test_escape_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("<tag>"))
    main(["escape"])
    assert capsys.readouterr().out == "&lt;tag&gt;\n"


def test_cdata_command_warns_on_terminator(capsys: pytest.CaptureFixture[str]) -> None:
    main(["cdata", "a ]]> b"])
    captured = capsys.readouterr()
    assert captured.out == "<![CDATA[a ]]> b]]>\n"
    assert "terminates the CDATA section" in captured.err


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    main([])
    assert "usage: taghelper" in capsys.readouterr().out


def test_module_entrypoint() -> None:
    result = subprocess.run(
        [sys.executable, "-m", "taghelper.cli", "cdata", "<hello>"],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout == "<![CDATA[<hello>]]>\n"
