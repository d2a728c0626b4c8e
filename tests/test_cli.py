import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from clue.cluec import main  # noqa: E402


PROGRAM = "global a = 1; print(a); a = 2; print(a);\n"
EXPECTED = "a = 1;\nprint(a);\na = 2;\nprint(a);\n"


def test_compile_single_file(tmp_path):
    src = tmp_path / "prog.clue"
    src.write_text(PROGRAM, encoding="utf-8")
    assert main([str(src)]) == 0
    assert (tmp_path / "prog.lua").read_text(encoding="utf-8") == EXPECTED


def test_compile_with_output_name(tmp_path):
    src = tmp_path / "prog.clue"
    src.write_text(PROGRAM, encoding="utf-8")
    out = tmp_path / "renamed.lua"
    assert main([str(src), str(out)]) == 0
    assert out.read_text(encoding="utf-8") == EXPECTED
    assert not (tmp_path / "prog.lua").exists()


def test_compile_directory_recursively(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "one.clue").write_text("global x = 1;", encoding="utf-8")
    (tmp_path / "sub" / "two.clue").write_text("print(3);", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("global y = ;", encoding="utf-8")
    assert main([str(tmp_path)]) == 0
    assert (tmp_path / "one.lua").read_text(encoding="utf-8") == "x = 1;\n"
    assert (tmp_path / "sub" / "two.lua").read_text(encoding="utf-8") == "print(3);\n"


def test_dontsave_and_output(tmp_path, capsys):
    src = tmp_path / "prog.clue"
    src.write_text(PROGRAM, encoding="utf-8")
    assert main([str(src), "--dontsave", "--output"]) == 0
    assert capsys.readouterr().out == EXPECTED
    assert not (tmp_path / "prog.lua").exists()


def test_pathiscode_prints_result(capsys):
    assert main(["--pathiscode", PROGRAM]) == 0
    assert capsys.readouterr().out == EXPECTED


def test_tokens_and_struct_dump(capsys):
    assert main(["-p", "global a = 1;", "--tokens", "--struct", "-D"]) == 0
    out = capsys.readouterr().out
    assert "KEYWORD_GLOBAL\t'global'\t(line 1)" in out
    assert "Declaration(" in out


def test_compile_error_reports_and_fails(tmp_path, capsys):
    src = tmp_path / "bad.clue"
    src.write_text("global a = 1;\nglobal a = 2;\n", encoding="utf-8")
    assert main([str(src)]) == 1
    err = capsys.readouterr().err
    assert f"Error in {src}:2:1!" in err
    assert "already declared" in err
    assert not (tmp_path / "bad.lua").exists()


def test_missing_path(tmp_path, capsys):
    assert main([str(tmp_path / "nope.clue")]) == 1
    assert "[cluec:error] path not found" in capsys.readouterr().err


def test_verbose_logs_steps(capsys):
    assert main(["-p", "print(1);", "-v"]) == 0
    out = capsys.readouterr().out
    assert "[cluec] lexing <code>..." in out
    assert "[cluec] emitting..." in out


def test_run_as_module(tmp_path):
    src = tmp_path / "prog.clue"
    src.write_text(PROGRAM, encoding="utf-8")
    result = subprocess.run(
        [sys.executable, "-m", "clue.cluec", str(src), "-D", "-o"],
        cwd=SRC,
        capture_output=True,
        text=True,
        timeout=30,
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout == EXPECTED


def test_bad_character_reported_before_syntax_error(capsys):
    assert main(["-p", "global = 1; @"]) == 1
    err = capsys.readouterr().err
    assert "Error in <code>:1:13!" in err
    assert "Unexpected character '@'" in err
