import pytest

from asa.cli import main


@pytest.fixture
def source_file(tmp_path):
    def write(code, name="program.asa"):
        path = tmp_path / name
        path.write_text(code, encoding="utf-8")
        return str(path)
    return write


def test_runs_program(source_file, capsys):
    assert main([source_file('print("hello")\n')]) == 0
    captured = capsys.readouterr()
    assert captured.out == "hello\n"
    assert captured.err == ""


def test_requires_asa_suffix(source_file, capsys):
    assert main([source_file('print("hello")', name="program.txt")]) == 1
    captured = capsys.readouterr()
    assert "files must end in .asa" in captured.err
    assert captured.out == ""


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.asa")]) == 1
    assert "could not read" in capsys.readouterr().err


def test_parse_error(source_file, capsys):
    assert main([source_file("let x = ;\n")]) == 1
    assert "parse error" in capsys.readouterr().err


def test_evaluation_error(source_file, capsys):
    assert main([source_file("nope()\n")]) == 1
    assert "Undefined function nope" in capsys.readouterr().err


def test_recursion_error(source_file, capsys):
    assert main([source_file("fn f() { return f(); }\nf()\n")]) == 1
    assert "maximum recursion depth exceeded" in capsys.readouterr().err


def test_tree_flag_prints_plain_tree(source_file, capsys, monkeypatch):
    monkeypatch.delenv("ASA_PPRINT_OPTIONS", raising=False)
    assert main([source_file('print("hello")'), "--tree"]) == 0
    out = capsys.readouterr().out
    assert out == (
        "Program\n"
        "  Statement\n"
        "    FunctionCall print\n"
        "      FunctionArguments\n"
        "        Expression\n"
        '          String "hello"\n'
        "hello\n"
    )


def test_bad_recursion_limit(source_file, capsys, monkeypatch):
    monkeypatch.setenv("ASA_RECURSION_LIMIT", "lots")
    assert main([source_file("1")]) == 1
    assert "ASA_RECURSION_LIMIT must be an integer" in capsys.readouterr().err


def test_debug_flag_prints_traceback(source_file, capsys):
    assert main([source_file("1 / 0"), "--debug"]) == 1
    err = capsys.readouterr().err
    assert "Traceback" in err
    assert "Error: Division by zero" in err


def test_tree_options_from_environment(source_file, capsys, monkeypatch):
    monkeypatch.setenv("ASA_PPRINT_OPTIONS", '{"indent": 4, "max_depth": 2}')
    assert main([source_file('print("hello")'), "--tree"]) == 0
    assert capsys.readouterr().out == (
        "Program\n"
        "    Statement\n"
        "        ...\n"
        "hello\n"
    )


def test_tree_ignores_invalid_options(source_file, capsys, monkeypatch):
    monkeypatch.setenv("ASA_PPRINT_OPTIONS", "{not json")
    assert main([source_file("1"), "--tree"]) == 0
    assert capsys.readouterr().out == "Program\n  Expression\n    Number 1\n"
