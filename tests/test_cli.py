from sprig import config
from sprig.cli import build_parser, main

import pytest


def test_cli_evaluates_file(tmp_path, capsys):
    script = tmp_path / "prog.lisp"
    script.write_text("(def x 2)\n(* x 21)\n")
    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "42\n"


def test_cli_reports_errors(tmp_path, capsys):
    script = tmp_path / "bad.lisp"
    script.write_text("(car 1)")
    assert main([str(script)]) == 1
    assert "error:" in capsys.readouterr().err


def test_cli_rejects_bad_addr(capsys):
    assert main(["--server", "--addr", "nowhere"]) == 2


def test_repl_and_server_are_exclusive():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--repl", "--server"])


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv("SPRIG_SERVER_ADDR", "0.0.0.0:9000")
    monkeypatch.setenv("SPRIG_TRACE", "yes")
    monkeypatch.setenv("SPRIG_LOG_LEVEL", "debug")
    assert config.get_server_addr() == ("0.0.0.0", 9000)
    assert config.trace_enabled() is True
    assert config.get_log_level() == 10


def test_config_defaults(monkeypatch):
    for var in ("SPRIG_SERVER_ADDR", "SPRIG_TRACE", "SPRIG_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_server_addr() == ("127.0.0.1", 8081)
    assert config.trace_enabled() is False
    assert config.get_log_level() == 30


def test_cli_prints_self_containing_list(tmp_path, capsys):
    script = tmp_path / "cycle.lisp"
    script.write_text("(def x (list 1))\n(push x x)\n")
    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "(1 (...))\n"
