import pytest

from mkproj.cli import default_config_path, main, parse_define
from mkproj.support import MkprojError


def test_parse_define_pair():
    assert parse_define("name=value") == ("name", "value")


def test_parse_define_without_value():
    assert parse_define("name") == ("name", "")


def test_parse_define_keeps_only_second_piece():
    assert parse_define("a=b=c") == ("a", "b")
    assert parse_define("=a=b") == ("a", "b")


@pytest.mark.parametrize("text", ["", "=", "=="])
def test_parse_define_rejects_empty(text):
    with pytest.raises(MkprojError, match="Format of -D"):
        parse_define(text)


def test_default_config_path(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_config_path() == f"{tmp_path}/.mkproj"


def test_main_runs_config(tmp_path, capsys):
    config = tmp_path / "conf"
    config.write_text("@@other:\n> wrong\n@@web:\n> $name\n@@end:\n")
    code = main(["-c", str(config), "-t", "web", "-D", "name=val"])
    assert code == 0
    assert capsys.readouterr().out == "val"


def test_main_uses_home_config(monkeypatch, tmp_path, capsys):
    (tmp_path / ".mkproj").write_text("@@lib:\n> built\n")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert main(["-t", "lib"]) == 0
    assert capsys.readouterr().out == "built"


def test_main_requires_type(tmp_path, capsys):
    assert main(["-c", str(tmp_path / "conf")]) == 1
    assert "No type specified." in capsys.readouterr().err


def test_main_missing_config(tmp_path, capsys):
    missing = tmp_path / "absent"
    assert main(["-c", str(missing), "-t", "x"]) == 1
    assert f"Could not read config ({missing})." in capsys.readouterr().err


def test_main_reports_script_errors(tmp_path, capsys):
    config = tmp_path / "conf"
    config.write_text("@@t:\nbad command\n")
    assert main(["-c", str(config), "-t", "t"]) == 1
    assert "Invalid command 'bad'" in capsys.readouterr().err