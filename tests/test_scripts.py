import json
import pathlib

import pytest

import xtables.tools
from xtables import scripts
from xtables.commontypes import ToolUnavailable

XMODMAP = "keycode 10 = 1 exclam\nkeycode 38 = a A\nkeycode 67 = F1 F1\n"
XRDB = "*.color1:#fff\ndwm.color1:#000\n"


@pytest.fixture
def fake_tools(monkeypatch: pytest.MonkeyPatch):
    outputs = {"xmodmap": XMODMAP, "xrdb": XRDB}

    def fake_run_tool(argv):
        return outputs[argv[0]]

    monkeypatch.setattr(xtables.tools, "run_tool", fake_run_tool)
    return outputs


def test_keymap_keycode(fake_tools, capsys: pytest.CaptureFixture):
    assert scripts.keymap_cli(["--keycode", "38", "--modifier", "SHIFT"]) == 0
    assert capsys.readouterr().out == "A 'A'\n"


def test_keymap_function_key(fake_tools, capsys: pytest.CaptureFixture):
    assert scripts.keymap_cli(["--keycode", "67"]) == 0
    assert capsys.readouterr().out == "F1\n"


def test_keymap_char(fake_tools, capsys: pytest.CaptureFixture):
    assert scripts.keymap_cli(["--char", "!"]) == 0
    assert capsys.readouterr().out == "SHIFT 10\n"


def test_keymap_dump(fake_tools, capsys: pytest.CaptureFixture):
    assert scripts.keymap_cli([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert lines[0].split() == ["10", "KEY", "1", "'1'"]


def test_keymap_missing(fake_tools, capsys: pytest.CaptureFixture):
    assert scripts.keymap_cli(["--keycode", "99"]) == 1
    assert "error:" in capsys.readouterr().err


def test_keymap_invalid_format(fake_tools, capsys: pytest.CaptureFixture):
    fake_tools["xmodmap"] = "keycode = a\n"
    assert scripts.keymap_cli([]) == 1
    assert "Invalid xmodmap format" in capsys.readouterr().err


def test_resource_query(fake_tools, capsys: pytest.CaptureFixture):
    assert scripts.resource_cli(["dwm", "color1"]) == 0
    assert capsys.readouterr().out == "#000\n"
    assert scripts.resource_cli(["st", "color1"]) == 0
    assert capsys.readouterr().out == "#fff\n"


def test_resource_missing(fake_tools, capsys: pytest.CaptureFixture):
    assert scripts.resource_cli(["st", "font"]) == 1
    assert "st.font is not set" in capsys.readouterr().err


def test_resource_listing(fake_tools, capsys: pytest.CaptureFixture):
    assert scripts.resource_cli(["st"]) == 0
    assert capsys.readouterr().out == "color1: #fff\n"


def test_resource_tool_unavailable(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):
    def unavailable(argv):
        raise ToolUnavailable(argv[0])

    monkeypatch.setattr(xtables.tools, "run_tool", unavailable)
    assert scripts.resource_cli(["st", "font"]) == 1
    assert "Could not run xrdb" in capsys.readouterr().err


def test_resource_empty_command(fake_tools, tmp_path: pathlib.Path, capsys: pytest.CaptureFixture):
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps({"resource_command": []}))
    assert scripts.resource_cli(["--settings", str(settings_path), "dwm", "color1"]) == 1
    assert "Tool command must not be empty" in capsys.readouterr().err


@pytest.mark.parametrize("cli,args", ((scripts.keymap_cli, []), (scripts.resource_cli, ["dwm", "color1"])))
def test_missing_settings_file(fake_tools, tmp_path: pathlib.Path, capsys: pytest.CaptureFixture, cli, args):
    missing = tmp_path / "nope.json"
    assert cli(["--settings", str(missing)] + args) == 1
    assert capsys.readouterr().err.startswith("error:")
