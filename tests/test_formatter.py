import pytest

from moelist import __version__
from moelist.core.errors import MoelistError
from moelist.core.formatter import VERSION_MARKER, MoelistFormatter
from moelist.core.models import ArchiveInfo

MB = 1024 * 1024

INFOS = [
    ArchiveInfo("a", 35, ("txt",), 3, 1),
    ArchiveInfo("Big Album.zip", 1234567, ("flac", "cue", "log"), 12, 2),
    ArchiveInfo("scans.rar", 60 * MB, (), 0, 0),
]


def test_empty_list_renders_nothing():
    assert MoelistFormatter.get_preview_style([]) == ""
    assert MoelistFormatter.get_code_style([]) == ""
    assert MoelistFormatter.get_table_style([]) == ""
    for style in ("preview", "code", "table"):
        assert MoelistFormatter.render([], style) == ""


def test_preview_layout():
    text = MoelistFormatter.get_preview_style(INFOS[:1])
    lines = text.split("\n")
    assert lines[0] == "        Size Type Summary                  Extensions   Name"
    assert lines[1] == "------------ ---- ------------------------ ------------ ------------------------"
    assert lines[2] == (
        " " * 10 + "35" + " " + " XXS" + " " + "3 files, 1 folders" + " " * 6 + " " + "txt" + " " * 9 + " " + "a"
    )
    assert lines[3] == lines[1]
    assert lines[4] == " " * 10 + "35" + " " * 6 + "3 files, 1 folders"
    assert len(lines) == 5


def test_preview_groups_thousands_and_totals():
    text = MoelistFormatter.get_preview_style(INFOS)
    lines = text.split("\n")
    assert lines[3].startswith("   1,234,567  XXS 12 files, 2 folders     ")
    assert "flac, cue, log Big Album.zip" in lines[3]
    assert lines[4].startswith("  62,914,560    S 0 files, 0 folders")
    assert lines[4].endswith(" scans.rar")
    total = 35 + 1234567 + 60 * MB
    assert lines[-1] == f"{total:>12,}      15 files, 3 folders"


def test_rows_follow_input_order():
    reversed_text = MoelistFormatter.get_preview_style(list(reversed(INFOS)))
    rows = reversed_text.split("\n")[2:5]
    assert [r.rsplit(" ", 1)[-1] for r in rows] == ["scans.rar", "Album.zip", "a"]


def test_code_style_wraps_preview():
    text = MoelistFormatter.get_code_style(INFOS)
    lines = text.split("\n")
    assert lines[0] == "[quote][font=courier new, courier, monospace]"
    assert lines[1] == VERSION_MARKER == f"moelist v{__version__}"
    assert "\n".join(lines[2:-1]) == MoelistFormatter.get_preview_style(INFOS)
    assert lines[-1] == "[/font][/quote]"


def test_table_style():
    text = MoelistFormatter.get_table_style(INFOS[:2])
    lines = text.split("\n")
    assert lines[0] == "[quote]"
    assert lines[1] == VERSION_MARKER
    assert lines[2] == (
        "[table=100%][tr][td]档案[/td]"
        "[td][align=right]体积[/align][/td]"
        "[td][align=right]体积类型[/align][/td]"
        "[td][align=right]文件数[/align][/td]"
        "[td][align=right]文件夹数[/align][/td]"
        "[td]扩展名[/td][/tr]"
    )
    assert lines[3] == (
        "[tr][td]a[/td][td][align=right]35[/align][/td]"
        "[td][align=right]XXS[/align][/td][td][align=right]3[/align][/td]"
        "[td][align=right]1[/align][/td][td]txt[/td][/tr]"
    )
    assert lines[4].startswith("[tr][td]Big Album.zip[/td][td][align=right]1,234,567[/align][/td]")
    assert lines[4].endswith("[td]flac, cue, log[/td][/tr]")
    assert lines[5] == (
        "[tr][td]总计[/td][td][align=right]1,234,602[/align][/td][td][/td]"
        "[td][align=right]15[/align][/td][td][align=right]3[/align][/td]"
        "[td][/td][/tr][/table]"
    )
    assert lines[6] == "[/quote]"
    assert len(lines) == 7


def test_render_dispatch_and_unknown_style():
    assert MoelistFormatter.render(INFOS, "table") == MoelistFormatter.get_table_style(INFOS)
    with pytest.raises(MoelistError):
        MoelistFormatter.render(INFOS, "html")
