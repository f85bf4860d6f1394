import pytest

from klondike import help_data
from klondike.help_data import HelpContent, available_help_ids, get_help_content


def test_klondike_rules_are_available() -> None:
    assert "klondike" in available_help_ids()
    content = get_help_content()
    assert content.title == "Klondike Rules"
    assert any("Empty tableau slots accept only Kings" in line for line in content.lines)
    assert any("-100 recycle waste" in line for line in content.lines)


def test_unknown_game_id_raises_key_error() -> None:
    with pytest.raises(KeyError):
        get_help_content("spider")


def test_unknown_locale_raises_file_not_found() -> None:
    with pytest.raises(FileNotFoundError):
        get_help_content(locale="xx")


def test_malformed_help_file_is_reported(tmp_path, monkeypatch) -> None:
    (tmp_path / "help_en.json").write_text('{"klondike": {"title": 3, "lines": []}}', encoding="utf-8")
    monkeypatch.setattr(help_data, "_HELP_DIR", str(tmp_path))
    help_data._load_locale.cache_clear()
    try:
        with pytest.raises(TypeError):
            get_help_content()
    finally:
        help_data._load_locale.cache_clear()


def test_wrapped_keeps_paragraph_breaks_and_width() -> None:
    content = HelpContent(
        title="T",
        lines=("one two three four five six", "", "seven"),
    )
    assert content.wrapped() == ["one two three four five six", "", "seven"]
    wrapped = content.wrapped(9)
    assert wrapped == ["one two", "three", "four five", "six", "", "seven"]
    assert all(len(line) <= 9 for line in wrapped)


def test_default_wrap_width_comes_from_file() -> None:
    content = get_help_content()
    assert content.max_width is not None
    assert all(len(line) <= content.max_width for line in content.wrapped())


@pytest.mark.parametrize("width", [0, -4])
def test_wrap_width_must_be_positive(width: int) -> None:
    content = HelpContent(title="T", lines=("x " * 50,), max_width=10)
    with pytest.raises(ValueError):
        content.wrapped(width)


@pytest.mark.parametrize(
    "payload",
    [
        '{"klondike": {"title": "T"}}',
        '{"klondike": {"title": "T", "lines": "not a list"}}',
        '{"klondike": {"title": "T", "lines": ["ok", 4]}}',
        '{"klondike": {"title": "T", "lines": [], "max_width": "wide"}}',
        '{"klondike": ["T"]}',
    ],
)
def test_incomplete_rules_entries_are_reported(tmp_path, monkeypatch, payload: str) -> None:
    (tmp_path / "help_en.json").write_text(payload, encoding="utf-8")
    monkeypatch.setattr(help_data, "_HELP_DIR", str(tmp_path))
    help_data._load_locale.cache_clear()
    try:
        with pytest.raises(TypeError):
            get_help_content()
    finally:
        help_data._load_locale.cache_clear()
