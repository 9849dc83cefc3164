"""Unit tests for section alias resolution."""

from __future__ import annotations

from chatgate.routing.aliases import (
    section_label,
    sidebar_sections,
    resolve_section_path,
)


def test_exact_alias_resolves() -> None:
    assert resolve_section_path("задачи") == "/tasks"
    assert resolve_section_path("Settings") == "/settings"
    assert resolve_section_path("  новости  ") == "/news"


def test_open_verb_is_stripped_before_lookup() -> None:
    assert resolve_section_path("открой настройки") == "/settings"
    assert resolve_section_path("go to news") == "/news"


def test_action_verb_never_resolves() -> None:
    assert resolve_section_path("создай задачи") is None
    assert resolve_section_path("add tasks") is None


def test_direct_path_must_match_exactly() -> None:
    assert resolve_section_path("/settings/telegram") == "/settings/telegram"
    assert resolve_section_path("/unknown") is None


def test_whole_word_alias_inside_phrase() -> None:
    assert resolve_section_path("мои задачи") == "/tasks"


def test_short_alias_does_not_word_match() -> None:
    # "tg" is shorter than the whole-word minimum
    assert resolve_section_path("send tg message now please") is None


def test_fuzzy_match_tolerates_typo() -> None:
    assert resolve_section_path("настройкм") == "/settings"
    assert resolve_section_path("telegran") == "/settings/telegram"


def test_fuzzy_match_rejects_distant_input() -> None:
    assert resolve_section_path("погода") is None


def test_empty_input_resolves_to_nothing() -> None:
    assert resolve_section_path("") is None
    assert resolve_section_path("   ") is None
    assert resolve_section_path("?!") is None


def test_resolution_is_deterministic() -> None:
    inputs = ["задачи", "настройкм", "открой новости", "что-то странное"]
    first = [resolve_section_path(text) for text in inputs]
    second = [resolve_section_path(text) for text in inputs]
    assert first == second


def test_dotted_section_id_resolves() -> None:
    assert resolve_section_path("settings.telegram") == "/settings/telegram"
    assert resolve_section_path("settings.password") == "/settings/password"


def test_fuzzy_match_respects_distance_cap() -> None:
    # "taskz" is one edit from "tasks"; "tazzz" is too far from every alias
    assert resolve_section_path("taskz") == "/tasks"
    assert resolve_section_path("tazzz") is None


def test_section_label_falls_back_to_path() -> None:
    assert section_label("/tasks") == "Tasks"
    assert section_label("/nowhere") == "/nowhere"


def test_sidebar_sections_in_catalogue_order() -> None:
    assert [section.id for section in sidebar_sections()] == ["today", "news", "tasks"]
