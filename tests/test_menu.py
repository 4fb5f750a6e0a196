"""Tests for building menu trees"""

import pytest

from telemenu.core import config
from telemenu.core.exceptions import ConfigurationError, OverwriteConflict, PathTooLong
from telemenu.core.menu import Menu, MenuButton


def labels(menu):
    return [[button.label for button in row] for row in menu.keyboard]


def paths(menu):
    return [[button.path for button in row] for row in menu.keyboard]


@pytest.mark.parametrize("menu_id", ["a/b", "/", "root/", "/root"])
def test_slash_in_id_is_rejected(menu_id):
    with pytest.raises(ConfigurationError):
        Menu(menu_id)


@pytest.mark.parametrize("menu_id", ["", "root", "settings.main", "ünïcode", "a b"])
def test_ids_without_slash_are_accepted(menu_id):
    assert Menu(menu_id).id == menu_id


def test_new_menu_has_one_empty_row():
    menu = Menu("m")
    assert menu.keyboard == [[]]
    assert menu.paths == []
    assert menu.parent is None
    assert menu.children == {}


def test_auto_answer_defaults():
    assert Menu("m").auto_answer is config.MENU_AUTO_ANSWER
    assert Menu("m", auto_answer=False).auto_answer is False


def test_auto_answer_default_follows_config(monkeypatch):
    monkeypatch.setattr(config, "MENU_AUTO_ANSWER", False)
    assert Menu("m").auto_answer is False


def test_buttons_get_paths_in_insertion_order():
    menu = Menu("m")
    menu.text("A").text("B").row().text("C").row().row().text("D").text("E")

    assert labels(menu) == [["A", "B"], ["C"], [], ["D", "E"]]
    assert paths(menu) == [
        ["m/0/0", "m/0/1"],
        ["m/1/0"],
        [],
        ["m/3/0", "m/3/1"],
    ]
    assert len(set(menu.paths)) == 5


def test_builder_methods_are_chainable():
    child = Menu("child")
    menu = Menu("m")
    assert menu.row() is menu
    assert menu.text("x") is menu
    assert menu.sub_menu("c", child) is menu
    assert child.back("b") is child


def test_text_registers_handlers_in_order():
    first = lambda context, menu: None
    second = lambda context, menu: None
    menu = Menu("m").text("Go", first, second)

    assert menu.handlers_for("m/0/0") == [first, second]
    assert menu.handlers_for("m/0/1") is None


def test_text_without_handlers_registers_empty_chain():
    menu = Menu("m").text("Nothing")
    assert menu.handlers_for("m/0/0") == []


def test_keyboard_is_a_snapshot():
    menu = Menu("m").text("A")
    grid = menu.keyboard
    grid[0].append(MenuButton("X", "x/0/0"))
    grid.append([])
    assert labels(menu) == [["A"]]


def test_button_wire_form():
    assert MenuButton("Go", "root/0/0").to_dict() == {
        "label": "Go",
        "opaque_data": "root/0/0",
    }


def test_too_long_path_fails_at_registration():
    menu = Menu("x" * 60)
    menu.text("fits")  # x.../0/0 is 64 bytes
    menu.row()
    for _ in range(10):
        menu.text("fits")
    with pytest.raises(PathTooLong):
        menu.text("too far")  # x.../1/10 is 65 bytes
    assert len(menu.keyboard[1]) == 10


def test_sub_menu_sets_parent_and_child():
    root = Menu("root")
    sub = Menu("sub")
    root.sub_menu("Go", sub)

    assert sub.parent is root
    assert root.children == {"sub": sub}
    assert paths(root) == [["root/0/0"]]
    assert len(root.handlers_for("root/0/0")) == 1


def test_sub_menu_on_action_runs_first():
    action = lambda context, menu: None
    root = Menu("root")
    root.sub_menu("Go", Menu("sub"), on_action=action)

    handlers = root.handlers_for("root/0/0")
    assert len(handlers) == 2
    assert handlers[0] is action


def test_sub_menu_second_parent_conflicts():
    first = Menu("first")
    second = Menu("second")
    shared = Menu("shared")
    first.sub_menu("Shared", shared)

    with pytest.raises(OverwriteConflict, match="already added to 'first'"):
        second.sub_menu("Shared", shared)
    assert shared.parent is first
    assert second.children == {}
    assert second.paths == []


def test_sub_menu_waiver_skips_parent_edge():
    first = Menu("first")
    second = Menu("second")
    shared = Menu("shared")
    first.sub_menu("Shared", shared)
    second.sub_menu("Shared", shared, no_back_button=True)

    assert shared.parent is first
    assert second.children == {"shared": shared}


def test_sub_menu_waiver_on_first_attach_leaves_no_parent():
    root = Menu("root")
    sub = Menu("sub")
    root.sub_menu("Go", sub, no_back_button=True)
    assert sub.parent is None

    other = Menu("other")
    other.sub_menu("Go", sub)
    assert sub.parent is other


def test_sub_menu_same_parent_twice_is_allowed():
    root = Menu("root")
    sub = Menu("sub")
    root.sub_menu("Go", sub).row().sub_menu("Again", sub)
    assert sub.parent is root
    assert paths(root) == [["root/0/0"], ["root/1/0"]]


def test_back_registers_button():
    action = lambda context, menu: None
    sub = Menu("sub").back("Back").back("Back too", on_action=action)

    assert paths(sub) == [["sub/0/0", "sub/0/1"]]
    assert len(sub.handlers_for("sub/0/0")) == 1
    assert sub.handlers_for("sub/0/1")[0] is action


def test_skipped_button_shifts_later_paths():
    def build(show_admin):
        menu = Menu("m")
        if show_admin:
            menu.text("Admin")
        menu.text("Help")
        return menu

    assert build(True).keyboard[0][1].path == "m/0/1"
    # Without the conditional button, Help takes over the slot Admin had
    assert build(False).keyboard[0][0].path == "m/0/0"
    assert build(False).keyboard[0][0].label == "Help"


def test_duplicate_ids_produce_colliding_paths():
    one = Menu("dup").text("One")
    two = Menu("dup").text("Two")
    assert one.paths == two.paths == ["dup/0/0"]


def test_id_is_read_only():
    menu = Menu("m")
    with pytest.raises(AttributeError):
        menu.id = "other"
