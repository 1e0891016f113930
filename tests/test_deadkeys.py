from kbdsim.layout.deadkeys import DeadkeyTable


def test_compose_and_triggers():
    table = DeadkeyTable.from_transforms({"´": {"a": "á", "e": "é"}, "`": {"a": "à"}})
    assert table.is_trigger("´")
    assert table.is_trigger("`")
    assert not table.is_trigger("a")
    assert table.compose("´", "a") == "á"
    assert table.compose("`", "a") == "à"
    assert table.triggers() == ["`", "´"]
    assert len(table) == 3


def test_missing_combination_is_none():
    table = DeadkeyTable.from_transforms({"´": {"a": "á"}})
    assert table.compose("´", "z") is None
    assert table.compose("¨", "a") is None


def test_empty_table():
    table = DeadkeyTable()
    assert not table.is_trigger("´")
    assert table.compose("´", "a") is None
    assert table.to_dict() == {}


def test_nested_transforms_do_not_compose_past_second_level():
    table = DeadkeyTable.from_transforms({"^": {"^": {"a": "ậ"}, "a": "â"}})
    assert table.compose("^", "a") == "â"
    assert table.compose("^", "^") is None
    assert table.to_dict() == {"^": {"a": "â"}}


def test_non_string_leaves_are_dropped():
    table = DeadkeyTable.from_transforms({"´": {"a": "á", "b": 3}, "~": "ñ"})
    assert table.to_dict() == {"´": {"a": "á"}}
    assert not table.is_trigger("~")


def test_equality():
    first = DeadkeyTable.from_transforms({"´": {"a": "á"}})
    second = DeadkeyTable.from_transforms({"´": {"a": "á"}})
    assert first == second
    assert first != DeadkeyTable()


def test_empty_mapping_is_a_trigger():
    table = DeadkeyTable.from_transforms({"´": {}, "¨": {"a": "ä"}})
    assert table.is_trigger("´")
    assert table.compose("´", "a") is None
    assert table.triggers() == ["¨", "´"]
    assert table.to_dict() == {"´": {}, "¨": {"a": "ä"}}
    assert table != DeadkeyTable.from_transforms({"¨": {"a": "ä"}})
