import pytest

from platformecs.keyboard import InputInfo, InputType, Key, key_from_name


def test_key_order_starts_with_no_key():
    assert Key(0) is Key.NO_KEY
    assert key_from_name("A") == 1
    assert key_from_name("B") == key_from_name("A") + 1


def test_pause_is_last_key():
    assert key_from_name("Pause") == len(Key) - 1
    assert Key(len(Key) - 1) is Key.Pause


def test_key_values_are_contiguous():
    assert [Key(value) for value in range(len(Key))] == list(Key)


def test_input_type_order():
    assert [InputType(value) for value in range(5)] == [
        InputType.UP,
        InputType.RIGHT,
        InputType.DOWN,
        InputType.LEFT,
        InputType.SHOOT,
    ]


def test_key_from_name_letters_and_specials():
    assert key_from_name("A") is Key.A
    assert key_from_name("Space") is Key.Space
    assert key_from_name("No_Key") is Key.NO_KEY


def test_key_from_name_round_trips_every_key():
    for key in Key:
        if key is Key.NO_KEY:
            continue
        assert key_from_name(key.name) is key


@pytest.mark.parametrize("name", ["NO_KEY", "a", "", "Spacebar"])
def test_key_from_name_unknown(name):
    with pytest.raises(KeyError):
        key_from_name(name)


def test_input_info_fields():
    info = InputInfo(id=7, id_input=InputType.LEFT, state=True)
    assert info.id == 7
    assert info.id_input is InputType.LEFT
    assert info.state is True