import pytest

from jsonetl.utility import (
    convert_id_to_int,
    create_natural_key_map,
    join,
    replace_spaces_with_underscore,
    split_string_by_delimiter,
    transform_json,
)


def test_replace_spaces_keeps_length_and_removes_spaces():
    text = "first  second third "
    result = replace_spaces_with_underscore(text)
    assert " " not in result
    assert len(result) == len(text)
    assert result.count("_") == text.count(" ")


def test_replace_spaces_without_spaces_is_identity():
    assert replace_spaces_with_underscore("plain") == "plain"


def test_convert_id_plain_number():
    assert convert_id_to_int("42") == 42


def test_convert_id_ignores_whitespace_and_trailing_text():
    assert convert_id_to_int("  -17abc") == -17


def test_convert_id_invalid():
    with pytest.raises(ValueError, match="not a valid number"):
        convert_id_to_int("abc")


def test_convert_id_out_of_range():
    with pytest.raises(ValueError, match="out of range"):
        convert_id_to_int("99999999999")


def test_join_and_split_round_trip():
    parts = ["alpha", "beta", "gamma"]
    assert split_string_by_delimiter(join(parts, ", "), ", ") == parts


def test_join_single_and_empty():
    assert join(["only"], "-") == "only"
    assert join([], "-") == ""


def test_split_drops_empty_tokens():
    assert split_string_by_delimiter("  Juan   Perez ", " ") == ["Juan", "Perez"]


def test_split_without_delimiter_returns_whole_text():
    assert split_string_by_delimiter("Juan", " ") == ["Juan"]
    assert split_string_by_delimiter("", " ") == [""]


def test_split_empty_delimiter_raises():
    with pytest.raises(ValueError):
        split_string_by_delimiter("a b", "")


def test_transform_json_assigns_value_to_all_keys():
    result = transform_json("v", ["a", "b"])
    assert result == {"a": "v", "b": "v"}


def test_natural_key_map_is_sorted_by_key():
    result = create_natural_key_map(["last", "first"], ["Perez", "Juan"])
    assert list(result) == ["first", "last"]
    assert result["last"] == "Perez"


def test_natural_key_map_last_duplicate_wins():
    assert create_natural_key_map(["k", "k"], ["1", "2"]) == {"k": "2"}


def test_natural_key_map_length_mismatch():
    with pytest.raises(ValueError):
        create_natural_key_map(["a"], ["1", "2"])