import pytest

from console_forms import ABSENT, ConfigurationError, ResultTree
from console_forms.state.models import is_empty_value


def test_absent_is_falsy_and_distinct_from_empty():
    assert not ABSENT
    assert ABSENT is not None
    assert ABSENT != ""
    assert repr(ABSENT) == "ABSENT"


@pytest.mark.parametrize(
    "value, empty",
    [
        ("", True),
        (None, True),
        (False, True),
        ([], True),
        (ResultTree(), True),
        ("0", False),
        (0, False),
        (True, False),
        ([ResultTree()], False),
    ],
)
def test_is_empty_value(value, empty):
    assert is_empty_value(value) is empty


def test_entries_keep_insertion_order():
    tree = ResultTree()
    for name in ["zeta", "alpha", "mid"]:
        tree.record(name, name.upper())
    assert list(tree.keys()) == ["zeta", "alpha", "mid"]


def test_key_is_written_once():
    tree = ResultTree()
    tree.record("name", "Steve")
    with pytest.raises(ConfigurationError):
        tree.record("name", "Bill")
    assert tree["name"] == "Steve"


def test_filtered_view_hides_empty_values():
    tree = ResultTree()
    tree.record("happy", False)
    tree.record("name", "Steve")

    assert tree.get_results() == {"name": "Steve"}
    assert tree.get_results(filter_empty=False) == {"happy": False, "name": "Steve"}
    # The stored tree is not touched by filtering
    assert "happy" in tree


def test_filtering_applies_to_nested_results():
    subform = ResultTree(entries={"how_old": 1000, "location": ""})
    iteration = ResultTree(entries={"pet": "", "name": "Ada"})
    tree = ResultTree(entries={"questions": subform, "people": [iteration], "pets": []})

    assert tree.get_results() == {
        "questions": {"how_old": 1000},
        "people": [{"name": "Ada"}],
    }
    assert tree.to_dict() == {
        "questions": {"how_old": 1000, "location": ""},
        "people": [{"pet": "", "name": "Ada"}],
        "pets": [],
    }
