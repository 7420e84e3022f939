import pytest

from console_forms import (
    ABSENT,
    ConditionEvaluator,
    ConditionOperator,
    FormField,
    ResultTree,
)


@pytest.fixture
def evaluator():
    return ConditionEvaluator()


@pytest.fixture
def results():
    return ResultTree(
        entries={
            "project_name": "Demo",
            "version": "",
            "questions": ResultTree(entries={"how_old": 1000, "location": "cave"}),
            "project": ResultTree(entries={"project": "demo", "owner": "steve"}),
            "people": [ResultTree(entries={"name": "Ada"}), ResultTree(entries={"name": "Alan"})],
        }
    )


class TestResolve:
    def test_top_level_value(self, evaluator, results):
        assert evaluator.resolve("project_name", results) == "Demo"

    def test_dotted_path_descends_into_subform(self, evaluator, results):
        assert evaluator.resolve("questions.how_old", results) == 1000
        assert evaluator.resolve("questions.location", results) == "cave"

    def test_missing_segment_is_absent(self, evaluator, results):
        assert evaluator.resolve("unknown", results) is ABSENT
        assert evaluator.resolve("questions.unknown", results) is ABSENT
        assert evaluator.resolve("project_name.deeper", results) is ABSENT

    def test_present_but_empty_is_not_absent(self, evaluator, results):
        assert evaluator.resolve("version", results) == ""

    def test_numeric_segment_indexes_group_iterations(self, evaluator, results):
        assert evaluator.resolve("people.1.name", results) == "Alan"
        assert evaluator.resolve("people.5.name", results) is ABSENT

    def test_custom_delimiter(self, results):
        assert ConditionEvaluator(delimiter="/").resolve("questions/how_old", results) == 1000


class TestEvaluate:
    def test_no_conditions_always_holds(self, evaluator, results):
        assert evaluator.evaluate(FormField(name="anything"), results)

    def test_equals(self, evaluator, results):
        field = FormField(name="f").add_condition("project_name", "Demo")
        assert evaluator.evaluate(field, results)

        field = FormField(name="f").add_condition("project_name", "Demoooo")
        assert not evaluator.evaluate(field, results)

    def test_not_equals(self, evaluator, results):
        field = FormField(name="f").add_condition(
            "project_name", "Other", ConditionOperator.NOT_EQUALS
        )
        assert evaluator.evaluate(field, results)

        field = FormField(name="f").add_condition("project_name", "Demo", "!=")
        assert not evaluator.evaluate(field, results)

    def test_all_conditions_must_hold(self, evaluator, results):
        field = (
            FormField(name="f")
            .add_condition("project_name", "Demo")
            .add_condition("questions.location", "cave")
            .add_condition("questions.how_old", 5)
        )
        assert not evaluator.evaluate(field, results)

    def test_loose_equality_between_strings_and_numbers(self, evaluator, results):
        field = FormField(name="f").add_condition("questions.how_old", "1000")
        assert evaluator.evaluate(field, results)

    def test_booleans_compare_strictly(self, evaluator):
        results = ResultTree(entries={"happy": True})
        assert not evaluator.evaluate(FormField(name="f").add_condition("happy", "1"), results)
        assert evaluator.evaluate(FormField(name="f").add_condition("happy", True), results)

    def test_absent_matches_empty_values(self, evaluator, results):
        assert evaluator.evaluate(FormField(name="f").add_condition("unknown", None), results)
        assert evaluator.evaluate(FormField(name="f").add_condition("unknown", ""), results)
        assert evaluator.evaluate(FormField(name="f").add_condition("unknown", False), results)
        assert not evaluator.evaluate(FormField(name="f").add_condition("unknown", 0), results)
        assert not evaluator.evaluate(
            FormField(name="f").add_condition("unknown", False, ConditionOperator.NOT_EQUALS),
            results,
        )
        assert evaluator.evaluate(
            FormField(name="f").add_condition("unknown", "x", ConditionOperator.NOT_EQUALS),
            results,
        )


class TestNestedValues:
    def test_whole_subform_is_compared_for_equality(self, evaluator, results):
        field = FormField(name="f").add_condition(
            "questions", {"how_old": 1000, "location": "cave"}
        )
        assert evaluator.evaluate(field, results)

    def test_partial_subform_does_not_match(self, evaluator, results):
        field = FormField(name="f").add_condition("questions", {"how_old": 1000})
        assert not evaluator.evaluate(field, results)

    def test_entry_named_like_the_path_is_substituted(self, evaluator, results):
        field = FormField(name="f").add_condition("project", "demo")
        assert evaluator.evaluate(field, results)

    def test_dotted_path_compares_whole_nested_result(self, evaluator):
        details = ResultTree(entries={"details": "x", "age": 3})
        results = ResultTree(entries={"owner": ResultTree(entries={"details": details})})

        field = FormField(name="f").add_condition("owner.details", {"details": "x", "age": 3})
        assert evaluator.evaluate(field, results)

        field = FormField(name="f").add_condition("owner.details", "x")
        assert not evaluator.evaluate(field, results)

    def test_one_disagreeing_nested_condition_fails_all(self, evaluator, results):
        field = (
            FormField(name="f")
            .add_condition("project", "demo")
            .add_condition("questions", {"how_old": 1, "location": "cave"})
        )
        assert not evaluator.evaluate(field, results)
