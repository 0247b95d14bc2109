import pytest

from jsonschema_checker.context import ValidationContext, ValidationError, append_path
from jsonschema_checker.exceptions import RecursionLimitError


@pytest.mark.parametrize("base, segment, expected", [
    ("", "a", "a"),
    ("a", "b", "a.b"),
    ("a", 2, "a[2]"),
    ("", 0, "[0]"),
    ("a[2]", "c", "a[2].c"),
    ("a", "", "a"),
])
def test_append_path(base, segment, expected):
    assert append_path(base, segment) == expected


def test_errors_use_current_path(context):
    context.append_error("root failure")
    context.set_path("a.b")
    context.append_error("nested failure")

    assert context.errors() == [
        ValidationError("", "root failure"),
        ValidationError("a.b", "nested failure"),
    ]
    assert context.has_errors()


def test_descend_restores_path_on_exception(context):
    context.set_path("a")
    with pytest.raises(RuntimeError):
        with context.descend(3) as child_path:
            assert child_path == "a[3]"
            raise RuntimeError("boom")
    assert context.path == "a"


def test_fork_is_independent_of_parent(context):
    context.append_error("first")
    fork = context.fork()
    fork.append_error("speculative")

    assert [e.message for e in fork.errors()] == ["first", "speculative"]
    assert [e.message for e in context.errors()] == ["first"]
    assert fork.new_errors() == [ValidationError("", "speculative")]


def test_fork_view_is_stable_when_parent_grows(context):
    context.append_error("first")
    fork = context.fork()
    context.append_error("later")

    assert [e.message for e in fork.errors()] == ["first"]
    assert fork.error_count() == 1


def test_merge_appends_only_new_errors(context):
    context.append_error("baseline")
    fork = context.fork()
    fork.append_error("branch")

    context.merge(fork)

    assert [e.message for e in context.errors()] == ["baseline", "branch"]


def test_discarded_fork_leaves_original_untouched(context):
    context.append_error("baseline")
    before = context.errors()

    fork = context.fork()
    fork.append_error("discarded")
    del fork

    assert context.errors() == before


def test_equivalence_helpers(context):
    context.append_error("x")
    fork = context.fork()
    assert fork.has_same_error_count(context)
    assert fork.has_same_errors(context)

    fork.append_error("y")
    assert not fork.has_same_error_count(context)
    assert not fork.has_same_errors(context)


def test_is_clean_since(context):
    baseline = context.error_count()
    assert context.is_clean_since(baseline)
    context.append_error("x")
    assert not context.is_clean_since(baseline)


def test_nested_trips_recursion_guard():
    context = ValidationContext(max_depth=2)
    with context.nested():
        with context.nested():
            with pytest.raises(RecursionLimitError) as excinfo:
                with context.nested():
                    pass
    assert excinfo.value.max_depth == 2
    assert context.depth == 0


def test_validation_error_str():
    assert str(ValidationError("", "bad")) == "bad"
    assert str(ValidationError("a[0]", "bad")) == "a[0]: bad"
