import pytest

from jsonschema_checker import (
    MappingReferenceResolver,
    RecursionLimitError,
    ValidationContext,
    ValidationError,
    Validator,
    ValidatorConfig,
)


def test_all_of(messages):
    schema = {"allOf": [{"type": "integer"}, {"minimum": 10}]}
    assert messages(12, schema) == []
    assert messages(5, schema) == ["Must have a minimum value of 10", "Failed to match all schemas"]


def test_any_of_discards_branch_errors(messages):
    schema = {"anyOf": [{"type": "string"}, {"type": "number"}]}
    assert messages("x", schema) == []
    assert messages(5, schema) == []
    assert messages(True, schema) == ["Failed to match at least one schema"]


def test_any_of_success_ignores_earlier_errors(messages):
    # The branch is judged on the errors it adds, not on the baseline.
    schema = {"type": "string", "anyOf": [{"type": "integer"}]}
    assert messages(5, schema) == ["integer value found, but a string is required"]


ONE_OF = {"oneOf": [{"multipleOf": 2}, {"multipleOf": 3}]}


def test_one_of_with_two_clean_matches(messages):
    assert messages(6, ONE_OF) == ["failed to match exactly one schema"]


def test_one_of_with_no_match_surfaces_branch_errors(messages):
    assert messages(5, ONE_OF) == [
        "Must be a multiple of 2",
        "Must be a multiple of 3",
        "failed to match exactly one schema",
    ]


def test_one_of_with_single_match(messages):
    assert messages(4, ONE_OF) == []


def test_not(messages):
    schema = {"not": {"type": "string"}}
    assert messages(1, schema) == []
    assert messages("x", schema) == ["Matched a schema which it should not"]


def test_combinators_skip_missing_properties(validator):
    schema = {"properties": {"a": {"anyOf": [{"type": "string"}], "not": {}}}}
    assert validator.validate({}, schema) == []


def test_extends_inline_schemas(messages):
    assert messages(5, {"extends": {"type": "string"}}) == ["integer value found, but a string is required"]
    assert messages(5, {"extends": [{"minimum": 10}, {"maximum": 1}]}) == [
        "Must have a minimum value of 10",
        "Must have a maximum value of 1",
    ]
    assert messages(5, {"extends": None}) == []


def test_extends_uri_is_resolved_against_schema_id():
    resolver = MappingReferenceResolver({
        "http://example.com/schemas/base.json": {
            "type": "string",
            "definitions": {"small": {"maximum": 3}},
        },
    })
    validator = Validator(resolver=resolver)

    schema = {"id": "http://example.com/schemas/child.json", "extends": "base.json"}
    assert validator.validate("x", schema) == []
    assert validator.validate(5, schema) == [
        ValidationError("", "integer value found, but a string is required"),
    ]

    pointer_schema = {"extends": "http://example.com/schemas/base.json#/definitions/small"}
    assert validator.validate(2, pointer_schema) == []
    assert validator.validate(4, pointer_schema) == [ValidationError("", "Must have a maximum value of 3")]


def test_unresolvable_extends_becomes_node_error(messages):
    schema = {"properties": {"a": {"extends": "base.json", "type": "string"}}}
    assert messages({"a": 1}, schema) == [
        "Unable to resolve reference base.json: no reference resolver configured",
        "integer value found, but a string is required",
    ]


def test_unknown_document_becomes_node_error():
    validator = Validator(resolver=MappingReferenceResolver())
    assert validator.validate(1, {"extends": "http://example.com/other.json"}) == [
        ValidationError("", "Unable to resolve reference http://example.com/other.json: unknown document"),
    ]


def test_cyclic_all_of_hits_recursion_limit(validator):
    schema = {}
    schema["allOf"] = [schema]
    with pytest.raises(RecursionLimitError):
        validator.validate(1, schema)


def test_cyclic_extends_hits_recursion_limit(validator):
    schema = {"type": "integer"}
    schema["extends"] = schema
    with pytest.raises(RecursionLimitError) as exc_info:
        validator.validate(1, schema)
    assert exc_info.value.max_depth == 128


def test_max_depth_counts_schema_nesting():
    schema = {"properties": {"a": {"properties": {"b": {"properties": {"c": {}}}}}}}
    value = {"a": {"b": {}}}

    with pytest.raises(RecursionLimitError) as exc_info:
        Validator(ValidatorConfig(max_depth=3)).validate(value, schema)
    assert exc_info.value.path == "a.b.c"

    assert Validator(ValidatorConfig(max_depth=4)).validate(value, schema) == []


def test_discarded_fork_leaves_context_untouched(validator):
    context = ValidationContext()
    validator.check(5, {"type": "string"}, context)
    before = context.errors()

    fork = context.fork()
    validator.check(5, {"minimum": 10, "allOf": [{"type": "boolean"}]}, fork)

    assert fork.new_errors()
    assert context.errors() == before


def test_interpreter_stack_exhaustion_is_a_recursion_limit_error():
    validator = Validator()
    # Raise the guard past what the stack can hold so Python's own limit trips first.
    validator.config.max_depth = 10 ** 6

    schema = {}
    schema["anyOf"] = [schema]
    with pytest.raises(RecursionLimitError) as exc_info:
        validator.validate(1, schema)
    assert isinstance(exc_info.value.__cause__, RecursionError)
