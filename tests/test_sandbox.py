# tests/test_sandbox.py
"""Tests for running snippets in the V8 sandbox."""
from js_lab.normalizer import normalize
from js_lab.sandbox import CodeSandbox, build_program


def test_build_program_embeds_source_as_string_literal():
    program = build_program('console.log("hi")')
    assert '"console.log(\\"hi\\")"' in program


def test_run_hoisting_matches_expected():
    result = CodeSandbox().run("console.log(x);\nvar x = 5;\nconsole.log(x);", "undefined\n5")
    assert result.output == "undefined\n5"
    assert result.is_correct
    assert not result.error


def test_run_wrong_output_is_not_correct():
    result = CodeSandbox().run("console.log(5);", "undefined\n5")
    assert result.output == "5"
    assert not result.is_correct
    assert result.expected == "undefined\n5"


def test_run_serializes_objects_as_json():
    result = CodeSandbox().run("const o = { a: 1 };\no.a = 2;\nconsole.log(o);", '{"a":2}')
    assert result.output == '{"a":2}'
    assert result.is_correct


def test_run_arrays_and_multiple_arguments():
    lines, error = CodeSandbox().execute("console.log([1, 2]);\nconsole.log('a', 1, true);")
    assert error is None
    assert lines == ["[1,2]", "a 1 true"]


def test_run_no_output():
    result = CodeSandbox().run("var x = 1;", "")
    assert result.output == ""
    assert result.is_correct


def test_run_deferred_callbacks_are_not_captured():
    code = "for (var i = 0; i < 3; i++) {\n  setTimeout(() => console.log(i), 0);\n}"
    result = CodeSandbox().run(code, "3\n3\n3")
    assert not result.is_correct
    assert "3\n3\n3" not in result.output


def test_each_run_gets_a_fresh_context():
    sandbox = CodeSandbox()
    sandbox.execute("globalThis.leaked = 42;")
    lines, error = sandbox.execute("console.log(typeof leaked);")
    assert error is None
    assert lines == ["undefined"]


# --- Edge case tests ---

def test_run_reference_error():
    result = CodeSandbox().run("undefined_fn()", "undefined\n5")
    assert result.error
    assert not result.is_correct
    assert result.output == "Error: undefined_fn is not defined"


def test_run_throw_non_error_value():
    result = CodeSandbox().run("throw 5;", "5")
    assert result.error
    assert result.output == "Error: undefined"


def test_run_syntax_error():
    result = CodeSandbox().run("console.log(;", "")
    assert result.error
    assert result.output.startswith("Error: ")


def test_run_output_before_error_is_discarded():
    result = CodeSandbox().run("console.log(1);\nnope();", "1")
    assert result.error
    assert not result.is_correct


def test_run_infinite_loop_times_out():
    result = CodeSandbox(timeout_ms=100).run("while (true) {}", "")
    assert result.error
    assert not result.is_correct
    assert result.output.startswith("Error: ")


def test_run_matches_legacy_numeric_expectation():
    question = normalize({"id": 9, "expectedOutput": 5, "starterCode": "console.log(5);"})
    result = CodeSandbox().run(question.code, question.expected_output)
    assert result.is_correct
