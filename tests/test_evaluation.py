import pytest

from blisp.errors import BlispUnboundSymbol, BlispTypeError, BlispArityError, BlispDomainError
from blisp.evaluation.evaluator import evaluate
from blisp.printer import print_form
from blisp.reader import read
from blisp.types import (
    Nil,
    TRUE,
    FALSE,
    Number,
    String,
    Symbol,
    ListForm,
    Function,
    BuiltinFunction,
    Failure,
)


def run(source, env):
    return evaluate(read(source), env)


# -----------------------------------------------------
# Self-evaluating forms and symbols
# -----------------------------------------------------

@pytest.mark.parametrize(
    "form",
    [Nil, TRUE, FALSE, Number(42), String("hello"), Function(("x",), Symbol("x"))],
)
def test_self_evaluating_forms(env, form):
    assert evaluate(form, env) is form


@pytest.mark.parametrize("source,printed", [("42", "42"), ('"hi"', '"hi"'), ("true", "true"), ("()", "nil")])
def test_literals_print_unchanged(env, source, printed):
    assert print_form(run(source, env)) == printed


def test_none_evaluates_to_none(env, diagnostics):
    assert evaluate(None, env) is None
    assert diagnostics.messages == []


def test_failure_passes_through(env):
    failure = Failure(BlispTypeError("earlier"))
    assert evaluate(failure, env) is failure


def test_symbol_lookup(env):
    env.define("x", Number(42))
    assert run("x", env) == Number(42)
    assert run("nil", env) is Nil
    assert isinstance(run("+", env), BuiltinFunction)


def test_unbound_symbol(env, diagnostics):
    result = run("x", env)
    assert isinstance(result, Failure)
    assert isinstance(result.error, BlispUnboundSymbol)
    assert diagnostics.messages == ["Unbound symbol: x"]


# -----------------------------------------------------
# Application
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,printed",
    [
        ("(+ 2 3)", "5"),
        ("(- 10 4)", "6"),
        ("(* 3 3)", "9"),
        ("(+ (* 2 3) (- 10 4))", "12"),
        ("((lambda (x) (* x x)) 4)", "16"),
        ("((lambda (a b) (- a b)) 9 4)", "5"),
    ],
)
def test_application(env, source, printed):
    assert print_form(run(source, env)) == printed


def test_non_function_head(env, diagnostics):
    result = run("(1 2)", env)
    assert isinstance(result.error, BlispTypeError)
    assert diagnostics.messages == ["Don't know how to evaluate 1"]


def test_string_head(env, diagnostics):
    run('("f" 1)', env)
    assert diagnostics.messages == ['Don\'t know how to evaluate "f"']


def test_unbound_head_reported_once(env, diagnostics):
    result = run("(undefined-fn 1)", env)
    assert isinstance(result.error, BlispUnboundSymbol)
    assert diagnostics.messages == ["Unbound symbol: undefined-fn"]


def test_failing_argument_aborts_application_once(env, diagnostics):
    result = run("(+ 1 (+ 2 x))", env)
    assert isinstance(result, Failure)
    assert diagnostics.messages == ["Unbound symbol: x"]


def test_arguments_evaluated_left_to_right(env, diagnostics):
    run("(+ a b)", env)
    # The first failing argument stops evaluation of the rest
    assert diagnostics.messages == ["Unbound symbol: a"]


@pytest.mark.parametrize(
    "source,message",
    [
        ("(+ 1)", "Not enough arguments to function, expecting 2, got 1"),
        ("(+ 1 2 3)", "Not enough arguments to function, expecting 2, got 3"),
        ("((lambda (x) x))", "Not enough arguments to function, expecting 1, got 0"),
    ],
)
def test_function_arity(env, diagnostics, source, message):
    result = run(source, env)
    assert isinstance(result.error, BlispArityError)
    assert diagnostics.messages == [message]


def test_arity_checked_before_arguments_are_evaluated(env, diagnostics):
    run("(+ x)", env)
    assert diagnostics.messages == ["Not enough arguments to function, expecting 2, got 1"]


def test_empty_list_form(env, diagnostics):
    result = evaluate(ListForm(()), env)
    assert isinstance(result, Failure)
    assert diagnostics.messages == ["Don't know how to evaluate ()"]


def test_special_form_names_cannot_be_shadowed(env):
    assert run("(set! if 5)", env) == Number(5)
    assert run("if", env) == Number(5)
    assert run("(if true 1 2)", env) == Number(1)


def test_builtins_print(env):
    assert print_form(run("+", env)) == "<builtin function>"
    assert print_form(run("(lambda (a) a)", env)) == "<function>"


# -----------------------------------------------------
# Stack depth
# -----------------------------------------------------

def test_deeply_nested_form_is_reported(env, diagnostics):
    form = Number(0)
    for _ in range(2000):
        form = ListForm((Symbol("+"), Number(1), form))
    result = evaluate(form, env)
    assert isinstance(result, Failure)
    assert isinstance(result.error, BlispDomainError)
    assert diagnostics.messages == ["Error: recursion depth exceeded"]


def test_user_recursion_ends_through_failure(env, diagnostics):
    run("(set! f (lambda (n) (+ (/ 1 n) (f (- n 1)))))", env)
    assert isinstance(run("(f 3)", env), Failure)
    assert diagnostics.messages == ["Division by zero"]


def test_runaway_user_recursion_is_reported(env, diagnostics):
    run("(set! f (lambda (n) (+ (/ 1 n) (f (- n 1)))))", env)
    result = run("(f 1000)", env)
    assert isinstance(result.error, BlispDomainError)
    assert diagnostics.messages == ["Error: recursion depth exceeded"]
    # The environment is still usable afterwards
    assert run("(f 2)", env).error.args == ("Division by zero",)
