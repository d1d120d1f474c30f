import pytest

from iota.errors import IotaArityError, IotaRuntimeError, IotaTypeError
from iota.evaluation.evaluator import evaluate
from iota.reader.parser import parse
from iota.types.string_literal import StringLiteral


def run(source, env):
    return evaluate(parse(source), env)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(- (+ 10 5) (* 2 3))", 9),
        ("(+ 1 2.5 3)", 6.5),
        ("(+ -1 5 -3)", 1),
        ("(- 5)", -5),
        ("(/ 4)", 0.25),
        ("(/ 7 2)", 3.5),
        ("(+)", 0),
        ("(*)", 1),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
    ]
)
def test_arithmetic(env, source, expected):
    assert run(source, env) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 5 5)", True),
        ("(= 5 5.0)", True),
        ("(= 5 6)", False),
        ('(= "str" "str")', True),
        ('(= "str" "str1")', False),
        ("(= #t #t)", True),
        ("(= #t 1)", False),
        ("(= #f 0)", False),
        ("(= 1 1 1)", True),
        ("(= (list 1 2) (list 1 2))", True),
        ("(< 2 8)", True),
        ("(< 5 5)", False),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(> 3 2 1)", True),
        ("(> 2.5 3)", False),
        ("(not #f)", True),
        ("(not #t)", False),
        ("(not 0)", False),
    ]
)
def test_comparison_and_logic(env, source, expected):
    assert run(source, env) is expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(car (list 1 2 3 4 5))", 1),
        ("(cdr (list 1))", []),
        ("(cdr (list 1 2 3 4 5))", [2, 3, 4, 5]),
        ("(cons 0 (list 1 2))", [0, 1, 2]),
        ("(list)", []),
        ("(list 1 (list 2))", [1, [2]]),
        ("(length (list 1 2 3))", 3),
        ("(length (list))", 0),
        ('(length "abc")', 3),
    ]
)
def test_list_primitives(env, source, expected):
    assert run(source, env) == expected


def test_cdr_does_not_mutate(env):
    run("(define xs (list 1 2 3))", env)
    run("(cdr xs)", env)
    assert run("xs", env) == [1, 2, 3]


@pytest.mark.parametrize(
    "source",
    [
        '(+ 1 "a")',
        "(+ 1 #t)",
        "(- (list 1))",
        "(< 1 #f)",
        '(> "a" "b")',
        "(car (list))",
        "(car 5)",
        "(cdr (list))",
        "(length 5)",
        "(cons 1 2)",
    ]
)
def test_primitive_type_errors(env, source):
    with pytest.raises(IotaTypeError):
        run(source, env)


@pytest.mark.parametrize("source", ["(-)", "(/)", "(not)", "(not 1 2)", "(car)", "(cons 1)"])
def test_primitive_arity_errors(env, source):
    with pytest.raises(IotaArityError):
        run(source, env)


@pytest.mark.parametrize("source", ["(/ 1 0)", "(/ 0)", "(/ 1.5 0)"])
def test_division_by_zero_is_normalized(env, source):
    with pytest.raises(IotaRuntimeError) as exc:
        run(source, env)
    assert isinstance(exc.value.__cause__, ZeroDivisionError)


def test_host_faults_are_normalized(env):
    env.insert({"boom": lambda _, args: {}["missing"]})
    with pytest.raises(IotaRuntimeError) as exc:
        run("(boom)", env)
    assert isinstance(exc.value.__cause__, KeyError)


def test_host_attribute_errors_are_normalized(env):
    env.insert({"upper": lambda _, args: args[0].upper()})
    with pytest.raises(IotaRuntimeError) as exc:
        run("(upper 5)", env)
    assert isinstance(exc.value.__cause__, AttributeError)


def test_string_literal_equality_is_by_text(env):
    assert run('(= (quote abc) "abc")', env) is True
    assert run('(= "abc" (quote (abc)))', env) is False
    assert StringLiteral("x") == StringLiteral("x")
