"""Tour of every test kind, run once in English and once silently."""
import time

from verdict import Config, Language, Suite, run_all
from verdict.factory import (
    any_exception_but_not_implemented_error,
    assert_test,
    equal,
    equal_by,
    expect_exception,
    expect_exception_except,
    property_test,
    refute_test,
)


def _raise(error: BaseException):
    def thunk():
        raise error

    return thunk


def _slow() -> int:
    time.sleep(6)
    return 1


def build_suite() -> Suite:
    return Suite.of(
        "Main Example Suite",
        equal("Correct Sum", lambda: 2 + 3, 5),
        equal("Incorrect Sum", lambda: 2 + 3, 6),
        equal_by(
            "String Equality (Ignore Case)",
            lambda: "Python Rocks",
            "python rocks",
            lambda actual, expected: actual.lower() == expected.lower(),
        ),
        property_test(
            "Non-Empty List",
            lambda: [1, 2, 3],
            lambda value: len(value) > 0,
            help="The generated list should not be empty",
        ),
        property_test(
            "Positive Sum",
            lambda: sum([5, 10, -2]),
            lambda value: value > 0,
            format=lambda value: f"The sum was {value}",
        ),
        property_test(
            "Should Be Even",
            lambda: 7,
            lambda value: value % 2 == 0,
            help="The resulting number must be divisible by 2",
        ),
        assert_test("True Assertion", lambda: 5 > 1),
        assert_test("False Assertion", lambda: [] == [1]),
        refute_test("Correct Refutation", lambda: 10 == 20),
        refute_test("Incorrect Refutation", lambda: 10 < 20),
        expect_exception("Exception: Division by Zero", lambda: 1 / 0, ZeroDivisionError),
        expect_exception(
            "Exception: Specific Message",
            _raise(ValueError("Invalid value")),
            ValueError,
            message="Invalid value",
        ),
        expect_exception("Exception: Not Thrown", lambda: 42, RuntimeError),
        expect_exception("Exception: Wrong Type", lambda: 1 / 0, AttributeError),
        expect_exception(
            "Exception: Wrong Message",
            _raise(ValueError("Another message")),
            ValueError,
            message="Invalid value",
        ),
        expect_exception_except(
            "Exception: Anything But AttributeError",
            _raise(RuntimeError("Something happened")),
            AttributeError,
        ),
        expect_exception_except(
            "Exception: Should Not Be ValueError",
            _raise(ValueError("Raised anyway")),
            ValueError,
        ),
        any_exception_but_not_implemented_error(
            "Exception: Anything But Not Implemented",
            _raise(ZeroDivisionError("division by zero")),
        ),
        equal("Timeout Exceeded", _slow, 1),
    )


def main() -> None:
    config = Config(language=Language.ENGLISH, timeout=5)
    suite = build_suite()

    print("Running tests with English configuration...")
    run_all([suite], config)

    print("\n" + "=" * 50 + "\n")

    print("Running tests with Silent Logger configuration...")
    report = run_all([suite], config.with_logging(False))
    results = report[0]
    print(f"Silent run finished: {results.passed}/{results.total} passed, detail {results.detail}")


if __name__ == "__main__":
    main()
