"""Exception expectations over a function raising several error types."""
import sqlite3

from verdict import Config, Language, Suite, run_all
from verdict.factory import expect_exception_one_of


def might_raise(flag: int) -> str:
    if flag == 1:
        raise OSError("Disk error")
    if flag == 2:
        raise sqlite3.OperationalError("Connection failed")
    if flag == 3:
        raise FileNotFoundError("File not here")  # subclass of OSError
    if flag == 4:
        raise ValueError("Bad flag")
    return "Success"


def build_suite() -> Suite:
    return Suite.of(
        "Exception One Of Tests",
        expect_exception_one_of("IO error", lambda: might_raise(1), [OSError, sqlite3.Error]),
        expect_exception_one_of("Database error", lambda: might_raise(2), [OSError, sqlite3.Error]),
        expect_exception_one_of(
            "IO error is not a missing file", lambda: might_raise(1), [FileNotFoundError, sqlite3.Error]
        ),
        expect_exception_one_of(
            "Missing file is not a bad value", lambda: might_raise(3), [ValueError, sqlite3.Error]
        ),
        expect_exception_one_of(
            "IO error with wrong message",
            lambda: might_raise(1),
            [OSError, sqlite3.Error],
            message="an error was produced",
        ),
    )


def main() -> None:
    run_all([build_suite()], Config(language=Language.ENGLISH))


if __name__ == "__main__":
    main()
