import pytest

from verdict.utils.importing import import_string, resolve_exception_type


def test_import_string_forms() -> None:
    import os.path

    assert import_string("os.path:join") is os.path.join
    assert import_string("os.path.join") is os.path.join
    with pytest.raises(ValueError):
        import_string("")
    with pytest.raises(AttributeError):
        import_string("os:not_there")


def test_resolve_exception_type() -> None:
    assert resolve_exception_type("ValueError") is ValueError
    assert resolve_exception_type("json:JSONDecodeError").__name__ == "JSONDecodeError"
    with pytest.raises(ValueError):
        resolve_exception_type("NoSuchError")
    with pytest.raises(ValueError):
        resolve_exception_type("len")
