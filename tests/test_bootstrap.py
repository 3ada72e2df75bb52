import textwrap

import verdict
from verdict.registry import registry


def test_bootstrap_loads_plugins(tmp_path, monkeypatch) -> None:
    plugin = tmp_path / "verdict_test_plugin.py"
    plugin.write_text(
        textwrap.dedent(
            """
            from verdict.registry import NamedPredicate, registry


            def register():
                registry.update_or_register(NamedPredicate("plugin.short", lambda v: len(v) < 3))
            """
        ),
        encoding="utf-8",
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.setenv("VERDICT_PLUGINS", "verdict_test_plugin, ")
    monkeypatch.setattr(verdict, "_BOOTSTRAPPED", False)
    verdict.bootstrap()
    assert "plugin.short" in registry
    assert registry.get("plugin.short")("ab")
    assert "builtin.positive" in registry
