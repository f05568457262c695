import importlib.util
from pathlib import Path

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "check_core_imports.py"


def _load_guard():
    spec = importlib.util.spec_from_file_location("check_core_imports", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None  # for mypy
    spec.loader.exec_module(module)
    return module


def test_core_import_guard_passes():
    exit_code = _load_guard().main()
    assert exit_code == 0, "core import guard failed"


def test_core_import_guard_flags_resource_import(tmp_path: Path):
    guard = _load_guard()
    bad = tmp_path / "leaky.py"
    bad.write_text(
        "from backlog_sdk.resources import issues\nimport backlog_sdk.models\n"
    )
    errors = guard.scan_file(bad)
    assert len(errors) == 2
    assert "backlog_sdk.resources" in errors[0]
