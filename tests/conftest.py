import pytest

from railyard.sim import audit as audit_mod


@pytest.fixture(autouse=True)
def audit_to_tmp(tmp_path):
    # Keep audit events out of the repo during tests
    old_dir, old_file = audit_mod.AUDIT_DIR, audit_mod.AUDIT_FILE
    audit_mod.AUDIT_DIR = tmp_path
    audit_mod.AUDIT_FILE = tmp_path / "events.jsonl"
    yield audit_mod.AUDIT_FILE
    audit_mod.AUDIT_DIR, audit_mod.AUDIT_FILE = old_dir, old_file
