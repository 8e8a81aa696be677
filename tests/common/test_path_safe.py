import pytest
from pathlib import Path
from qcprobe.common.path.safe import resolve_root, safe_join


def test_resolve_root(tmp_path):
    p = resolve_root(tmp_path)
    assert isinstance(p, Path)
    assert p.exists()


def test_safe_join_inside(tmp_path):
    root = tmp_path
    out = safe_join(root, Path("pkg/CPL_a.xml"))
    assert out.parent == root.resolve() / "pkg"


def test_safe_join_escapes_rejected(tmp_path):
    with pytest.raises(ValueError):
        safe_join(tmp_path, "../outside")


def test_safe_join_absolute_rejected(tmp_path):
    with pytest.raises(ValueError):
        safe_join(tmp_path / "root", "/etc")
