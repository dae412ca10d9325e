import io
from pathlib import Path

import pytest

from mirtree.filenode import FileType
from mirtree.filetree import FileTree, SortCriteria


@pytest.fixture
def sample(tmp_path):
    (tmp_path / "beta").mkdir()
    (tmp_path / "Alpha").mkdir()
    (tmp_path / "Alpha" / "inner.txt").write_bytes(b"1234")
    (tmp_path / "b.txt").write_bytes(b"abc")
    (tmp_path / "A.py").write_bytes(b"12345")
    (tmp_path / "c.TXT").write_bytes(b"x")
    (tmp_path / "noext").write_bytes(b"xy")
    return tmp_path


def names(nodes):
    return [n.name for n in nodes]


def test_default_order_is_dirs_then_name(sample):
    tree = FileTree(sample)
    assert names(tree.current_children()) == ["Alpha", "beta", "A.py", "b.txt", "c.TXT", "noext"]


def test_root_node_fields(sample):
    tree = FileTree(sample)
    root = tree.root_node
    assert root.kind is FileType.DIR
    assert root.name == sample.name
    assert root.full_path == sample
    assert tree.root_folder == sample
    assert tree.current_path() == sample
    assert tree.is_initialized


def test_file_sizes_and_dir_flags(sample):
    tree = FileTree(sample)
    by_name = {n.name: n for n in tree.current_children()}
    assert by_name["A.py"].size == 5
    assert by_name["b.txt"].size == 3
    assert by_name["A.py"].full_path == sample / "A.py"
    assert by_name["Alpha"].has_unexpanded_children is True
    assert by_name["Alpha"].children == []


def test_sort_by_name(sample):
    tree = FileTree(sample)
    tree.set_sort_criteria(SortCriteria.NAME)
    assert tree.sort_criteria is SortCriteria.NAME
    assert names(tree.current_children()) == ["A.py", "Alpha", "b.txt", "beta", "c.TXT", "noext"]


def test_sort_by_extension(sample):
    tree = FileTree(sample)
    tree.set_sort_criteria(SortCriteria.EXTENSION)
    assert names(tree.current_children()) == ["Alpha", "beta", "noext", "A.py", "b.txt", "c.TXT"]


def test_sort_by_size_descending(sample):
    tree = FileTree(sample)
    tree.set_sort_criteria(SortCriteria.SIZE)
    assert names(tree.current_children()) == ["Alpha", "beta", "A.py", "b.txt", "noext", "c.TXT"]


def test_date_modified_leaves_order(sample):
    tree = FileTree(sample)
    before = names(tree.current_children())
    tree.set_sort_criteria(SortCriteria.DATE_MODIFIED)
    assert names(tree.current_children()) == before


def test_expand_node_loads_children(sample):
    tree = FileTree(sample)
    alpha = next(n for n in tree.current_children() if n.name == "Alpha")
    assert tree.expand_node(alpha) is True
    assert names(alpha.children) == ["inner.txt"]
    assert alpha.children[0].size == 4
    assert alpha.has_unexpanded_children is False
    assert tree.expand_node(alpha) is False


def test_expand_node_rejects_files_and_none(sample):
    tree = FileTree(sample)
    file_node = next(n for n in tree.current_children() if n.name == "b.txt")
    assert tree.expand_node(file_node) is False
    assert tree.expand_node(None) is False


def test_expand_uses_current_sort(sample):
    (sample / "beta" / "z.txt").write_bytes(b"1")
    (sample / "beta" / "y.txt").write_bytes(b"123")
    tree = FileTree(sample)
    tree.set_sort_criteria(SortCriteria.SIZE)
    beta = next(n for n in tree.current_children() if n.name == "beta")
    tree.expand_node(beta)
    assert names(beta.children) == ["y.txt", "z.txt"]


def test_missing_folder_gives_empty_root(tmp_path):
    missing = tmp_path / "nowhere"
    tree = FileTree(missing)
    assert tree.root_node.name == "nowhere"
    assert tree.current_children() == []
    assert tree.root_folder == missing


def test_set_root_folder(sample):
    tree = FileTree(sample)
    tree.set_root_folder(sample / "Alpha")
    assert tree.root_folder == sample / "Alpha"
    assert names(tree.current_children()) == ["inner.txt"]


def test_set_root_folder_empty_raises(sample):
    tree = FileTree(sample)
    with pytest.raises(ValueError):
        tree.set_root_folder("")
    assert tree.root_folder == sample


def test_refresh_root_node_picks_up_new_files(sample):
    tree = FileTree(sample)
    (sample / "new.md").write_bytes(b"")
    assert "new.md" not in names(tree.current_children())
    tree.refresh_root_node()
    assert "new.md" in names(tree.current_children())
    assert tree.current_path() == sample


def test_default_folder_is_cwd(sample, monkeypatch):
    monkeypatch.chdir(sample)
    tree = FileTree()
    assert tree.root_folder == Path.cwd()
    assert len(tree.current_children()) == 6


def test_current_children_is_a_copy(sample):
    tree = FileTree(sample)
    children = tree.current_children()
    children.clear()
    assert len(tree.current_children()) == 6


def test_format_tree(tmp_path):
    (tmp_path / "d").mkdir()
    (tmp_path / "f.txt").write_bytes(b"abc")
    tree = FileTree(tmp_path)
    lines = tree.format_tree().splitlines()
    assert lines[0] == f"[DIR] {tmp_path.name}"
    assert lines[1] == "  [DIR] d"
    assert lines[2] == "  [FILE] f.txt (3 bytes)"


def test_print_writes_format(sample):
    tree = FileTree(sample)
    buf = io.StringIO()
    tree.print(buf)
    assert buf.getvalue() == tree.format_tree()


def test_print_defaults_to_stdout(sample, capsys):
    tree = FileTree(sample)
    tree.print()
    assert capsys.readouterr().out == tree.format_tree()