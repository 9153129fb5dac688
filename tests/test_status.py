from pathlib import Path

import pytest

from ritz.commits import commit
from ritz.index import INDEX_PATH, load_index
from ritz.repo import NotInitializedError, init_repository
from ritz.staging import add
from ritz.status import (
    StatusReport,
    changes_not_staged,
    changes_to_be_committed,
    head_commit,
    object_hash_from_commit,
    object_hash_from_tree,
    status,
)


@pytest.fixture
def repo(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    init_repository()
    return tmp_path


def test_head_commit_empty_in_fresh_repository(repo):
    assert head_commit() == ""


def test_head_commit_after_commit(repo):
    Path("a.txt").write_text("hello")
    add(["a.txt"])
    result = commit("first")
    assert head_commit() == result.commit_hash


def test_changes_without_head_are_all_index_entries(repo):
    assert changes_to_be_committed({"b": "2", "a": "1"}, "") == ["a", "b"]


def test_committed_file_hash_found_in_commit(repo):
    Path("a.txt").write_text("hello")
    add(["a.txt"])
    result = commit("first")
    index = load_index(INDEX_PATH)
    assert object_hash_from_commit(result.commit_hash, "a.txt") == index["a.txt"]
    assert object_hash_from_tree(result.tree_hash, "a.txt") == index["a.txt"]
    assert changes_to_be_committed(index, result.commit_hash) == []


def test_restaged_file_is_to_be_committed(repo):
    Path("a.txt").write_text("hello")
    add(["a.txt"])
    result = commit("first")
    Path("a.txt").write_text("changed")
    add(["a.txt"])
    index = load_index(INDEX_PATH)
    assert changes_to_be_committed(index, result.commit_hash) == ["a.txt"]


def test_missing_objects_give_empty_hash(repo):
    assert object_hash_from_commit("ab" * 20, "a.txt") == ""
    assert object_hash_from_tree("cd" * 20, "a.txt") == ""


def test_modified_file_not_staged(repo):
    Path("a.txt").write_text("hello")
    add(["a.txt"])
    Path("a.txt").write_text("other")
    assert changes_not_staged(load_index(INDEX_PATH)) == ["a.txt"]


def test_deleted_file_is_skipped_in_not_staged(repo):
    Path("a.txt").write_text("hello")
    add(["a.txt"])
    Path("a.txt").unlink()
    assert changes_not_staged(load_index(INDEX_PATH)) == []


def test_status_reports_untracked_files(repo):
    Path("b.txt").write_text("data")
    report = status()
    assert report.initial
    assert report.untracked == ["b.txt"]
    assert "\nUntracked files:\n" in report.render()
    assert "\tb.txt\n" in report.render()


def test_status_initial_header(repo):
    Path("a.txt").write_text("hello")
    add(["a.txt"])
    text = status().render()
    assert text.startswith("On branch master\n\nInitial commit\n\n")
    assert "\tnew file: a.txt\n" in text


def test_status_clean_after_commit(repo):
    Path("a.txt").write_text("hello")
    add(["a.txt"])
    commit("first")
    report = status()
    assert not report.initial
    assert report.to_be_committed == []
    assert "nothing to commit, working tree clean" in report.render()


def test_render_not_staged_section():
    report = StatusReport(initial=False, not_staged=["x.txt"])
    assert report.render().endswith("\tmodified: x.txt\n")


def test_status_outside_repository(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(NotInitializedError):
        status()