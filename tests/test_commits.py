from pathlib import Path

import pytest

from ritz.branches import checkout_branch
from ritz.commits import (
    CommitResult,
    commit,
    create_commit_object,
    create_tree_object,
    update_ref,
)
from ritz.objects import read_object, sha1_hex
from ritz.repo import NotInitializedError, init_repository
from ritz.staging import add
from ritz.status import head_commit


@pytest.fixture
def repo(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    init_repository()
    return tmp_path


def test_commit_outside_repository_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(NotInitializedError):
        commit("message")


def test_commit_updates_master_ref(repo):
    Path("a.txt").write_bytes(b"hello")
    add(["a.txt"])
    result = commit("first")
    ref = Path(".ritz", "refs", "heads", "master").read_text()
    assert ref == result.commit_hash
    assert result.files == ["a.txt"]
    assert result.branch == "master"


def test_commit_object_references_tree_and_message(repo):
    Path("a.txt").write_bytes(b"hello")
    add(["a.txt"])
    result = commit("first")
    content = read_object(result.commit_hash)
    assert content.startswith(f"tree {result.tree_hash}\n".encode())
    assert content.endswith(b"\n\nfirst\n")
    assert sha1_hex(content) == result.commit_hash


def test_tree_object_lists_index_entries(repo):
    Path("a.txt").write_bytes(b"hello")
    add(["a.txt"])
    result = commit("first")
    sha = sha1_hex(b"hello")
    assert read_object(result.tree_hash) == f"100644 {sha}\ta.txt".encode()


def test_tree_hash_independent_of_insertion_order(repo):
    first = create_tree_object({"a": "1" * 40, "b": "2" * 40})
    second = create_tree_object({"b": "2" * 40, "a": "1" * 40})
    assert first == second


def test_empty_tree_hash(repo):
    assert create_tree_object({}) == "da39a3ee5e6b4b0d3255bfef95601890afd80709"


def test_create_commit_object_round_trip(repo):
    tree = create_tree_object({"x": "3" * 40})
    commit_hash = create_commit_object(tree, "msg")
    lines = read_object(commit_hash).decode().split("\n")
    assert lines[0] == f"tree {tree}"
    assert lines[1].startswith("author ")
    assert lines[2].startswith("committer ")
    assert lines[4] == "msg"


def test_update_ref_writes_hash(repo):
    update_ref("refs/heads/topic", "abc123")
    assert Path(".ritz", "refs", "heads", "topic").read_text() == "abc123"
    checkout_branch("topic")
    assert head_commit() == "abc123"


def test_update_ref_moves_head_commit(repo):
    update_ref("refs/heads/master", "abc123")
    assert head_commit() == "abc123"


def test_summary_lines():
    result = CommitResult(
        branch="master",
        commit_hash="c0ffee",
        tree_hash="beef",
        message="hi",
        files=["a.txt", "b.txt"],
    )
    assert result.summary().split("\n") == [
        "[master (root-commit) c0ffee] hi",
        " 2 file(s) changed",
        " create mode 100644 a.txt",
        " create mode 100644 b.txt",
    ]