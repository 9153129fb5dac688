# ritz

A small version control system that keeps its data in a `.ritz`
directory beside your files. File contents, trees and commits are
stored as zlib-compressed objects under `.ritz/objects/`, named by the
SHA-1 hash of their uncompressed content.

## Installing

```
pip install .
```

This installs the `my_cli` command.

## Using the command line

All repository commands live under the `ritz` command group and act on
the current directory.

```
my_cli ritz init                     # create .ritz with objects/, refs/heads/ and HEAD
my_cli ritz add <file-or-dir>...     # store file contents and stage them in the index
my_cli ritz commit -m "message"      # write a tree and a commit, update refs/heads/master
my_cli ritz status                   # show staged, unstaged and untracked files
my_cli ritz diff <file>              # compare a file with its staged version
my_cli ritz branch                   # list branches, marking the current one with *
my_cli ritz branch <name>            # create a branch
my_cli ritz branch -d <name>         # delete a branch
my_cli ritz branch -m <old> <new>    # rename a branch
my_cli ritz checkout <name>          # point HEAD at another branch
```

Adding a directory stages every file below it. The index is a plain
text file, `.ritz/index`, with one `<sha1> <path>` line per staged
file, sorted by path. `diff` prints both versions of the file and then
the character-level differences, insertions in green and deletions in
red.

Wrong or missing arguments print a usage line and exit with status 1.

## Using the library

The same operations are available from Python:

```python
from ritz.repo import init_repository
from ritz.staging import add
from ritz.commits import commit
from ritz.status import status
from ritz.diff import diff
from ritz.branches import create_branch, checkout_branch, list_branches

init_repository()
failures = add(["notes.txt"])        # list of (path, OSError) for paths that failed
result = commit("first commit")      # CommitResult
print(result.summary())
print(status().render())             # StatusReport
print(diff("notes.txt").render())    # DiffResult

create_branch("feature")
checkout_branch("feature")           # False if already on that branch
print(list_branches())               # [(name, is_current), ...]
```

Lower-level helpers live in `ritz.objects` (`compress`, `decompress`,
`sha1_hex`, `object_path`, `write_object`, `read_object`) and
`ritz.index` (`load_index`, `save_index`, `untracked_files`).
`ritz.diff.diff_texts` and `ritz.diff.pretty_diff` compare and colour
any two strings.

`add`, `commit`, `status` and `diff` raise `ritz.repo.NotInitializedError`
outside a repository; `init_repository` raises
`ritz.repo.AlreadyInitializedError` inside one. Branch operations raise
`ritz.repo.RitzError` for a branch that is missing or already exists.

## What it does not do

- `commit` always updates `refs/heads/master`, whatever branch HEAD
  names, and commits record no parent, a fixed author and a zero
  timestamp.
- A new branch's reference holds a copy of HEAD's content, not a
  commit hash.
- `checkout` only rewrites HEAD; it does not change files in the
  working directory.
- There is no log, reset, merge, remote or unstaging command.

## Running the tests

```
pip install .[test]
pytest
```