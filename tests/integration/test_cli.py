# Integration tests for the gitpeek command line

import os

import pytest

from gitpeek.cli import main

from conftest import HASH_A, HASH_B, write_file


def run_cli(capsys, *argv):
    try:
        main(list(argv))
        code = 0
    except SystemExit as e:
        code = e.code
    out, err = capsys.readouterr()
    return code, out, err


class TestCommands:
    # Tests for each sub-command against a small repository

    def test_state(self, git_dir_with_commit, temp_dir, capsys):
        code, out, _ = run_cli(capsys, '-C', temp_dir, 'state')
        assert code == 0
        assert out == 'NORMAL\n'

    def test_revision(self, git_dir_with_commit, temp_dir, capsys):
        code, out, _ = run_cli(capsys, '-C', temp_dir, 'revision')
        assert code == 0
        assert out == HASH_A + '\n'

    def test_revision_on_unborn_branch(self, git_dir, temp_dir, capsys):
        code, out, err = run_cli(capsys, '-C', temp_dir, 'revision')
        assert code == 1
        assert out == ''
        assert 'unborn' in err

    def test_branch(self, git_dir_with_commit, temp_dir, capsys):
        code, out, _ = run_cli(capsys, '-C', temp_dir, 'branch')
        assert out == 'master\n'

    def test_branch_when_detached(self, git_dir_with_commit, temp_dir, capsys):
        write_file(git_dir_with_commit, 'HEAD', HASH_B)
        code, out, _ = run_cli(capsys, '-C', temp_dir, 'branch')
        assert 'detached' in out

    def test_branches(self, git_dir_with_branches, temp_dir, capsys):
        code, out, _ = run_cli(capsys, '-C', temp_dir, 'branches')
        assert out.splitlines() == [
            f"  feature/login {HASH_B[:7]}",
            f"* master {HASH_A[:7]}",
        ]

    def test_branches_remotes(self, git_dir_with_branches, temp_dir, capsys):
        code, out, _ = run_cli(capsys, '-C', temp_dir, 'branches', '-r')
        assert out.splitlines() == [f"  origin/master {HASH_A[:7]}"]

    def test_branches_all(self, git_dir_with_branches, temp_dir, capsys):
        write_file(git_dir_with_branches, 'config', '[remote "origin"]\n\turl = https://example.com/repo.git\n')
        code, out, _ = run_cli(capsys, '-C', temp_dir, 'branches', '-a')
        assert out.splitlines() == [
            f"  feature/login {HASH_B[:7]}",
            f"* master {HASH_A[:7]}",
            f"  remotes/origin/master {HASH_A[:7]}",
        ]

    def test_branches_marks_branch_named_like_a_ref(self, git_dir_with_commit, temp_dir, capsys):
        write_file(git_dir_with_commit, 'refs/heads/x', HASH_A)
        write_file(git_dir_with_commit, 'refs/heads/refs/heads/x', HASH_B)
        write_file(git_dir_with_commit, 'HEAD', 'ref: refs/heads/refs/heads/x\n')
        code, out, _ = run_cli(capsys, '-C', temp_dir, 'branches')
        assert out.splitlines() == [
            f"  master {HASH_A[:7]}",
            f"* refs/heads/x {HASH_B[:7]}",
            f"  x {HASH_A[:7]}",
        ]

    @pytest.mark.parametrize('setup, expected', [
        (lambda git_dir: None, 'On branch master'),
        (lambda git_dir: write_file(git_dir, 'HEAD', HASH_B), f'HEAD detached at {HASH_B[:7]}'),
        (lambda git_dir: write_file(git_dir, 'MERGE_HEAD', HASH_B), 'Merging on branch master (MERGE_HEAD exists)'),
        (lambda git_dir: write_file(git_dir, 'rebase-apply/head-name', 'refs/heads/master'), 'Rebasing branch master'),
    ])
    def test_status(self, git_dir_with_commit, temp_dir, capsys, setup, expected):
        setup(git_dir_with_commit)
        code, out, _ = run_cli(capsys, '-C', temp_dir, 'status')
        assert out == expected + '\n'

    def test_status_from_subdirectory(self, git_dir_with_commit, temp_dir, capsys):
        subdir = os.path.join(temp_dir, 'src')
        os.makedirs(subdir)
        os.chdir(subdir)
        code, out, _ = run_cli(capsys, 'status')
        assert out == 'On branch master\n'


class TestErrors:
    # Failures reported by the command line

    def test_not_a_repository(self, temp_dir, capsys):
        code, _, err = run_cli(capsys, '-C', temp_dir, 'state')
        assert code == 1
        assert 'not a git repository' in err

    def test_missing_directory_is_not_searched_upwards(self, git_dir_with_commit, temp_dir, capsys):
        os.chdir(temp_dir)
        code, out, err = run_cli(capsys, '-C', 'no-such-dir', 'state')
        assert code == 1
        assert out == ''
        assert err.startswith('fatal:')
        assert 'no-such-dir' in err

    def test_missing_head(self, git_dir, temp_dir, capsys):
        os.remove(os.path.join(git_dir, 'HEAD'))
        code, _, err = run_cli(capsys, '-C', temp_dir, 'state')
        assert code == 1
        assert err.startswith('fatal:')

    def test_command_is_required(self, capsys):
        code, _, _ = run_cli(capsys)
        assert code == 2
