# Shared pytest fixtures for gitpeek tests

import pytest
import os
import sys
import shutil
import tempfile

# Add gitpeek-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'gitpeek-project'))

HASH_A = 'deadbeefdeadbeefdeadbeefdeadbeefdeadbeef'
HASH_B = 'abc123abc123abc123abc123abc123abc123abc1'
HASH_C = '1111111111111111111111111111111111111111'
HASH_D = '2222222222222222222222222222222222222222'


def write_file(git_dir, rel_path, content):
    # Writes `content` to git_dir/rel_path, creating parent directories. rel_path uses forward slashes
    path = os.path.join(git_dir, *rel_path.split('/'))
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)
    return path


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = tempfile.mkdtemp()
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def git_dir(temp_dir):
    # Creates the .git directory of a fresh repository: HEAD on master, no commits yet
    path = os.path.join(temp_dir, '.git')
    os.makedirs(os.path.join(path, 'objects'))
    os.makedirs(os.path.join(path, 'refs', 'heads'))
    os.makedirs(os.path.join(path, 'refs', 'tags'))
    write_file(path, 'HEAD', 'ref: refs/heads/master\n')
    return path


@pytest.fixture
def git_dir_with_commit(git_dir):
    # A repository with master at HASH_A
    write_file(git_dir, 'refs/heads/master', HASH_A + '\n')
    return git_dir


@pytest.fixture
def git_dir_with_branches(git_dir_with_commit):
    # master and feature/login as loose refs, origin/master and origin/HEAD under refs/remotes
    git_dir = git_dir_with_commit
    write_file(git_dir, 'refs/heads/feature/login', HASH_B + '\n')
    write_file(git_dir, 'refs/remotes/origin/master', HASH_A + '\n')
    write_file(git_dir, 'refs/remotes/origin/HEAD', 'ref: refs/remotes/origin/master\n')
    return git_dir
