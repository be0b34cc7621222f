# What it does: Defines the exceptions raised while reading a .git directory
# How it does: RepoStateError remembers the path that could not be read or parsed, NotARepositoryError narrows it to a missing .git directory or HEAD file


class RepoStateError(Exception):
    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path

    def __str__(self):
        message = super().__str__()
        if self.path is None:
            return message
        return f"{message} [{self.path}]"


class NotARepositoryError(RepoStateError):
    pass
