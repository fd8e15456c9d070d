from .git import RepoInfo, get_repo_info

__all__ = [
    "RepoInfo",
    "get_repo_info",
]
