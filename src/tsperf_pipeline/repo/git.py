import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from ..errors import RepoInfoError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepoInfo:
    date: str
    branch: str
    commit: str
    commit_short: str
    timestamp_dir: str


async def _run_git(cwd: str | Path, args: list[str]) -> str:
    cmd = ["git", *args]
    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            cwd=str(cwd),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as exc:
        raise RepoInfoError(f"git {' '.join(args)} could not start: {exc}", command=cmd) from exc

    stdout_bytes, stderr_bytes = await proc.communicate()
    if proc.returncode != 0:
        stderr = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
        details = f": {stderr}" if stderr else ""
        raise RepoInfoError(
            f"git {' '.join(args)} failed (code {proc.returncode}){details}", command=cmd
        )
    return (stdout_bytes or b"").decode("utf-8", errors="replace").strip()


def _format_commit_date(raw: str) -> tuple[str, str]:
    """Return ``(iso_date, timestamp_dir)`` for a git ``%cI`` date, both in UTC."""
    committed = datetime.fromisoformat(raw).astimezone(UTC)
    iso_date = committed.strftime("%Y-%m-%dT%H:%M:%S.") + f"{committed.microsecond // 1000:03d}Z"
    return iso_date, committed.strftime("%Y/%m/%d/%H-%M-%S")


async def get_repo_info(cwd: str | Path) -> RepoInfo:
    """Collect provenance for the commit checked out at ``cwd``.

    Args:
        cwd: Any directory inside the repository that produced the build.

    Returns:
        Branch, commit hashes and UTC commit date of ``HEAD``.

    Raises:
        RepoInfoError: If any git query fails.
    """
    commit = await _run_git(cwd, ["rev-parse", "HEAD"])
    commit_short = await _run_git(cwd, ["rev-parse", "--short", "HEAD"])
    branch = await _run_git(cwd, ["rev-parse", "--abbrev-ref", "HEAD"])
    raw_date = await _run_git(cwd, ["log", "-1", "--format=%cI"])

    try:
        date, timestamp_dir = _format_commit_date(raw_date)
    except ValueError as exc:
        raise RepoInfoError(f"Unexpected commit date from git: {raw_date!r}") from exc

    logger.debug("Repo info for %s: %s@%s (%s)", cwd, branch, commit_short, date)
    return RepoInfo(
        date=date,
        branch=branch,
        commit=commit,
        commit_short=commit_short,
        timestamp_dir=timestamp_dir,
    )
