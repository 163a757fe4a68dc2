"""Build information for ``postdeck --version``."""

from __future__ import annotations

import importlib.metadata
import json
import subprocess
from pathlib import Path
from typing import NamedTuple, Optional

DISTRIBUTION = "postdeck"


class BuildInfo(NamedTuple):
    commit: Optional[str]
    date: Optional[str]
    dirty: bool = False


def _git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None
    return out.decode().strip() or None


def _from_git_checkout() -> Optional[BuildInfo]:
    root = _git(["rev-parse", "--show-toplevel"], Path(__file__).resolve().parent)
    if not root:
        return None
    root_path = Path(root)
    status = _git(["status", "--porcelain"], root_path)
    return BuildInfo(
        commit=_git(["rev-parse", "HEAD"], root_path),
        date=_git(["show", "-s", "--format=%cI", "HEAD"], root_path),
        dirty=bool(status),
    )


def _from_embedded_file() -> Optional[BuildInfo]:
    # Written by the hatch build hook
    try:
        from . import _build_info  # type: ignore
    except ImportError:
        return None
    return BuildInfo(getattr(_build_info, "COMMIT", None), getattr(_build_info, "DATE", None))


def _from_direct_url() -> Optional[BuildInfo]:
    # PEP 610: VCS installs record the commit in direct_url.json
    try:
        dist = importlib.metadata.distribution(DISTRIBUTION)
    except importlib.metadata.PackageNotFoundError:
        return None
    text = dist.read_text("direct_url.json")
    if not text:
        return None
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    commit = (data.get("vcs_info") or {}).get("commit_id")
    return BuildInfo(commit, None) if commit else None


def get_build_info() -> BuildInfo:
    for source in (_from_git_checkout, _from_embedded_file, _from_direct_url):
        info = source()
        if info and (info.commit or info.date):
            return info
    return BuildInfo(None, None)


def get_version_string() -> str:
    """Return ``<short commit>[-dirty] <date>``, with 'unknown' for missing parts."""
    info = get_build_info()
    commit = info.commit[:7] if info.commit else "unknown"
    dirty = "-dirty" if info.dirty else ""
    return f"{commit}{dirty} {info.date or 'unknown'}"
