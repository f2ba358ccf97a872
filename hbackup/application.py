"""Backup job configuration and its JSON storage."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

import platformdirs

PKG_NAME = "hbackup"
MAX_JOB_ID = 2**32 - 1


@dataclass
class Job:
    """A single backup job: copy ``source`` to ``target``."""

    id: int
    source: Path
    target: Path

    def __post_init__(self) -> None:
        self.source = Path(self.source)
        self.target = Path(self.target)

    def __str__(self) -> str:
        return (
            "{\n"
            f"    id: {self.id},\n"
            f'    source: "{self.source}",\n'
            f'    target: "{self.target}",\n'
            "}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "source": str(self.source), "target": str(self.target)}

    @classmethod
    def from_dict(cls, data: Any) -> Job:
        if not isinstance(data, dict):
            raise ValueError(f"job entry must be an object, got {type(data).__name__}")
        try:
            job_id = data["id"]
            source = data["source"]
            target = data["target"]
        except KeyError as exc:
            raise ValueError(f"job entry is missing field {exc.args[0]!r}") from exc
        if isinstance(job_id, bool) or not isinstance(job_id, int) or not 0 <= job_id <= MAX_JOB_ID:
            raise ValueError(f"invalid job id: {job_id!r}")
        if not isinstance(source, str) or not isinstance(target, str):
            raise ValueError("job source and target must be strings")
        return cls(job_id, Path(source), Path(target))


@dataclass
class Application:
    """The stored configuration: all backup jobs."""

    jobs: list[Job] = field(default_factory=list)

    @classmethod
    def load(cls) -> Application:
        """Load the configuration file, or return an empty configuration if none exists."""
        if config_file().exists():
            return read_config_file()
        return cls()

    def to_dict(self) -> dict[str, Any]:
        return {"jobs": [job.to_dict() for job in self.jobs]}

    @classmethod
    def from_dict(cls, data: Any) -> Application:
        if not isinstance(data, dict) or "jobs" not in data:
            raise ValueError("configuration must be an object with a 'jobs' field")
        jobs = data["jobs"]
        if not isinstance(jobs, list):
            raise ValueError("'jobs' must be a list")
        return cls([Job.from_dict(entry) for entry in jobs])

    def add_job(self, source: Path | str, target: Path | str) -> Job:
        """Add a job under the smallest unused id and return it."""
        used = {job.id for job in self.jobs}
        job_id = next((i for i in range(MAX_JOB_ID) if i not in used), None)
        if job_id is None:
            raise OverflowError(
                f"The maximum number of jobs created is {MAX_JOB_ID}. No more jobs can be added."
            )
        job = Job(job_id, Path(source), Path(target))
        self.jobs.append(job)
        return job

    def reset_jobs(self) -> None:
        self.jobs = []

    def remove_job(self, job_id: int) -> Job | None:
        """Remove the job with ``job_id``; return it, or None if there was none."""
        job = self.find_job(job_id)
        if job is not None:
            self.jobs.remove(job)
        return job

    def find_job(self, job_id: int) -> Job | None:
        return next((job for job in self.jobs if job.id == job_id), None)

    def write(self) -> None:
        write_config(self)


def config_dir() -> Path:
    """Directory that holds the configuration files."""
    if sys.platform == "darwin":
        base = Path.home() / ".config"
    else:
        base = Path(platformdirs.user_config_dir(roaming=True))
    return base / PKG_NAME


def config_file() -> Path:
    return config_dir() / f"{PKG_NAME}.json"


def backup_config_file() -> Path:
    return config_dir() / f"{PKG_NAME}_backup.json"


def write_config(app: Application) -> None:
    path = config_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(app.to_dict(), handle, indent=2)


def read_config_file() -> Application:
    with config_file().open(encoding="utf-8") as handle:
        return Application.from_dict(json.load(handle))


def load_jobs() -> list[Job]:
    return Application.load().jobs


def format_jobs(jobs: Iterable[Job]) -> str:
    """Render jobs as a bracketed, comma separated listing."""
    return "[" + ",\n".join(str(job) for job in jobs) + "]"