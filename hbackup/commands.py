"""The operations behind each command: managing and running backup jobs."""

from __future__ import annotations

import shutil
import sys
from pathlib import Path

from hbackup.application import (
    Application,
    Job,
    backup_config_file,
    config_file,
    format_jobs,
    load_jobs,
)
from hbackup.path import check_path, expand_path


class CommandError(Exception):
    """A command could not be carried out."""


def _target_file(source: Path, target: Path) -> Path:
    """Where a copy of ``source`` lands when backed up to ``target``.

    An existing directory, or a path that does not exist and has no
    extension, is taken to be a directory to copy into.
    """
    if target.is_dir() or (not target.exists() and not target.suffix):
        if not source.name:
            raise CommandError("invalid file name")
        return target / source.name
    return target


def _copy(source: Path, target: Path) -> Path:
    destination = _target_file(source, target)
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy(source, destination)
    return destination


def add(source: str, target: str) -> Job:
    """Store a new backup job; the source must exist."""
    source_path = check_path(expand_path(source))
    target_path = expand_path(target)
    app = Application.load()
    job = app.add_job(source_path, target_path)
    app.write()
    return job


def run_job(job: Job) -> Path:
    """Copy one job's source to its target and return the file written."""
    return _copy(job.source, job.target)


def run() -> list[Job]:
    """Run every stored job; report failures and return the jobs that failed."""
    jobs = load_jobs()
    if not jobs:
        print("No jobs are backed up!")
        return []
    failed = []
    for job in jobs:
        try:
            run_job(job)
        except (OSError, CommandError) as exc:
            print(f"Failed to run job id {job.id}: {exc}", file=sys.stderr)
            failed.append(job)
    return failed


def run_by_id(job_id: int) -> bool:
    """Run the job with ``job_id``; return whether it was backed up."""
    jobs = load_jobs()
    if not jobs:
        print("No jobs are backed up!", file=sys.stderr)
    job = next((j for j in jobs if j.id == job_id), None)
    if job is None:
        print(f"Job with id {job_id} not found.", file=sys.stderr)
        return False
    try:
        run_job(job)
    except (OSError, CommandError) as exc:
        print(
            f"Error: Failed to backup job id: {job.id} from {job.source} to {job.target}\n{exc}",
            file=sys.stderr,
        )
        return False
    print("backed up successfully!")
    return True


def run_one_time(source: str, target: str) -> Path | None:
    """Back up ``source`` to ``target`` once; return the file written, or None on copy failure."""
    source_path = check_path(expand_path(source))
    destination = _target_file(source_path, expand_path(target))
    destination.parent.mkdir(parents=True, exist_ok=True)
    try:
        shutil.copy(source_path, destination)
    except OSError as exc:
        print(
            f"Failed to backup job from {source_path} to {destination}: {exc}",
            file=sys.stderr,
        )
        return None
    print("Backed up successfully.")
    return destination


def list_jobs() -> None:
    """Print all stored jobs."""
    print(format_jobs(load_jobs()))


def delete(job_id: int | None, all_jobs: bool) -> bool:
    """Delete all jobs or the one with ``job_id``; return whether anything was deleted."""
    if all_jobs:
        app = Application.load()
        app.reset_jobs()
        app.write()
        print("All jobs deleted successfully.")
        return True
    if job_id is None:
        raise CommandError("Either --all or --id must be specified.")
    app = Application.load()
    if app.remove_job(job_id) is None:
        print(f"Job deletion failed. Job with id {job_id} cannot be found.")
        return False
    app.write()
    print(f"Job with id {job_id} deleted successfully.")
    return True


def edit(job_id: int, source: str | None, target: str | None) -> bool:
    """Change a job's source and/or target; return whether the job was found."""
    source_path = check_path(expand_path(source)) if source is not None else None
    target_path = expand_path(target) if target is not None else None
    app = Application.load()
    job = app.find_job(job_id)
    if job is None:
        print(f"Job with id {job_id} not found.")
        return False
    if source_path is not None:
        job.source = source_path
    if target_path is not None:
        job.target = target_path
    app.write()
    print(f"Job with id {job_id} edited successfully.")
    return True


def show_config() -> None:
    """Print the location of the configuration file."""
    print(f"config file: {config_file()}")


def backup_config() -> Path:
    """Copy the configuration file to its backup, creating it first if needed."""
    source = config_file()
    destination = backup_config_file()
    if not source.exists():
        Application().write()
    try:
        shutil.copy(source, destination)
    except OSError as exc:
        raise CommandError(f"Configuration file backup failed!: {exc}") from exc
    print("Backup successfully!")
    return destination


def reset_config() -> None:
    """Back up the configuration file if it exists, then empty it."""
    source = config_file()
    if source.exists():
        try:
            shutil.copy(source, backup_config_file())
        except OSError as exc:
            raise CommandError(f"Configuration file backup failed!: {exc}") from exc
    Application().write()