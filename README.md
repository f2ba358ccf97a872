# hbackup

`hbackup` is a small command-line backup tool. You register backup jobs, each
made of a source file and a target file or directory, and then run them all at
once, one at a time, or make a one-off copy without saving a job.

Jobs are stored as JSON in `hbackup/hbackup.json` under your user
configuration directory (`~/.config` on macOS).

## Installation

```
pip install .
```

This installs the `bk` command. `bk --version` prints the version.

## Usage

Add a job. `~` and `$HOME` at the start of a path are expanded, relative paths
are resolved against the current directory, and the source must exist. Each new
job gets the smallest id not already in use, starting at 0.

```
bk add --source ~/notes.txt --target ~/backups/
```

List the jobs:

```
bk list
```

Run every job, one job by id, or a one-time copy:

```
bk run
bk run --id 0
bk run ~/notes.txt ~/backups/
```

`--id` cannot be combined with a source and target, and a source must be
given together with a target. When every job is run, a failing job is reported
and the remaining jobs still run.

If the target is an existing directory, or does not exist and has no file
extension, the source file is copied into it under its own name. Missing parent
directories are created.

Change a job's source and/or target (at least one of them is required):

```
bk edit --id 0 --target ~/other-backups/
```

Delete one job or all of them:

```
bk delete --id 0
bk delete --all
```

Show where the configuration file lives, back it up to
`hbackup_backup.json` in the same directory, or reset it to no jobs (an
existing file is backed up first). `--copy` and `--reset` cannot be used
together.

```
bk config
bk config --copy
bk config --reset
```

`bk` exits with status 1 when no command is given or a command fails, and 0
otherwise.

## Using it from Python

```python
from hbackup.application import Application

app = Application.load()
job = app.add_job("/home/me/notes.txt", "/home/me/backups")
app.write()
```

`hbackup.commands` holds the functions behind each command (`add`, `run`,
`run_by_id`, `run_one_time`, `list_jobs`, `delete`, `edit`, `show_config`,
`backup_config`, `reset_config`); they raise `CommandError` when a command
cannot be carried out.

## What it does not do

Each job copies a single file. Directories are not copied recursively, old
copies are not kept or versioned, and jobs run only when `bk run` is invoked;
there is no scheduling.

## Running the tests

```
pip install .[test]
pytest
```