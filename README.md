# hostprobe

`hostprobe` reads information about the Linux machine it runs on and returns it
as plain Python rows. It is a library. Import the module for the data you want
and call its function.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install .[test]
pytest
```

## Tables

| Module | Function | Rows |
| --- | --- | --- |
| `hostprobe.files` | `files_list(pattern)` | dicts for paths matching a glob, with `type`, `uid`, `gid`, `mode`, `mtime`, `size` |
| `hostprobe.files` | `files_lines(pattern)` | dicts with one entry per line of each matching file, trimmed |
| `hostprobe.files` | `files_columns(pattern, columns, separator, ignore)` | dicts with selected, typed columns from each line |
| `hostprobe.processes` | `processes()` | `ProcessRow` for each running process |
| `hostprobe.sockets` | `sockets()` | `SocketRow` for each open IP socket listed under `/proc/net` |
| `hostprobe.users` | `users()` | `UserRow` for each entry in the password database |
| `hostprobe.system_logs` | `parse_journal_record(text)`, `JournalStreamParser` | `LogEvent`s from journal `json-seq` text |
| `hostprobe.agent_info` | `distribution(root)`, `default_interface(route_path)`, `kernel_info()`, `key_from_file(path, key)` | host and OS details |

### Files

```python
from hostprobe.files import files_list, files_columns

for row in files_list("/etc/init.d/*"):
    print(row["path"], row["type"], row["mode"])

# User name and uid from /etc/passwd
for row in files_columns("/etc/passwd", "$1:text,$3:count", ":"):
    print(row["columns"])
```

Glob expansion returns at most 100 paths.

A column specification is a comma-separated list of `$<N>:<type>` entries.
`$1` is the first column and `$0` is the whole line. The type names are
`address` (or `addr`), `blob`, `bool`, `count`, `double` (or `real`), `int`
(or `integer`), `null` and `text`. They map onto `ColumnType`. Each row's
`columns` entry is a list of `(value, ColumnType)` pairs. The value is `None`
where the column is absent or does not parse. An absent column is paired with
`ColumnType.NULL`.

An empty separator, which is the default, splits on runs of white space. Lines
that match the `ignore` regular expression are skipped. By default these are
blank lines and lines starting with `#` or `;`. Pass `""` to keep every line.
An invalid specification or expression raises `ContentError`.
`parse_columns_spec(spec)` parses a specification alone and raises
`ValueError` on bad input.

### Processes, sockets and users

```python
from hostprobe.processes import processes
from hostprobe.sockets import sockets, tcp_state_name
from hostprobe.users import users

listening = [s for s in sockets() if s.state == "LISTEN"]
admins = [u.name for u in users() if u.is_admin]
```

- `processes()` leaves out any process that vanishes or cannot be inspected.
- `sockets()` fills `pid` and `process` only for sockets whose owning process is readable. It sets `state` only for TCP sockets.
- `users()` sets `is_admin` for uid 0.

### Journal records

```python
from hostprobe.system_logs import JournalStreamParser

parser = JournalStreamParser()
for event in parser.feed(chunk):   # chunk: str or bytes of json-seq output
    print(event.time, event.process, event.level, event.message)
```

`JournalStreamParser.feed` keeps incomplete trailing data until the rest
arrives. It logs and skips records that fail to parse.
`parse_journal_record` raises `ValueError` for invalid records.

### Host details

- `distribution()` returns the distribution name. It looks in `/etc/os-release`, then `/etc/lsb-release`, then `/etc/redhat-release`, then `/etc/debian_version`.
- `default_interface()` returns the name of the interface that carries the default route.
- `kernel_info()` returns `(name, release, machine)`.

### Utilities

- `hostprobe.textutil` has string helpers: `split`, `split1`, `rsplit1`, `trim`, `ltrim`, `rtrim`, `join`, `transform`, `tolower`, `toupper`, `starts_with` and `ends_with`.
- `hostprobe.result` has a small `Result` type with `Error`, `NoResult`, `NoError` and `Nothing`.
- `hostprobe.helpers` has:
  - `parse_version`, `random_uuid` and a bounded `glob`;
  - time and interval formatting;
  - `ScopeGuard`;
  - `InternalError` and `FatalError`.
- `hostprobe.ascii_table.AsciiTable` renders rows as aligned, centred text. When output goes to a terminal, `hostprobe.color` colours the header.

```python
from hostprobe.helpers import parse_version

parse_version("2.0.4-123")   # 200040123
```

## What it does not do

- `hostprobe` has no command-line tool and no query language. You call its functions from Python.
- It does not run as a service, stream results anywhere or store them.
- It does not read the system journal itself. You pass it journal output you have obtained.
- It does not report the machine's hostname or network addresses.
- The process, socket and user tables rely on `/proc` and the POSIX password database. They target Linux.