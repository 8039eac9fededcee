# sentinelscan

A small file scanner for Linux. It checks a file in two ways and moves it
out of the way if either check flags it:

- **Signature matching**: the file's SHA-256 digest is compared with a set
  of known-bad digests read from a `HASH;description` text feed.
- **Entropy heuristic**: the Shannon entropy of the file's bytes is
  computed. Files above 7.5 bits per byte, as packed or encrypted payloads
  usually are, are flagged. Empty files are never flagged.

Flagged files are moved into a quarantine directory (`./quarantine` by
default, created with mode `0700` if missing).

It also has a few simple monitors: a polling watcher that scans new and
modified files in a directory, a `/proc` based process lister that reports
processes running from `/tmp`, `/var/tmp` or `/dev/shm`, and a short
packet-capture loop on a network device.

The package needs Python 3.10 or later and nothing outside the standard
library.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Scan one file, quarantine it if it is flagged, then run the monitors on the
current directory, the process table and the loopback device:

```
sentinelscan path/to/file
```

Run the built-in self-check. It loads the signatures, writes and scans a
file named `dummy_test.txt` in the current directory, watches the current
directory for a while, lists processes, checks for a process named
`malicious_process` and briefly captures on the loopback device:

```
sentinelscan test
```

Run without an argument to see the usage line (exit status 1).

Signatures are downloaded from the URL in the environment variable
`SENTINELSCAN_FEED_URL`. If it is unset or the download fails, a small
built-in feed is used instead; that feed holds no 64-character digest, so
the signature check then matches nothing and only the entropy check can
flag a file.

Progress is reported through the `logging` module at INFO level. Errors
from one step (an unreadable file, a missing `/proc`, a device that cannot
be opened) are printed to standard error and the remaining steps still run.

## Using it as a library

```python
from sentinelscan.update import SignatureDatabase, parse_signature_feed
from sentinelscan.scanner import sha256_file, scan_file_signature
from sentinelscan.heuristic import analyze_file_entropy, shannon_entropy
from sentinelscan.quarantine import quarantine_file

signatures = SignatureDatabase()
signatures.load_text(
    "E3B0C44298FC1C149AFBF4C8996FB92427AE41E4649B934CA495991B7852B855;empty file\n"
)

path = "download.bin"
infected = scan_file_signature(path, signatures)
suspicious = analyze_file_entropy(path, 7.5)
if infected or suspicious:
    new_path = quarantine_file(path, "./quarantine")
```

### Signatures

- `parse_signature_feed(text)` splits the feed into lines, takes the part of
  each line before the first `;`, keeps it only if it is exactly 64
  characters long, and lower-cases it.
- `SignatureDatabase(feed_url=None, timeout=30.0)` holds the signatures in
  load order. It supports `in`, `len()` and iteration.
- `SignatureDatabase.load_text(text)` replaces the contents and returns the
  number of signatures loaded.
- `SignatureDatabase.update(fetch=None)` reloads from the text returned by
  the `fetch` callable, or else downloads `feed_url` with
  `fetch_feed(url, timeout)`. If that raises `OSError` or `ValueError`, or no
  URL is configured, the built-in fallback feed is loaded. It returns the
  number of signatures loaded.

### Scanning

- `sha256_file(filepath)` returns the lower-case hex SHA-256 digest of a
  file.
- `scan_file_signature(filepath, signatures)` returns `True` if that digest
  is in `signatures` (any container of strings).
- `shannon_entropy(data)` gives the entropy of a bytes object in bits per
  byte, from 0.0 up to 8.0.
- `analyze_file_entropy(filepath, threshold=7.5)` returns `True` if the
  file's entropy is above `threshold`.
- `quarantine_file(filepath, quarantine_dir="./quarantine")` moves the file
  into the directory under its own name and returns the new path.

All of these raise `OSError` when a file cannot be read or moved.

### Monitors

```python
from sentinelscan.process_monitor import list_processes, check_suspicious_process
from sentinelscan.realtime import monitor_directory
from sentinelscan.network_monitor import start_network_monitor
```

- `iter_processes(proc_root="/proc")` yields `ProcessInfo(pid, name)` for
  every process whose `comm` file can be read, by ascending PID;
  `list_processes(proc_root)` returns them as a list and logs them.
- `check_suspicious_process(process_name, proc_root="/proc")` returns
  `True` if any process of that name has an executable under `/tmp`,
  `/var/tmp` or `/dev/shm`, or an executable link that cannot be read.
- `monitor_directory(directory, signatures, quarantine_dir="./quarantine",
  max_events=10, max_idle_cycles=5, interval=1.0)` polls a directory and
  returns the `DirectoryEvent`s (`kind` as `EventKind.CREATED`, `MODIFIED`
  or `DELETED`, `name`, `is_dir`) it handled. New and modified files are
  scanned and quarantined if flagged. It stops once `max_events` events are
  handled or after `max_idle_cycles` polls without change. `snapshot` and
  `diff_snapshots` are the building blocks it uses; `diff_snapshots`
  returns events ordered by name, and an entry that changes between file and
  directory yields a deletion followed by a creation.
- `start_network_monitor(device="lo", max_packets=5, max_timeouts=5,
  timeout_seconds=1.0)` captures packets with a raw `AF_PACKET` socket and
  returns their lengths. It raises `OSError` where such sockets are not
  available or the device cannot be opened; capturing usually needs
  elevated privileges.

### Sample test data

`sentinelscan.cli.write_random_file(path="malware.bin", size=1024)` writes
a file of random bytes and returns its path. Such a file has high entropy,
so the heuristic check is expected to flag it, which makes it handy for
trying out the scanner.

### JSON

`sentinelscan.minijson.parse(text)` reads a small subset of JSON: objects,
arrays of strings, and strings without escapes. Arrays stop at their first
item that is not a string, the first of repeated keys wins, and text after
the first complete value is ignored. It raises `JsonParseError` (a
`ValueError` with a `position` attribute) on malformed input.

## What it does not do

- There is no built-in feed URL and no on-disk signature store: signatures
  live in memory and are fetched afresh on every run.
- The network monitor only counts packets and reports their lengths; it
  does not inspect their contents.
- Directory watching is by polling, not by kernel notifications, and covers
  only the entries directly inside the watched directory.