# quickfind

quickfind finds files by name in one folder and opens the one you pick with
the program your system has set for it. You drive it line by line. Each plain
line is a search, and lines that start with `:` are commands.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Using the launcher

```
quickfind --root /path/to/folder
```

`--root` sets the folder to search. The default is `C:`. The launcher reads
lines from standard input until the input ends or it gets `:quit`.

- **A plain line is a search query.**
  - Matching checks whether an entry name contains the query. Only the ASCII
    letters A–Z are folded to lower case, on both sides.
  - Results from earlier queries stay on the list while they still contain the
    new query. Results that no longer match are removed.
  - New matching entries of the folder are added, and a name is never added
    twice.
  - A query that is empty, or made only of spaces, clears every result.
  - If the folder cannot be read, the search simply finds nothing new.
- **`:open NAME`** opens the result with that name. Result names are the
  lower-cased entry names. If no result has that name, the launcher prints
  `no such result: NAME`.
- **`:toggle`** switches the launcher between shown and hidden.
- **`:quit`** stops the launcher.
- **Any other `:` command** raises `ValueError`.

Changes to the result list are printed as they happen. An added result appears
as `+ name`, a removed one as `- name`.

Opening a file uses `os.startfile` on Windows, `open` on macOS and `xdg-open`
elsewhere.

## Using it as a library

### `quickfind.search`

- `SearchSession(root, on_create, on_delete, opener)` holds the current results
  for a folder.
  - `search(query)` updates the results and returns a copy of them.
  - `click(name)` opens the matching result and returns it, or returns `None`.
  - `clear()` empties the list.
  - `on_create` and `on_delete` are called with each name as it is added or
    removed.
  - `opener` is called with the `FoundFile` to open. It defaults to
    `FoundFile.open`.
- `ascii_lower(text)` lower-cases ASCII letters only, as the search does.
- `window_height_for(list_height)` gives the window height for a result list of
  the given pixel height. It adds 300 and caps the result at 600. Negative
  totals also give 600.

### `quickfind.files`

- `FoundFile(name, path)` is one search result. It is a frozen dataclass.
  `open()` hands the file to the system's default program.

### `quickfind.app`

- `Launcher(root, stdin, stdout, opener)` is the line-driven launcher.
  - `run()` reads lines until the input ends or a quit command arrives.
  - `handle(line)` processes one line and returns `False` on `:quit`.
  - `visible` tells whether it is shown.
  - `size` is `(800, height)` while visible and `(0, 0)` while hidden. The
    height starts at 400. After each search it becomes
    `window_height_for(50 * number_of_results)`.
- `main(argv=None)` parses `--root` and runs a `Launcher` on standard input and
  output.

### `quickfind.embedded`

- `EmbeddedFileSystem(files, charset="utf-8")` serves files from an in-memory
  mapping of paths to bytes.
  - `file_exists(path)` checks for the exact path.
  - `open_file(path)` returns the bytes, or raises `FileNotFoundError`.
  - `file_charset(path)` returns the same charset for every path.
  - `file_mime_type(path)` looks up the text after the path's last dot.
- `mime_type_for_extension(ext)` maps an extension, given without the dot, to a
  MIME type. The lookup is case-sensitive. Extensions it does not know, and
  paths with no dot, give `application/octet-stream`.

## What it does not do

- quickfind has no graphical window, no global hotkey and no taskbar
  integration. "Shown", "hidden" and the window size are only state kept by
  `Launcher`.
- It searches only the entries directly inside one folder. It does not look
  into subfolders.
- It does not watch the folder for changes. Only a new query re-reads it.