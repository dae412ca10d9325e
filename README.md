# mirtree

A file tree that reads a directory one level at a time, keeps its entries
sorted, and runs your callbacks when a file or directory is clicked,
double-clicked or used from a context menu. It also comes with a handful of
helpers for reading files and CSV data and for picking apart text.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Command line

    mirtree [FOLDER] [--sort ORDER] [--depth N] [--click NAME] [--double-click NAME]

Without arguments this prints the tree of the current directory. Each
directory is listed as `[DIR] name` and each file as `[FILE] name (N bytes)`,
indented two spaces per level.

- `FOLDER`: the root folder (default: the current directory).
- `--sort`: one of `type_then_name` (default), `extension`, `name`, `size`,
  `date_modified`.
- `--depth N`: how many levels of subfolders to load before printing
  (default 0, only the top level). A negative value is an error.
- `--click NAME`: click an entry, given by its path relative to the root
  folder. May be repeated.
- `--double-click NAME`: double click an entry; a file's contents are
  printed. May be repeated.

Every click reports itself on standard output through the callbacks of
`mirtree.cli.register_default_callbacks`, as lines such as
`[FILE_CLICK] path - Triggers on any clicked file`. Beyond the file and
directory callbacks, extra lines are written for `.txt`, `.typ`, `.json`
and `.any` files. Naming an entry that does not exist ends the program with
an error.

## The file tree

`mirtree.filetree.FileTree` reads the top level of a folder (the current
directory if none is given). Subdirectories stay unexpanded until you call
`expand_node` on them:

    from mirtree.filetree import FileTree, SortCriteria

    tree = FileTree("some/folder")
    for node in tree.current_children():
        print(node.name, node.kind)

    tree.expand_node(tree.current_children()[0])
    tree.set_sort_criteria(SortCriteria.SIZE)
    print(tree.format_tree())

The sort orders are:

- `TYPE_THEN_NAME` (the default): directories first, then names compared
  without regard to case.
- `EXTENSION`: directories first, then files grouped by extension, then name.
- `NAME`: name only, without regard to case.
- `SIZE`: directories first, then the largest files first, then name.
- `DATE_MODIFIED`: accepted, but leaves the entries in the order they
  already have.

`set_sort_criteria` re-sorts the children of the current node; directories
expanded later are sorted with the new order. `expand_node` returns `False`
when the node is not an unexpanded directory. Entries that cannot be read
are skipped, and a folder that does not exist gives an empty tree.

`refresh_root_node` reads the root folder again. `set_root_folder` moves the
tree to another folder and raises `ValueError` for an empty path.
`format_tree` returns the printed form, and `print` writes it to a stream
(standard output by default). The properties `root_node`, `root_folder`,
`sort_criteria` and `is_initialized` describe the tree; `current_path` and
`current_children` describe its current node, the root.

Each entry is a `mirtree.filenode.FileNode` with a `name`, a `full_path`, a
`kind` (`FileType.DIR`, `FileType.FILE` or `FileType.UNKNOWN`), a `size`,
`has_unexpanded_children` and its `children`. `extension()` returns a
file's extension, dot included, and `""` for anything that is not a file.

## Browsing and callbacks

`mirtree.browser.FileTreeBrowser` puts interaction on top of a tree. You can
register callbacks for files, for directories and for single extensions
(matched without regard to case); each receives the entry's path:

    from mirtree.browser import CallbackType, FileTreeBrowser
    from mirtree.filetree import FileTree

    browser = FileTreeBrowser(FileTree("some/folder"))
    browser.register_extension_callback(
        ".txt", CallbackType.CLICK, lambda path: print("clicked", path)
    )
    for node in browser.open_node(browser.file_tree.root_node):
        browser.single_click(node)

- `open_node` returns a directory's children, loading them the first time.
- `single_click` runs the `CLICK` callbacks.
- `double_click` runs the `CONTEXT_MENU` and `DOUBLE_CLICK` callbacks and
  loads a file's contents into `browser.current_file`, an `OpenFile` with
  `content`, `path` and `is_open`. `close_file` clears it.
- `context_menu_items` returns the menu labels of a node ("Copy Path",
  "Open File", and "Process EXT file" when an extension has a
  `CONTEXT_MENU` callback), each mapped to the action it runs.
- `copy_path` and `open_file` work on the node's name joined to the root
  folder.
- `display_name` gives a label such as `[FILE] notes.txt (1.50 KB)`.

`format_file_size` writes a byte count in B, KB, MB, GB or TB.

Folder and file pickers plug in through the abstract `FileDialogManager`.
Subclass it and pass an instance to `FileTreeBrowser` to use
`open_folder_dialog` and `open_file_dialog`, which return the chosen path or
`None`.

## Helpers

`mirtree.fileutils` has `open_file` (its `OSError` says why a file could not
be opened), `read_file` and `read_lines` for a path or a text stream,
`read_csv` and `parse_csv_line` for CSV data in which a quoted field may hold
line breaks, and `get_file_extension` and `has_extension`.

`mirtree.textutils` has functions for splitting text with quote awareness
(`split_at`), pulling out digits or alphanumeric words (`find_numbers`,
`filter_numbers`, `split_chars_from_nums`, `find_numbers_and_consume`,
`get_first_clean_string`, `find_first_clean_string`,
`find_all_clean_strings`, `find_clean_string_at`), replacing
`{placeholder}` markers (`replace_placeholder_if`), reading the text between
curly braces (`extract_all_between_curly_braces`), removing or replacing
characters (`remove_characters_from_str`), matching words
(`find_match_from`, `find_io_datatype`), `to_lower_case`, and
`map_contains`, which also finds a key stored behind a byte-order mark.

## What it does not do

There is no graphical window: the browser reacts to the actions you call,
and the command line prints the tree. No folder or file picker comes with the
package; you supply one by subclassing `FileDialogManager`. Opened files can
be read but not edited or saved, and there is no way to create new files.