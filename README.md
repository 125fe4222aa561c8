# dayzlauncher

A library for the housekeeping behind a DayZ launcher on Unix systems. It
covers the mod list, the launcher's JSON configuration file, the game's
launch parameters, and the small texts and checks a launcher window shows.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `dayzlauncher.settings`

- `Settings(config_file_path)` loads the JSON configuration. If the file
  does not exist, it is created with its parent directories and filled with
  `default_config()`. When the file cannot be read or parsed, a warning is
  logged and `settings` is left as an empty dict. A mod list in the old
  object format is converted on load.
- `Settings.settings` is the loaded configuration as a plain dict.
- `Settings.get_launch_parameters()` builds the game's command-line options
  from the `parameters` section, taking keys in sorted order:
  - Keys starting with `dlc` or `proton` are skipped.
  - A string `customParameters` is appended as it is.
  - A true boolean becomes ` -key`.
  - A string becomes ` -key=value`.
  - An integer other than `-1` becomes ` -key=value`.
- `Settings.save_settings_to_disk()` writes the configuration back as
  indented JSON with sorted keys.
- `default_config()` returns a fresh copy of the default configuration.
- `is_old_mod_format(mods)` and `convert_old_mod_format_to_new_format(mods)`
  handle the old `{"workshop": [...], "custom": [...]}` layout. The old
  layout is turned into a flat list of `{"path", "name", "enabled"}` entries.

### `dayzlauncher.ui_mod`

`UiMod(enabled, name, path_or_workshop_id, is_workshop_mod)` is one row of
the mod list. `type_label()` returns `"workshop"` or `"custom"`.

### `dayzlauncher.mod_table`

`ModTable` is an ordered list of `UiMod` rows. Rows are stored and returned
as copies.

- `add_mod(mod, index=-1)` inserts a row. The default of `-1` appends.
- `remove_row(index)` removes a row.
- `contains_mod(path_or_workshop_id)` reports whether a row has that path or
  workshop id.
- `get_mod_at(index)` returns one row and `get_mods()` returns all of them.
- `set_enabled(index, enabled)` checks or unchecks a row, and
  `disable_all_mods()` unchecks every row. A change of state refreshes the
  counters.
- `move_rows(rows, drop_row)` moves the given rows, keeping their order, to
  a drop position. It returns the rows' new indices.
- `sort_by_enabled(descending=False)` sorts the rows by their enabled flag.
  The sort is stable.
- `set_mod_counter_callback(callback)` and `update_mod_selection_counters()`
  report the number of enabled workshop mods and enabled custom mods to the
  callback.

Row indices out of range raise `IndexError`.

### `dayzlauncher.launcher`

- `ui_path_to_full_path` and `full_path_to_ui_path` convert between full
  paths and the `~dayz` shorthand for the game directory.
- `is_workshop_mod(path_or_workshop_id)` is true when the value reads as a
  positive 64-bit unsigned number.
- `validate_parameters(parameters)` raises `ValueError` when the profile
  name (`name`) or the parameter file (`par`) is set but blank.
- `dlc_mod_paths(parameters, game_path)` returns the directories of the
  enabled DLCs: `Contact`, `GM`, `vn`, `CSLA` and `WS`.
- `selection_counter_text`, `running_status_text` and `download_status_text`
  return the status lines.
- `mods_to_settings(mods)` turns rows into configuration entries.
- `workshop_mods_to_txt(mods)` lists the enabled workshop mods with their
  workshop page URLs.
- `ensure_extension(filename, extension)` adds a file extension unless the
  name already ends with it.
- `theme_name(entry)` gives the theme name for a `.stylesheet` file.

### `dayzlauncher.paths`

- `default_workshop_path(game_path)` resolves `../../workshop/content/221100`
  relative to the game directory. It returns `None` when that directory does
  not exist.
- `is_workshop_path_valid(path)` checks that the path is a directory.
- `executable_directory(executable_path)` returns the directory that holds
  the executable.

## Example

```python
from dayzlauncher.settings import Settings
from dayzlauncher.mod_table import ModTable
from dayzlauncher.ui_mod import UiMod
from dayzlauncher.launcher import selection_counter_text

settings = Settings("/tmp/dayz-launcher/config.json")
print(settings.get_launch_parameters())

table = ModTable()
table.set_mod_counter_callback(
    lambda workshop, custom: print(selection_counter_text(workshop, custom))
)
table.add_mod(UiMod(True, "Some mod", "1234567", True))
table.update_mod_selection_counters()
```

## What it does not do

The package is a library only, with no window and no command. It does not:

- start the game or look for its running process;
- read or write HTML mod presets;
- load mod preset files;
- talk to Steam or the Steam workshop.

A caller supplies these parts and uses the helpers above to handle the data
that moves between them.