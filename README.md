# webappmgr

Helpers for building a web application manager: language-tag parsing,
error-page lookup, a small URL splitter, device and network status
tracking, timers, an observer list, CPU and group-file helpers, and a
console logger with debug switches.

## Modules

- `webappmgr.bcp47`: `parse_bcp47(text)` reads a `language[-Script][-REGION]`
  tag into a frozen `BCP47` dataclass (`language`, `script`, `region`, and
  the `has_language`, `has_script`, `has_region` properties). Text that does
  not match gives `None`.
- `webappmgr.utils`: `get_error_page_paths` lists localized error-page
  candidates, most specific first; `get_hostname` pulls the host out of a
  URL; `does_path_exist`, `read_file`; `uri_to_local` and `local_to_uri`
  convert between `file:` URIs and absolute paths; `get_env_var`;
  `str_to_int` (raises `ValueError`) and `str_to_int_with_default`;
  `split_string`, `trim_string`, `replace_substr`; `string_to_json` (strict,
  object or array root, raises `ValueError`) and `json_to_string` (indented,
  sorted keys).
- `webappmgr.url`: `Url` splits a URI into `scheme`, `host`, `port`, `path`,
  `query` and `fragment`, with `set_query`, `to_string`, `to_local_file`,
  `Url.from_local_file`, `is_local_file` and `file_name`.
- `webappmgr.device_info`: `DeviceInfo` stores named device properties,
  loads language and country settings from a locale preferences file
  (`initialize`), and works out screen size and platform version
  (`init_display_info`, `init_platform_info`, `gather_info`).
  `parse_platform_version` splits `<major>.<minor>.<dot>`.
- `webappmgr.network_status`: `NetworkStatus.from_json` and
  `NetworkInformation.from_json` read a connection-manager status reply.
- `webappmgr.network_status_manager`: `NetworkStatusManager` keeps the
  current status, and `update_network_status` logs and returns what changed.
- `webappmgr.observer_list`: `ObserverList`, an ordered, identity-based,
  duplicate-free list with `for_each` over a snapshot.
- `webappmgr.timer`: `Timer`, `OneShotTimer`, `RepeatingTimer` and
  `single_shot` run callbacks on background threads; `ElapsedTimer` is a
  stopwatch with `elapsed_ms` and `elapsed_us`.
- `webappmgr.logs`: `LogLevel`, the `LogControl` switches with
  `set_log_control` and the `debug_*_enabled` queries, `log_level_name`,
  `format_fields`, `log_msg` and `log_string` (written to standard error by
  default, or to a stream you pass).
- `webappmgr.web_app_manager_utils`: `CpuIdleMeter` samples `/proc/stat`
  for the idle share in per-mille; `percentages`, `tokenize`, `in_group`,
  `group_ids_for_user`, `set_groups` and `truncate_url`.
- `webappmgr.msgid`: `MsgId`, the identifiers attached to log lines.

## Examples

```python
from webappmgr.bcp47 import parse_bcp47
from webappmgr.utils import get_error_page_paths, get_hostname

tag = parse_bcp47("zh-Hant-TW")
print(tag.language, tag.script, tag.region)   # zh Hant TW

for path in get_error_page_paths("/usr/share/pages/error.html", "en-US"):
    print(path)

print(get_hostname("https://user@www.example.com:8080/index.html"))
# www.example.com
```

```python
from webappmgr.url import Url

url = Url("http://www.example.com:8080/path/page.html#top")
url.set_query([("q", "a b"), ("lang", "en")])
print(url.to_string())
# http://www.example.com:8080/path/page.html?q=a%20b&lang=en#top
```

## What this package does not do

It does not connect to a service bus, does not answer requests to launch,
pause, kill or list applications, and does not react to events from other
system services. There is no web engine, no window handling and no command
to run; the modules above are helpers to build such a manager on.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```

Python 3.10 or newer is required. The package has no runtime
dependencies.