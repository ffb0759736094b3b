# sdnmap

`sdnmap` holds the non-graphical building blocks of a software-defined network
topology editor. It uses only the standard library.

## What it provides

- **`sdnmap.decoders`** turns the text payloads an SDN controller sends into
  Python values:
  - `decode_path("1,2,3")` gives `[1, 2, 3]`.
  - `decode_paths("1,2;3,4")` and `decode_islands("1,2;3,4")` give lists of lists.
  - `decode_metric("1.5,2")` gives single-precision floats.
  - `decode_pair_transition("0.25")` gives one float.

  A value that cannot be parsed becomes `0` (or `0.0`). No exception is raised.
- **`sdnmap.fileio`** has `write_file(text, file_path)` and `read_file(file_path)`
  for UTF-8 text files. If the file cannot be opened, writing does nothing and
  reading returns `""`.
- **`sdnmap.devices`** has the `DeviceType` enumeration (`SDNCONTROLLER`, `HOST`,
  `SWITCH`, `SSLINK`, `CSLINK`, `TEXTLABEL`) and three connection checks. Each
  check takes two objects that have a `device_type` attribute:
  - `is_ss_connection`: switch to switch.
  - `is_cs_connection`: controller to switch.
  - `is_hs_connection`: host to switch.
- **`sdnmap.antcolony`** describes runs of the controller's ant-colony routing
  service:
  - `AntColonyParams` holds the run settings. Its defaults are 20 ants,
    50 iterations, alpha 1.0, beta 3.0, evaporation 0.5, Q 100.0 and
    percentage 40.
  - `AntColonyParams.for_switches` picks the start and end switches by name.
  - `AntColonyParams.to_payload` builds the JSON body. Tree runs carry no `end`.
  - `parse_path_status` and `parse_tree_status` read status replies into
    `PathStatus` and `TreeStatus`. They translate switch list positions into
    global ids and drop positions that are out of range.
  - `map_indices_to_ids` does that translation on its own.
  - `path_length` sums hop delays through a callback.
  - `format_path` renders a path as names joined by ` -> `.
- **`sdnmap.client`** has `AntColonyClient(base_url, timeout)`:
  - `start(params, metric_file_path)` reads the metric file and posts the run to
    `/antcolony/start`, or to `/antcolony/tree` for a tree run.
  - `path_status(switch_ids)` polls `/antcolony/status`.
  - `tree_status(switch_ids)` polls `/antcolony/status_tree`.
  - Network failures and an unreadable metric file raise `AntColonyError`.

## Example

```python
from sdnmap.antcolony import AntColonyParams, format_path
from sdnmap.client import AntColonyClient

switch_names = ["s1", "s2", "s3", "s4"]
switch_ids = [101, 102, 103, 104]

params = AntColonyParams.for_switches(switch_names, "s1", "s4")
client = AntColonyClient("http://127.0.0.1:8080", 5.0)
client.start(params, "metric_data.txt")

status = client.path_status(switch_ids)
print(format_path(status.best_path, dict(zip(switch_ids, switch_names))))
```

## What it does not do

The package has no graphical map, no drawing and no interactive editing tools
for placing or moving nodes and links. It does not listen on a socket for
controller messages. Feed the payloads to the decoders yourself. It has no
command-line program. The client does not poll on a timer: call
`path_status` or `tree_status` as often as you need, for example every
`POLL_INTERVAL_MS` (350 ms).

## Running the tests

Install the package with its `test` extra, then run `pytest` from the
project root.