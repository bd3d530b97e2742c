# stocksim

`stocksim` reads three things from a configuration file: a stock of resources,
a set of processes that turn resources into other resources, and a goal. From
these it builds a schedule of the processes and writes a report. It can also
replay an existing trace against the same configuration and report the first
step that does not hold.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Configuration files

A configuration file is made of plain lines. Lines that start with `#` are
skipped, and so are blank lines.

- A resource: `name:quantity`
- A process: `name:(need:qty;need:qty):(result:qty;result:qty):delay`
- The goal, given exactly once: `optimize:(product)` or `optimize:(time;product)`

Example:

```
# initial stock
euro:10

# processes
buy_material:(euro:8):(material:1):10
build_product:(material:1):(product:1):30
deliver:(product:1):(happy_client:1):20

optimize:(time;happy_client)
```

A file is rejected if any line is none of the above, if it gives the goal
twice, or if it has no resource, no process or no goal.

## Producing a schedule

```
stocksim config.txt [waiting_time]
```

`waiting_time` is the longest time, in seconds, that scheduling may run. It
defaults to 1 second. The report is written next to the configuration, with
the extension replaced by `.log` (`config.txt` gives `config.log`). The
command prints `Output written to <path>`.

The report has this shape:

```
Processes scheduled:
 <cycle>:<process>
 ...
No more process doable at cycle <n>.
Stock left:
 <resource>:<quantity>
 ...
```

If nothing was scheduled, the list of processes reads ` none`. The stock is
listed in the order the resources were first met: those of the configuration
first, then any that were produced later.

The command exits with status 0 on success and 1 on a bad argument, an
unreadable or malformed configuration, or a report that cannot be written.

## Checking a trace

```
stocksim -checker config.txt trace.log
```

`--checker` is accepted as well. The checker skips the first line of the trace
and replays each `cycle:process` line against the initial stock, printing
`Evaluating: <line>` for each one. Replay stops at the first line that is not
of the form `cycle:process`. The check fails, with a message and exit status
1, on a cycle that is not an integer, on an unknown process, or on a process
whose ingredients are not in stock. Otherwise it prints
`Trace completed, no error detected.` and exits with status 0.

## Using it from Python

```python
from stocksim.parse import parse_file
from stocksim.graph import build_graph
from stocksim.schedule import Deadline, schedule
from stocksim.output import build_output

resources, processes, goal = parse_file("config.txt")
finite, ubik = build_graph(resources, processes, goal)
stock = {r.name: r.quantity for r in resources}
end, trace = schedule(stock, processes, finite, ubik, Deadline(1.0))
print(build_output(stock, processes, end, finite, trace))
```

- `stocksim.parse`: `parse_file`, `parse_lines`, and the single-line parsers
  `parse_resource`, `parse_goal` and `parse_process`. They raise
  `ConfigError` (a `ValueError`) on malformed input.
- `stocksim.graph.build_graph` links the processes backwards from the goal. It
  changes the processes in place and returns whether the graph is finite, along
  with the name of a resource that every process produces (`""` if there is
  none; `find_ubik` finds it on its own).
- `stocksim.schedule.schedule` runs the processes on a stock mapping until no
  initial process can run or the `Deadline` expires. `Deadline(None)` never
  expires.
- `stocksim.checker.check_trace` replays trace lines and `check_log` replays a
  file. Both raise `TraceError` when the trace does not hold.
- `stocksim.output.build_output` renders the report, and `write_output` writes
  it to the `.log` path given by `log_path_for`.

## What it does not do

The scheduler follows the precedence graph built from the goal; it does not
search for an optimal schedule. The `time` keyword in the goal is accepted and
recorded on the `Goal`, but it does not change how processes are scheduled.