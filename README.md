# ndprojects

A few small programs and libraries in one package:

| Sub-package               | What it holds                                                      | Command             |
|---------------------------|--------------------------------------------------------------------|---------------------|
| `ndprojects.routeplanner` | OpenStreetMap model and A* route search                            | `ndp-route-planner` |
| `ndprojects.chatbot`      | Keyword-graph chatbot that follows the closest keyword match       | `ndp-chatbot`       |
| `ndprojects.snake`        | Snake game logic: the snake, keyboard controller, game and scores  | –                   |
| `ndprojects.sysmonitor`   | Time formatting and a per-process statistics record                | –                   |
| `ndprojects.traffic`      | Empty for now                                                      | –                   |

## Installation

```
pip install .
```

Python 3.10 or later is required. `ndprojects.snake.controller` uses `pygame`;
everything else uses the standard library only.

## Route planner

```
ndp-route-planner -f map.osm
```

Then type four numbers on standard input: start x, start y, end x, end y, each
as a percentage (0–100) of the map's extent. The program prints
`Distance: <metres> meters.`. Run without arguments it prints a usage hint and
reads `../map.osm`. If the input numbers are missing or the map cannot be
parsed, it prints an error and exits with status 1.

From Python:

```python
from ndprojects.routeplanner.cli import read_file
from ndprojects.routeplanner.route_model import RouteModel
from ndprojects.routeplanner.planner import RoutePlanner

model = RouteModel(read_file("map.osm"))
planner = RoutePlanner(model, 10, 10, 90, 90)
planner.a_star_search()
print(planner.distance, len(model.path))
```

- `read_file(path)` returns the file's bytes, or `None` if it cannot be read or
  is empty.
- `Model(xml)` parses nodes, ways, roads, railways, buildings, leisure areas,
  water and land use from OSM XML. It projects coordinates to metres and scales
  them so that the shorter side of the map's bounds is 1 (`metric_scale` gives
  the metres per unit). It raises `ValueError` if the XML cannot be parsed or
  has no `<bounds>`. `road_type_from_string` and `landuse_type_from_string`
  map OSM tag values to `RoadType` and `LanduseType`.
- `RouteModel` adds `RouteNode` search nodes. `find_closest_node(x, y)`
  returns the nearest node on a non-footway road.
- `RoutePlanner` holds `start_node`, `end_node`, `open_list` and `distance`.
  It also exposes the search steps `calculate_h_value`, `add_neighbors`,
  `next_node` and `construct_final_path`.

The model is not drawn on screen. The package only computes the route and its
length.

## Chatbot

```
ndp-chatbot --graph answergraph.txt --image chatbot.png
```

The command loads the answer graph and prints the root node's answer. Each
non-empty line read from standard input is then taken as a user message, and
the bot's next answer is printed. The defaults are `../src/answergraph.txt` and
`../images/chatbot.png`. The image path is stored on the bot and never
displayed. If the graph file cannot be opened the command exits with status 1.

The graph file holds one element per line, written as `<KEY:value>` tokens:

```
<TYPE:NODE><ID:0><ANSWER:Hello!>
<TYPE:NODE><ID:1><ANSWER:Memory is managed by ...>
<TYPE:EDGE><ID:0><PARENT:0><CHILD:1><KEYWORD:memory>
```

From Python:

```python
from ndprojects.chatbot.chatlogic import ChatLogic

logic = ChatLogic(on_response=print)
logic.load_answer_graph("answergraph.txt")
logic.send_message_to_chatbot("memory")
```

- `parse_tokens(line)` splits one line into `(key, value)` pairs.
- `ChatBot` picks a random answer from its current node. It then moves along
  the edge whose keyword has the smallest case-insensitive
  `levenshtein_distance` to the message. If the node has no outgoing edges it
  returns to the root.
- `GraphNode` and `GraphEdge` make up the graph.

## Snake

`ndprojects.snake` contains the game logic:

- `Snake(grid_width, grid_height, difficulty)` moves on a wrapping grid. The
  starting speed depends on `Difficulty.EASY`, `MEDIUM` or `HARD`. Call
  `update()` to move and `grow_body()` to grow. `snake_cell(x, y)` tells
  whether a cell is occupied.
- `Controller` maps the arrow keys to a `Direction`. A snake longer than one
  cell cannot reverse. `handle_input` reads pending pygame events.
- `Game(grid_width, grid_height, name, level, scores_path, rng)` places food,
  keeps score and speeds the snake up each time it eats. `run(controller,
  renderer, target_frame_duration)` drives the frame loop. It expects a
  renderer object with `render(snake, food)` and
  `update_window_title(score, fps)` methods.
- Game keeps a score file, by default `../scores/scores.txt`:
  - `write_score()` appends `attempt : score - name`.
  - `read_highest_score()` prints and returns the highest score.
  - `reset_scores()` empties the file.
  - Each has an `_async` variant that returns a `concurrent.futures.Future`.

The package has no window renderer and no command that starts the game. To
play, you supply a renderer.

## System monitor helpers

```python
from ndprojects.sysmonitor.format import elapsed_time

elapsed_time(3725)      # '01:02:05'
```

`Process.load(parser, pid)` builds a frozen record of a process:
- `pid`, `user`, `command`, `cpu_utilization`, `ram` and `uptime`.
- It reads them through a parser object that you provide. The parser must
  have `command`, `ram`, `process_uptime`, `user`, `uptime` and
  `process_active_jiffies` methods.
- `Process` instances order by CPU utilization.

The package does not read `/proc` itself and has no terminal monitor screen.

## Traffic simulation

`ndprojects.traffic` is an empty sub-package. No simulation is provided.

## Tests

```
pip install .[test]
pytest
```