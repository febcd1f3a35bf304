"""A long walk: the longest hike through a forest of trails and slopes."""

# (row step, column step, slope that may be entered moving that way)
_MOVES = ((1, 0, "v"), (0, 1, ">"), (-1, 0, "^"), (0, -1, "<"))
_FLATTEN = str.maketrans("<>^v", "....")


def _parse(text, slippery):
    grid = [line for line in text.splitlines() if line]
    if not grid:
        raise ValueError("empty map")
    if not slippery:
        grid = [line.translate(_FLATTEN) for line in grid]
    return grid


def _is_open(grid, row, col):
    return 0 <= row < len(grid) and 0 <= col < len(grid[row]) and grid[row][col] != "#"


def _can_enter(grid, row, col, slope):
    return _is_open(grid, row, col) and grid[row][col] in (".", slope)


def _nodes(grid, start):
    last = len(grid) - 1
    nodes = {start}
    for row, line in enumerate(grid):
        for col, tile in enumerate(line):
            if tile == "#":
                continue
            if row == last:
                nodes.add((row, col))
                continue
            exits = sum(1 for dr, dc, _ in _MOVES if _is_open(grid, row + dr, col + dc))
            if exits >= 3:
                nodes.add((row, col))
    return nodes


def _graph(grid, nodes):
    """Longest corridor length between each pair of directly linked nodes."""
    last = len(grid) - 1
    graph = {node: {} for node in nodes}
    for node in nodes:
        if node[0] == last:
            continue
        for dr, dc, slope in _MOVES:
            cell = (node[0] + dr, node[1] + dc)
            if not _can_enter(grid, *cell, slope):
                continue
            previous, length = node, 1
            while cell not in nodes:
                step = next(
                    (
                        (cell[0] + ndr, cell[1] + ndc)
                        for ndr, ndc, nslope in _MOVES
                        if (cell[0] + ndr, cell[1] + ndc) != previous
                        and _can_enter(grid, cell[0] + ndr, cell[1] + ndc, nslope)
                    ),
                    None,
                )
                if step is None:
                    break
                previous, cell, length = cell, step, length + 1
            else:
                if cell != node:
                    graph[node][cell] = max(graph[node].get(cell, 0), length)
    return graph


def longest_hike(text, slippery=True):
    """Steps in the longest hike from the top row to the bottom row.

    With ``slippery`` a slope tile can only be entered in its direction;
    otherwise slopes are plain paths.
    """
    grid = _parse(text, slippery)
    start_col = grid[0].find(".")
    if start_col < 0:
        raise ValueError("no start tile on the top row")
    start = (0, start_col)
    last = len(grid) - 1
    if last == 0:
        return 0

    nodes = sorted(_nodes(grid, start))
    index = {node: i for i, node in enumerate(nodes)}
    graph = _graph(grid, set(nodes))
    edges = [
        [(index[target], length) for target, length in graph[node].items()]
        for node in nodes
    ]
    is_end = [node[0] == last for node in nodes]

    def walk(i, visited):
        if is_end[i]:
            return 0
        best = None
        for j, length in edges[i]:
            if visited & (1 << j):
                continue
            rest = walk(j, visited | (1 << j))
            if rest is not None and (best is None or length + rest > best):
                best = length + rest
        return best

    first = index[start]
    result = walk(first, 1 << first)
    if result is None:
        raise ValueError("no path to the bottom row")
    return result


def part1(text):
    return longest_hike(text, slippery=True)


def part2(text):
    return longest_hike(text, slippery=False)