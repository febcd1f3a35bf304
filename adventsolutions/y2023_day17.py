"""Clumsy crucible: least heat loss with limits on straight runs."""

import heapq


def least_heat_loss(text, min_run, max_run):
    """Least heat lost from top-left to bottom-right moving between ``min_run`` and ``max_run`` blocks straight."""
    grid = [[int(c) for c in line] for line in text.splitlines() if line]
    if not grid:
        raise ValueError("empty map")
    rows, cols = len(grid), len(grid[0])
    target = (rows - 1, cols - 1)
    start = ((0, 0), (0, 0), 0)
    best = {start: 0}
    heap = [(0, start)]
    while heap:
        cost, state = heapq.heappop(heap)
        if cost > best.get(state, cost):
            continue
        pos, (dr, dc), run = state
        if pos == target and run >= min_run:
            return cost
        moves = []
        if run < max_run:
            moves.append(((dr, dc), run + 1))
        if run >= min_run:
            moves += [((-dc, -dr), 1), ((dc, dr), 1)]
        elif run == 0:
            moves += [((1, 0), 1), ((0, 1), 1)]
        for (ndr, ndc), new_run in moves:
            if (ndr, ndc) == (0, 0):
                continue
            r, c = pos[0] + ndr, pos[1] + ndc
            if not (0 <= r < rows and 0 <= c < cols):
                continue
            new_state = ((r, c), (ndr, ndc), new_run)
            new_cost = cost + grid[r][c]
            if new_cost < best.get(new_state, new_cost + 1):
                best[new_state] = new_cost
                heapq.heappush(heap, (new_cost, new_state))
    raise ValueError("no path to the factory")


def part1(text):
    return least_heat_loss(text, 1, 3)


def part2(text):
    return least_heat_loss(text, 4, 10)