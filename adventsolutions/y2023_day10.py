"""Pipe maze: the loop through S and the tiles it encloses."""

_EXITS_RIGHT = set("S-LF")
_EXITS_LEFT = set("S-J7")
_EXITS_DOWN = set("S|F7")
_EXITS_UP = set("S|LJ")


def _line_width(text):
    newline = text.find("\n")
    if newline < 0:
        raise ValueError("maze must contain at least one line break")
    return newline + 1


def _connected(text, here, there, width):
    if not 0 <= there < len(text):
        return False
    delta = there - here
    if delta == 1:
        return text[here] in _EXITS_RIGHT and text[there] in _EXITS_LEFT
    if delta == -1:
        return text[here] in _EXITS_LEFT and text[there] in _EXITS_RIGHT
    if delta == width:
        return text[here] in _EXITS_DOWN and text[there] in _EXITS_UP
    if delta == -width:
        return text[here] in _EXITS_UP and text[there] in _EXITS_DOWN
    return False


def _walk(text):
    """Yield the indices of the loop tiles, starting at S."""
    width = _line_width(text)
    start = text.find("S")
    if start < 0:
        raise ValueError("maze has no start tile")
    position = previous = start
    while True:
        yield position
        for step in (1, -1, width, -width):
            candidate = position + step
            if candidate != previous and _connected(text, position, candidate, width):
                break
        else:
            raise ValueError("no valid path")
        previous, position = position, candidate
        if position == start:
            return


def loop_tiles(text):
    """The set of indices into ``text`` that belong to the loop."""
    return set(_walk(text))


def part1(text):
    """Steps to the tile of the loop farthest from S."""
    return sum(1 for _ in _walk(text)) // 2


def part2(text):
    """Number of tiles enclosed by the loop."""
    width = _line_width(text)
    parts = loop_tiles(text)
    count = 0
    inside = False
    for position, tile in enumerate(text):
        if position in parts:
            if tile in "|LJ":
                inside = not inside
            elif (
                tile == "S"
                and position > width
                and text[position - width] in "|F7"
            ):
                inside = not inside
        elif inside:
            count += 1
        if position % width == width - 1:
            inside = False
    return count