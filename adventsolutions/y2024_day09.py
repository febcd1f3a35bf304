"""Disk fragmenter: compacting files on a disk map and computing the checksum."""


def _digits(text):
    digits = text.strip()
    for c in digits:
        if c not in "0123456789":
            raise ValueError(f"invalid disk map digit {c!r}")
    return [int(c) for c in digits]


def _blocks(digits):
    disk = []
    for index, size in enumerate(digits):
        value = index // 2 if index % 2 == 0 else None
        disk.extend([value] * size)
    return disk


def _checksum(disk):
    return sum(position * file_id for position, file_id in enumerate(disk) if file_id is not None)


def part1(text):
    """Checksum after moving file blocks one at a time into the leftmost free block."""
    disk = _blocks(_digits(text))
    left, right = 0, len(disk) - 1
    while left < right:
        if disk[left] is not None:
            left += 1
        elif disk[right] is None:
            right -= 1
        else:
            disk[left], disk[right] = disk[right], None
    return _checksum(disk)


def part2(text):
    """Checksum after moving whole files, highest id first, into the leftmost fitting gap."""
    files = []
    spans = []
    position = 0
    for index, size in enumerate(_digits(text)):
        (files if index % 2 == 0 else spans).append([position, size])
        position += size
    for file in reversed(files):
        start, size = file
        if size == 0:
            continue
        for span in spans:
            if span[0] >= start:
                break
            if span[1] >= size:
                file[0] = span[0]
                span[0] += size
                span[1] -= size
                break
    return sum(
        file_id * (start + offset)
        for file_id, (start, size) in enumerate(files)
        for offset in range(size)
    )