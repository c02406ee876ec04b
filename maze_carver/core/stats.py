from typing import List, Tuple
from maze_carver.core.cell import RIGHT, BOTTOM
from maze_carver.core.grid import Grid

def passages(grid: Grid) -> List[Tuple[int, int]]:
    """
    Carved edges as (index_a, index_b) pairs. Only RIGHT and BOTTOM walls
    are inspected so every shared wall is counted once.
    """
    edges = []
    for cell in grid:
        idx = grid.index(cell.col, cell.row)
        if not cell.walls[RIGHT] and cell.col < grid.cols - 1:
            edges.append((idx, idx + 1))
        if not cell.walls[BOTTOM] and cell.row < grid.rows - 1:
            edges.append((idx, idx + grid.cols))
    return edges


def is_perfect(grid: Grid) -> bool:
    """
    True when the carved edges form a spanning tree of the grid graph:
    exactly C*R - 1 edges and no cycle (union-find).
    """
    edges = passages(grid)
    if len(edges) != len(grid) - 1:
        return False

    parent = list(range(len(grid)))

    def find(i):
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    for a, b in edges:
        ra, rb = find(a), find(b)
        if ra == rb:
            return False # Cycle
        parent[ra] = rb
    return True


def calculate_stats(grid: Grid):
    dead_ends = 0
    corridors = 0
    junctions = 0

    for cell in grid:
        exits = sum(1 for _ in grid.get_open_neighbors(cell))
        if exits == 1: dead_ends += 1
        elif exits == 2: corridors += 1
        elif exits >= 3: junctions += 1

    total = len(grid)
    return {
        "cells": total,
        "passages": len(passages(grid)),
        "dead_ends": dead_ends,
        "corridors": corridors,
        "junctions": junctions,
        "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
    }
