"""Fixed adjacency tables for the standard 19-tile Catan board.

Tiles are laid out in rows of 3-4-5-4-3.  Intersections are numbered row by
row from the top (7, 9, 11, 11, 9, 7 per row) and paths are numbered in the
order they appear when the board is read left-to-right, top-to-bottom:
the horizontal run of each intersection row, then the vertical links below
it.  These are the same orderings the text codec assigns to its slots.

Path 61 is recorded as ``(45, 45)``; it is a placeholder on the board's
outer boundary and never connects two intersections.
"""

from __future__ import annotations

INTERSECTION_COUNT = 54
PATH_COUNT = 72
TILE_COUNT = 19

# Endpoint pair for each path, indexed by path id.
PATH_ENDPOINTS: tuple[tuple[int, int], ...] = (
    # Row 0 horizontals (0-5) and verticals (6-9)
    (0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6),
    (0, 8), (2, 10), (4, 12), (6, 14),
    # Row 1 horizontals (10-17) and verticals (18-22)
    (8, 7), (8, 9), (9, 10), (10, 11), (11, 12), (12, 13), (13, 14), (14, 15),
    (7, 17), (9, 19), (11, 21), (13, 23), (15, 25),
    # Row 2 horizontals (23-32) and verticals (33-38)
    (16, 17), (17, 18), (18, 19), (19, 20), (20, 21),
    (21, 22), (22, 23), (23, 24), (24, 25), (25, 26),
    (16, 27), (18, 29), (20, 31), (22, 33), (24, 35), (26, 37),
    # Row 3 horizontals (39-48) and verticals (49-53)
    (27, 28), (28, 29), (29, 30), (30, 31), (31, 32),
    (32, 33), (33, 34), (34, 35), (35, 36), (36, 37),
    (28, 38), (30, 40), (32, 42), (34, 44), (36, 46),
    # Row 4 horizontals (54-61) and verticals (62-65)
    (38, 39), (39, 40), (40, 41), (41, 42), (42, 43), (43, 44), (44, 45), (45, 45),
    (39, 47), (41, 49), (43, 51), (45, 53),
    # Row 5 horizontals (66-71)
    (47, 48), (48, 49), (49, 50), (50, 51), (51, 52), (52, 53),
)  # fmt: skip

# (incident path ids, adjacent tile ids) for each intersection.
INTERSECTION_LINKS: tuple[tuple[tuple[int, ...], tuple[int, ...]], ...] = (
    ((0, 6), (0,)),  # 0
    ((0, 1), (0,)),  # 1
    ((1, 2, 7), (0, 1)),  # 2
    ((2, 3), (1,)),  # 3
    ((3, 4, 8), (1, 2)),  # 4
    ((4, 5), (2,)),  # 5
    ((5, 9), (2,)),  # 6
    ((10, 18), (3,)),  # 7
    ((10, 6, 11), (3, 0)),  # 8
    ((11, 12, 19), (0, 3, 4)),  # 9
    ((7, 12, 13), (0, 1, 4)),  # 10
    ((13, 14, 20), (1, 4, 5)),  # 11
    ((8, 14, 15), (1, 2, 5)),  # 12
    ((15, 16, 21), (2, 5, 6)),  # 13
    ((9, 16, 17), (2, 6)),  # 14
    ((17, 22), (6,)),  # 15
    ((23, 33), (7,)),  # 16
    ((18, 23, 24), (3, 7)),  # 17
    ((24, 25, 34), (3, 7, 8)),  # 18
    ((19, 25, 26), (3, 4, 8)),  # 19
    ((26, 27, 35), (4, 8, 9)),  # 20
    ((20, 27, 28), (4, 5, 9)),  # 21
    ((28, 29, 36), (5, 9, 10)),  # 22
    ((21, 29, 30), (5, 6, 10)),  # 23
    ((30, 31, 37), (6, 10, 11)),  # 24
    ((22, 31, 32), (6, 11)),  # 25
    ((32, 38), (11,)),  # 26
    ((33, 39), (7,)),  # 27
    ((39, 40, 49), (7, 12)),  # 28
    ((34, 40, 41), (7, 8, 12)),  # 29
    ((41, 42, 50), (8, 12, 13)),  # 30
    ((35, 42, 43), (8, 9, 13)),  # 31
    ((43, 44, 51), (9, 13, 14)),  # 32
    ((36, 44, 45), (9, 10, 14)),  # 33
    ((45, 46, 52), (10, 14, 15)),  # 34
    ((37, 46, 47), (10, 11, 15)),  # 35
    ((47, 48, 53), (11, 15)),  # 36
    ((38, 48), (11,)),  # 37
    ((49, 54), (12,)),  # 38
    ((54, 55, 62), (12, 16)),  # 39
    ((50, 55, 56), (12, 13, 16)),  # 40
    ((56, 57, 63), (13, 16, 17)),  # 41
    ((51, 57, 58), (13, 14, 17)),  # 42
    ((58, 59, 64), (14, 17, 18)),  # 43
    ((52, 59, 60), (14, 15, 18)),  # 44
    ((60, 61, 65), (15, 18)),  # 45
    ((53, 61), (15,)),  # 46
    ((62, 66), (16,)),  # 47
    ((66, 67), (16,)),  # 48
    ((63, 67, 68), (16, 17)),  # 49
    ((68, 69), (17,)),  # 50
    ((64, 69, 70), (17, 18)),  # 51
    ((70, 71), (18,)),  # 52
    ((65, 71), (18,)),  # 53
)
