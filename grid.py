import numpy as np

# Cell codes used in board snapshots
EMPTY = 0
PLAYER = 1
DEAD_PLAYER = 2
ROBOT = 3
JUNK = 4


class Grid:
    def __init__(self, width=20, height=20):
        if width < 1 or height < 1:
            raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height

    @property
    def capacity(self):
        return self.width * self.height

    def contains(self, pos):
        x, y = pos
        return 1 <= x <= self.width and 1 <= y <= self.height

    def clamp_move(self, pos, dx, dy):
        """Apply dx and dy independently, dropping the axis that would leave the grid"""
        x, y = pos
        new_x, new_y = x + dx, y + dy
        if 1 <= new_x <= self.width:
            x = new_x
        if 1 <= new_y <= self.height:
            y = new_y
        return (x, y)

    def snapshot(self, player, robots):
        """Rows of cell codes, indexed [y-1, x-1]"""
        cells = np.zeros((self.height, self.width), dtype=int)
        for robot in robots:
            x, y = robot.position
            if not self.contains(robot.position):
                continue
            # A live robot is drawn over junk sharing its cell
            if robot.is_alive:
                cells[y - 1, x - 1] = ROBOT
            elif cells[y - 1, x - 1] == EMPTY:
                cells[y - 1, x - 1] = JUNK

        px, py = player
        if cells[py - 1, px - 1] != EMPTY:
            cells[py - 1, px - 1] = DEAD_PLAYER
        else:
            cells[py - 1, px - 1] = PLAYER
        return cells
