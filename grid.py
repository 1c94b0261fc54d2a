"""
Модель игрового поля: змейка, еда, движение и столкновения.
Без ввода-вывода, только данные.

Матрица мира:
  0 = пусто
  1 = тело змейки
  2 = еда
  7 = голова
"""
from collections import namedtuple
from enum import Enum

import numpy as np

from config import GRID_SIZE

EMPTY = 0
BODY = 1
FOOD = 2
HEAD = 7


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))


MoveResult = namedtuple("MoveResult", ["new_head", "ate_food", "collided", "reason"])


class GridModel:
    def __init__(self, size=None, seed=None):
        self.size = size or GRID_SIZE
        if self.size < 1:
            raise ValueError(f"grid size must be positive, got {self.size}")
        self.rng = np.random.default_rng(seed)

    def in_bounds(self, cell):
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    def matrix(self, snake, food=None):
        """Матрица мира [y, x] для змейки и еды"""
        grid = np.zeros((self.size, self.size), dtype=np.int8)
        for x, y in snake[1:]:
            grid[y, x] = BODY
        if snake:
            hx, hy = snake[0]
            grid[hy, hx] = HEAD
        if food is not None:
            fx, fy = food
            grid[fy, fx] = FOOD
        return grid

    def generate_food(self, snake):
        """
        Случайная свободная клетка (равномерно по всем пустым).

        Выбираем только среди пустых клеток, поэтому цикла до удачи нет.
        Если змейка заняла всё поле, еде некуда встать - возвращаем None.
        """
        empty = np.argwhere(self.matrix(snake) == EMPTY)
        if len(empty) == 0:
            return None
        y, x = empty[self.rng.integers(len(empty))]
        return int(x), int(y)

    def advance(self, snake, direction, food):
        """
        Куда попадёт голова на следующем тике.
        Змейку не меняет - решение о применении хода за движком.
        """
        head_x, head_y = snake[0]
        dx, dy = direction.value
        new_head = (head_x + dx, head_y + dy)
        ate_food = new_head == food

        if not self.in_bounds(new_head):
            return MoveResult(new_head, False, True, "wall")

        # Хвост уходит с клетки, если еда не съедена - в неё можно войти
        body = snake if ate_food else snake[:-1]
        if new_head in body:
            return MoveResult(new_head, False, True, "self")

        return MoveResult(new_head, ate_food, False, None)
