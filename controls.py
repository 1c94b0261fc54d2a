"""
Управление: клавиши и свайпы превращаются в направление.

Разворот на 180° запрещён - проверка идёт по направлению,
которым змейка реально сходила на прошлом тике.
"""
import pygame

from config import SWIPE_THRESHOLD
from grid import Direction

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    # Имена клавиш как в браузере
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
}


def accept_direction(requested, applied):
    """Новое направление или None, если это разворот назад"""
    if requested is applied.opposite:
        return None
    return requested


def key_direction(key):
    return KEY_DIRECTIONS.get(key)


def swipe_direction(start, end, threshold=SWIPE_THRESHOLD):
    """
    Направление свайпа по доминирующей оси.
    Короткий (или нулевой) свайп ничего не меняет.
    """
    delta_x = end[0] - start[0]
    delta_y = end[1] - start[1]

    if abs(delta_x) > abs(delta_y):
        # Горизонтальный
        if delta_x > threshold:
            return Direction.RIGHT
        if delta_x < -threshold:
            return Direction.LEFT
    else:
        # Вертикальный
        if delta_y > threshold:
            return Direction.DOWN
        if delta_y < -threshold:
            return Direction.UP
    return None


class TouchTracker:
    """Запоминает начало касания до его окончания"""

    def __init__(self, threshold=SWIPE_THRESHOLD):
        self.threshold = threshold
        self.start_point = None

    def begin(self, point):
        self.start_point = point

    def end(self, point, running=True):
        start, self.start_point = self.start_point, None
        if start is None or not running:
            return None
        return swipe_direction(start, point, self.threshold)
