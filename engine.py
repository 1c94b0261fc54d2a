"""
Игровой движок: фазы игры, счёт, скорость и тики.

Движок владеет ровно одним хэндлом таймера. При смене скорости или
фазы старый хэндл отменяется и только потом заводится новый.

События для отрисовки (все колбэки необязательны):
  on_frame(snake, food)              - после каждого тика
  on_score_changed(score, level)     - старт и каждая съеденная еда
  on_phase_changed(phase)            - любая смена фазы
  on_game_over(final_score)          - столкновение или заполненное поле
"""
import logging
from enum import Enum

from config import INITIAL_SPEED, SPEED_DECREASE, MIN_SPEED, ORIGIN
from controls import accept_direction
from grid import Direction, GridModel

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class GameEngine:
    def __init__(self, timer, grid=None, on_frame=None, on_score_changed=None,
                 on_phase_changed=None, on_game_over=None, initial_speed=None,
                 speed_decrease=None, min_speed=None, origin=None):
        self.timer = timer
        self.grid = grid or GridModel()

        self.initial_speed = initial_speed or INITIAL_SPEED
        self.speed_decrease = speed_decrease or SPEED_DECREASE
        self.min_speed = min_speed or MIN_SPEED
        self.origin = tuple(origin or ORIGIN)
        if self.min_speed <= 0 or self.min_speed > self.initial_speed:
            raise ValueError(
                f"min_speed must be in (0, {self.initial_speed}], got {self.min_speed}")
        if not self.grid.in_bounds(self.origin):
            raise ValueError(f"origin {self.origin} is outside the {self.grid.size}x{self.grid.size} grid")

        self.on_frame = on_frame
        self.on_score_changed = on_score_changed
        self.on_phase_changed = on_phase_changed
        self.on_game_over = on_game_over

        self.phase = GamePhase.IDLE
        self._snake = [self.origin]
        self.food = None
        self.score = 0
        self.speed = self.initial_speed
        self.pending_direction = Direction.RIGHT
        self.applied_direction = Direction.RIGHT
        self.won = False
        self.game_over_reason = None
        self._handle = None

    @property
    def snake(self):
        """Копия тела змейки, голова первая"""
        return list(self._snake)

    @property
    def speed_level(self):
        return round((self.initial_speed - self.speed) / self.speed_decrease + 1)

    # === Управление снаружи ===

    def start(self):
        if self.phase not in (GamePhase.IDLE, GamePhase.OVER):
            logger.debug("start() ignored in phase %s", self.phase.value)
            return
        self._reset()

    def pause(self):
        """Пауза работает как переключатель"""
        if self.phase is GamePhase.RUNNING:
            self._stop_ticking()
            self._set_phase(GamePhase.PAUSED)
        elif self.phase is GamePhase.PAUSED:
            self._set_phase(GamePhase.RUNNING)
            self._schedule()
        else:
            logger.debug("pause() ignored in phase %s", self.phase.value)

    def restart(self):
        if self.phase is GamePhase.IDLE:
            logger.debug("restart() ignored before the first start")
            return
        self._stop_ticking()
        self._reset()

    def request_direction(self, direction):
        if self.phase is not GamePhase.RUNNING:
            return
        accepted = accept_direction(direction, self.applied_direction)
        if accepted is None:
            logger.debug("reversal %s -> %s dropped", self.applied_direction.name, direction.name)
            return
        # Последний запрос до тика побеждает
        self.pending_direction = accepted

    # === Тик ===

    def tick(self):
        if self.phase is not GamePhase.RUNNING:
            return

        self.applied_direction = self.pending_direction
        move = self.grid.advance(self._snake, self.applied_direction, self.food)

        if move.collided:
            self._end(move.reason)
            self._emit_frame()
            return

        self._snake.insert(0, move.new_head)

        if move.ate_food:
            self.score += 1
            self.food = self.grid.generate_food(self._snake)
            self.speed = max(self.min_speed, self.speed - self.speed_decrease)
            self._emit_score()
            if self.food is None:
                # Змейка заполнила всё поле - победа
                self.won = True
                self._end("board full")
            else:
                # Интервал поменялся - перезаводим таймер
                self._stop_ticking()
                self._schedule()
        else:
            self._snake.pop()

        self._emit_frame()

    # === Внутреннее ===

    def _reset(self):
        self._snake = [self.origin]
        self.food = self.grid.generate_food(self._snake)
        self.pending_direction = Direction.RIGHT
        self.applied_direction = Direction.RIGHT
        self.score = 0
        self.speed = self.initial_speed
        self.won = False
        self.game_over_reason = None

        logger.info("game started at %s, food at %s", self.origin, self.food)
        self._set_phase(GamePhase.RUNNING)
        self._emit_score()
        self._schedule()
        self._emit_frame()

    def _end(self, reason):
        self._stop_ticking()
        self.game_over_reason = reason
        self._set_phase(GamePhase.OVER)
        logger.info("game over (%s), score %d, length %d", reason, self.score, len(self._snake))
        if self.on_game_over:
            self.on_game_over(self.score)

    def _schedule(self):
        self._handle = self.timer.every(self.speed, self.tick)

    def _stop_ticking(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _set_phase(self, phase):
        self.phase = phase
        logger.debug("phase -> %s", phase.value)
        if self.on_phase_changed:
            self.on_phase_changed(phase)

    def _emit_score(self):
        if self.on_score_changed:
            self.on_score_changed(self.score, self.speed_level)

    def _emit_frame(self):
        if self.on_frame:
            self.on_frame(self.snake, self.food)
