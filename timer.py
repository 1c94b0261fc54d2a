"""
Повторяющиеся таймеры для игрового цикла (аналог setInterval/clearInterval).

every(interval_ms, callback) возвращает хэндл с cancel().
После cancel() колбэк больше не вызывается.
"""
import heapq
import itertools

import pygame


class TimerHandle:
    def __init__(self, timer, interval, callback):
        self.timer = timer
        self.interval = interval
        self.callback = callback
        self.active = True

    def cancel(self):
        if self.active:
            self.active = False
            self.timer._cancelled(self)


def _check_interval(interval):
    if interval <= 0:
        raise ValueError(f"timer interval must be positive, got {interval}")


class ManualTimer:
    """
    Таймер на виртуальных часах: время двигается только через advance().
    Нужен для тестов и запуска без окна.
    """

    def __init__(self):
        self.now = 0
        self._queue = []
        self._order = itertools.count()

    def every(self, interval, callback):
        _check_interval(interval)
        handle = TimerHandle(self, interval, callback)
        heapq.heappush(self._queue, (self.now + interval, next(self._order), handle))
        return handle

    def _cancelled(self, handle):
        # Отменённые хэндлы выкидываются из очереди лениво
        pass

    @property
    def active_count(self):
        return sum(1 for _, _, handle in self._queue if handle.active)

    def advance(self, ms):
        """Прокрутить часы на ms, вызывая все сработавшие колбэки по порядку"""
        target = self.now + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            if not handle.active:
                continue
            self.now = due
            heapq.heappush(self._queue, (due + handle.interval, next(self._order), handle))
            handle.callback()
        self.now = target


class PygameTimer:
    """
    Таймер на pygame.time.set_timer.

    Используется один тип события; у каждого хэндла своё поколение,
    поэтому события, попавшие в очередь до cancel(), отбрасываются.
    """

    def __init__(self):
        self.event_type = pygame.event.custom_type()
        self._generation = 0
        self._current = None

    def every(self, interval, callback):
        _check_interval(interval)
        # У pygame один таймер на тип события - новый вытесняет старый
        if self._current is not None:
            self._current.active = False
        self._generation += 1
        handle = TimerHandle(self, interval, callback)
        handle.generation = self._generation
        self._current = handle
        event = pygame.event.Event(self.event_type, generation=handle.generation)
        pygame.time.set_timer(event, int(interval))
        return handle

    def _cancelled(self, handle):
        if handle is self._current:
            pygame.time.set_timer(self.event_type, 0)
            self._current = None

    def dispatch(self, event):
        """True, если событие принадлежит таймеру (даже устаревшее)"""
        if event.type != self.event_type:
            return False
        handle = self._current
        if handle is not None and handle.active and event.generation == handle.generation:
            handle.callback()
        return True
