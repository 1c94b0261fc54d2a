"""
Змейка в окне pygame.

Использование:
    python play.py                 # Обычная игра
    python play.py --seed 42       # Повторяемая раскладка еды
    python play.py --cell 30       # Клетки крупнее

Управление: стрелки или свайп мышью/пальцем,
ENTER - старт, SPACE/P - пауза, R - рестарт, ESC - выход.
"""
import argparse
import logging

import pygame

from config import (CELL_SIZE, PANEL_WIDTH, FPS, BACKGROUND, GRID, HEAD, SNAKE, FOOD,
                    PANEL, WHITE, GRAY, BUTTON, BUTTON_DISABLED)
from controls import TouchTracker, key_direction
from engine import GameEngine, GamePhase
from grid import GridModel
from hud import button_states, score_text, speed_text, final_score_text
from timer import PygameTimer


class SnakePlayer:
    def __init__(self, seed=None, fps=None, cell_size=None):
        pygame.init()

        self.cell = cell_size or CELL_SIZE
        self.fps = fps or FPS
        self.grid = GridModel(seed=seed)
        self.field = self.grid.size * self.cell

        self.screen = pygame.display.set_mode((self.field + PANEL_WIDTH, self.field))
        pygame.display.set_caption('Snake')
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont('arial', 18)
        self.big_font = pygame.font.SysFont('arial', 28)

        self.timer = PygameTimer()
        self.engine = GameEngine(
            self.timer,
            grid=self.grid,
            on_score_changed=self.on_score_changed,
            on_phase_changed=self.on_phase_changed,
            on_game_over=self.on_game_over,
        )
        self.touch = TouchTracker()

        # Кнопки на боковой панели
        self.buttons = {
            name: pygame.Rect(self.field + 20, self.field - 150 + i * 45, PANEL_WIDTH - 40, 35)
            for i, name in enumerate(("start", "pause", "restart"))
        }

        self.score_label = score_text(0)
        self.speed_label = speed_text(1)
        self.final_label = None
        self.games = 0
        self.best = 0

    # === События движка ===

    def on_score_changed(self, score, level):
        self.score_label = score_text(score)
        self.speed_label = speed_text(level)

    def on_phase_changed(self, phase):
        if phase is not GamePhase.OVER:
            self.final_label = None

    def on_game_over(self, score):
        self.games += 1
        self.best = max(self.best, score)
        self.final_label = final_score_text(score)
        if self.engine.won:
            print(f"Game {self.games}: WIN! Score {score}")
        else:
            print(f"Game {self.games}: Score {score}")

    # === Отрисовка ===

    def cell_rect(self, cell, padding):
        x, y = cell
        return pygame.Rect(x * self.cell + padding, y * self.cell + padding,
                           self.cell - padding * 2, self.cell - padding * 2)

    def draw(self):
        self.screen.fill(BACKGROUND)

        # Сетка
        for i in range(self.grid.size + 1):
            pygame.draw.line(self.screen, GRID, (i * self.cell, 0), (i * self.cell, self.field))
            pygame.draw.line(self.screen, GRID, (0, i * self.cell), (self.field, i * self.cell))

        # Змейка (голова ярче)
        for i, segment in enumerate(self.engine.snake):
            color = HEAD if i == 0 else SNAKE
            pygame.draw.rect(self.screen, color, self.cell_rect(segment, 1))

        # Еда
        if self.engine.food is not None:
            pygame.draw.rect(self.screen, FOOD, self.cell_rect(self.engine.food, 2))

        self.draw_panel()

        if self.final_label:
            self.draw_banner("Game Over", self.final_label)
        elif self.engine.phase is GamePhase.PAUSED:
            self.draw_banner("Paused")

        pygame.display.flip()

    def draw_panel(self):
        panel = pygame.Rect(self.field, 0, PANEL_WIDTH, self.field)
        pygame.draw.rect(self.screen, PANEL, panel)

        stats = [
            self.score_label,
            self.speed_label,
            f"Length: {len(self.engine.snake)}",
            "",
            f"Games: {self.games}",
            f"Best: {self.best}",
        ]
        for i, text in enumerate(stats):
            surf = self.font.render(text, True, WHITE)
            self.screen.blit(surf, (self.field + 10, 20 + i * 25))

        for name, state in button_states(self.engine.phase).items():
            rect = self.buttons[name]
            pygame.draw.rect(self.screen, BUTTON if state.enabled else BUTTON_DISABLED, rect)
            label = self.font.render(state.label, True, WHITE if state.enabled else GRAY)
            self.screen.blit(label, label.get_rect(center=rect.center))

    def draw_banner(self, title, subtitle=None):
        lines = [self.big_font.render(title, True, WHITE)]
        if subtitle:
            lines.append(self.font.render(subtitle, True, WHITE))
        y = self.field // 2 - 30
        for surf in lines:
            self.screen.blit(surf, surf.get_rect(centerx=self.field // 2, y=y))
            y += surf.get_height() + 8

    # === Ввод ===

    def press(self, name):
        """Нажатие кнопки панели (только если она активна)"""
        if not button_states(self.engine.phase)[name].enabled:
            return
        getattr(self.engine, name)()

    def pointer_down(self, point):
        clicked = [name for name, rect in self.buttons.items() if rect.collidepoint(point)]
        if clicked:
            self.press(clicked[0])
        elif point[0] < self.field:
            self.touch.begin(point)

    def swipe_end(self, point):
        running = self.engine.phase is GamePhase.RUNNING
        direction = self.touch.end(point, running=running)
        if direction is not None:
            self.engine.request_direction(direction)

    def handle_events(self):
        for event in pygame.event.get():
            if self.timer.dispatch(event):
                continue
            if event.type == pygame.QUIT:
                return False

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                elif event.key == pygame.K_RETURN:
                    self.press("start")
                elif event.key in (pygame.K_SPACE, pygame.K_p):
                    self.press("pause")
                elif event.key == pygame.K_r:
                    self.press("restart")
                else:
                    direction = key_direction(event.key)
                    if direction is not None:
                        self.engine.request_direction(direction)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not getattr(event, "touch", False):
                self.pointer_down(event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and not getattr(event, "touch", False):
                self.swipe_end(event.pos)

            # Координаты пальца нормированы в [0, 1]
            elif event.type == pygame.FINGERDOWN:
                width, height = self.screen.get_size()
                self.pointer_down((event.x * width, event.y * height))
            elif event.type == pygame.FINGERUP:
                width, height = self.screen.get_size()
                self.swipe_end((event.x * width, event.y * height))

        return True

    def play(self):
        running = True
        while running:
            running = self.handle_events()
            self.draw()
            self.clock.tick(self.fps)

        pygame.quit()

        if self.games > 0:
            print(f"\nResults: {self.games} games")
            print(f"Best: {self.best}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Snake game")
    parser.add_argument("--seed", "-s", type=int, default=None,
                        help="Seed for food placement")
    parser.add_argument("--fps", type=int, default=FPS,
                        help="Redraw rate of the window")
    parser.add_argument("--cell", type=int, default=CELL_SIZE,
                        help="Cell size in pixels")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    player = SnakePlayer(seed=args.seed, fps=args.fps, cell_size=args.cell)
    player.play()


if __name__ == "__main__":
    main()
