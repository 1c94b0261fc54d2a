"""Состояние кнопок и подписи панели в зависимости от фазы игры"""
from collections import namedtuple

from engine import GamePhase

ButtonState = namedtuple("ButtonState", ["enabled", "label"])


def button_states(phase):
    if phase is GamePhase.RUNNING:
        return {
            "start": ButtonState(False, "Start Game"),
            "pause": ButtonState(True, "Pause"),
            "restart": ButtonState(True, "Restart"),
        }
    if phase is GamePhase.PAUSED:
        return {
            "start": ButtonState(False, "Start Game"),
            "pause": ButtonState(True, "Resume"),
            "restart": ButtonState(True, "Restart"),
        }
    if phase is GamePhase.OVER:
        return {
            "start": ButtonState(True, "Play Again"),
            "pause": ButtonState(False, "Pause"),
            "restart": ButtonState(True, "Restart"),
        }
    return {
        "start": ButtonState(True, "Start Game"),
        "pause": ButtonState(False, "Pause"),
        "restart": ButtonState(False, "Restart"),
    }


def score_text(score):
    return f"Score: {score}"


def speed_text(level):
    return f"Speed: {level}"


def final_score_text(score):
    return f"Final Score: {score}"
