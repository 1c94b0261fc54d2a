# Настройки игры
# Поле 20x20, клетка 20 пикселей (+ панель справа)
GRID_SIZE = 20
CELL_SIZE = 20
PANEL_WIDTH = 200

# Скорость (интервал тика в мс)
INITIAL_SPEED = 150
SPEED_DECREASE = 8   # Ускорение за каждую съеденную еду
MIN_SPEED = 60

# Стартовая клетка змейки
ORIGIN = (10, 10)

# Минимальная длина свайпа
SWIPE_THRESHOLD = 30

# Частота отрисовки окна (тики игры идут по таймеру)
FPS = 60

# Цвета
BACKGROUND = (10, 10, 10)
GRID = (26, 26, 26)
HEAD = (0, 255, 136)
SNAKE = (0, 204, 102)
FOOD = (255, 68, 68)
PANEL = (40, 40, 40)
WHITE = (255, 255, 255)
GRAY = (120, 120, 120)
BUTTON = (60, 60, 60)
BUTTON_DISABLED = (30, 30, 30)
