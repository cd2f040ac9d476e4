"""Snake game logic: the snake, keyboard controller and game with a score file."""