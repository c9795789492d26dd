THEME = {
    "bg_ui": "#2E2E2E",
    "bg_panel": "#3C3F41",
    "fg_text": "#F0F0F0",
    "bg_input": "#555555",
    "highlight": "#81D4FA",

    # Colori canvas (come la versione web)
    "canvas_bg": "#FFFFFF",
    "axis": "#C89600",    # rgb(200, 150, 0)
    "vector": "#000000",
    "point": "#000000",
    "box": "#3232C8",     # rgb(50, 50, 200)
}

# --- CANVAS ---
WIDTH = 800
HEIGHT = 800
OX = WIDTH / 2
OY = HEIGHT / 2
POINT_RADIUS = 3

# --- LUNGHEZZE ---
# Limiti rigidi per min/max delle lunghezze generate
HARD_MIN_LENGTH = 1
HARD_MAX_LENGTH = 400
DEFAULT_MIN_LENGTH = 10
DEFAULT_MAX_LENGTH = 400
FALLBACK_LENGTH = 50

# --- MOTORE ---
CONVERGENCE_EPSILON = 0.001
MIN_SEPARATION = 90
MAX_SAMPLING_ATTEMPTS = 5000
HIDDEN_DASH = [5, 4]
