"""
constants.py: Centralized configuration for both games and the host window.
"""

# -------- Neon Flappy: World Config --------
FLAPPY_WIDTH = 450
FLAPPY_HEIGHT = 400
BIRD_X = FLAPPY_WIDTH / 2          # Fixed bird X position (centre of playfield)
RESPAWN_Y = FLAPPY_HEIGHT / 2
BIRD_SIZE = 30                      # Square hitbox, also the glyph size

# -------- Neon Flappy: Pipe Config --------
PIPE_WIDTH = 50
PIPE_GAP = 130
PIPE_SPEED = 3                      # Pixels per frame, leftwards
PIPE_SPACING = 200                  # Distance from the right edge before the next pipe
PIPE_MIN_HEIGHT = 50                # Smallest visible segment

# -------- Neon Flappy: Physics Config (pixels / frame) --------
GRAVITY = 0.5
JUMP_VELOCITY = -9

# Frame pacing
TARGET_FPS = 60
FRAME_DURATION_MS = 1000 / TARGET_FPS
FLAP_FLASH_MS = 100                 # Border glow after a flap

# Cosmetic avatars: name -> body colour
AVATARS = {
    "bird": (255, 214, 0),
    "rocket": (255, 69, 58),
    "ghost": (235, 235, 255),
    "alien": (57, 255, 20),
}
DEFAULT_AVATAR = "bird"

# -------- Star Catcher: World Config --------
STARS_WIDTH = 600
STARS_HEIGHT = 500
STAR_SIZE = 40
STAR_SPEED = 3                      # Pixels per frame, downwards
BUCKET_WIDTH = 120
BUCKET_HEIGHT = 50
MAX_LIVES = 3

# Spawn cadence (frames between stars); the only difficulty ramp
STAR_SPAWN_RATE = 60
STAR_SPAWN_RATE_MIN = 20
STAR_SPAWN_RATE_STEP = 0.5

STAR_COLORS = [
    (255, 251, 0),
    (0, 255, 255),
    (255, 51, 204),
    (255, 102, 0),
    (0, 255, 102),
    (255, 0, 102),
    (0, 136, 255),
    (255, 255, 255),
]

# Player registration
MAX_NAME_LENGTH = 15
DEFAULT_PLAYER_NAME = "Player"
NO_RECORD_NAME = "N/A"

# -------- Persistence --------
DB_FILE = "neon_arcade.db"
HIGH_SCORE_KEY = "starCatcherHighScore"
HIGH_SCORE_NAME_KEY = "starCatcherHighScoreName"

# -------- Host Window --------
RENDER_FPS = 120                    # Host polling rate; both games throttle themselves to TARGET_FPS
HUD_HEIGHT = 60
NEON_BLUE = (0, 191, 255)
NEON_RED = (255, 49, 49)
NEON_PURPLE = (147, 112, 219)
BACKGROUND = (10, 10, 25)
BUCKET_COLOR = (162, 210, 255)
