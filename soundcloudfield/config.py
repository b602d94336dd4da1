from dotenv import load_dotenv
import os

load_dotenv()

# Base directories
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_DIR = os.path.join(BASE_DIR, "config")
TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

# Formatter settings file (read-only, managed by the CMS)
SETTINGS_FILE = os.getenv(
    "SOUNDCLOUDFIELD_SETTINGS_FILE",
    os.path.join(CONFIG_DIR, "player_settings.json"),
)

# SoundCloud oEmbed endpoint
SOUNDCLOUD_OEMBED_ENDPOINT = os.getenv(
    "SOUNDCLOUD_OEMBED_ENDPOINT", "https://soundcloud.com/oembed"
)

# Outbound HTTP
HTTP_TIMEOUT = float(os.getenv("SOUNDCLOUDFIELD_HTTP_TIMEOUT", "10"))
USER_AGENT = os.getenv("SOUNDCLOUDFIELD_USER_AGENT", "soundcloudfield/0.1")
CLIENT_WORKERS = int(os.getenv("SOUNDCLOUDFIELD_CLIENT_WORKERS", "4"))

# Player defaults
DEFAULT_WIDTH = 100
DEFAULT_HTML5_PLAYER_HEIGHT = 166
DEFAULT_HTML5_PLAYER_HEIGHT_SETS = 450
DEFAULT_VISUAL_PLAYER_HEIGHT = 450
DEFAULT_COLOR = "ff7700"

# Enumerated configuration surface
VISUAL_HEIGHT_OPTIONS = [300, 450, 600]
CLIENT_HEIGHT_OPTIONS = [300, 400, 450, 500, 600]

# Page assets attached by the client-side renderer
CLIENT_LIBRARIES = [
    "soundcloudfield/soundcloud_sdk",
    "soundcloudfield/soundcloudfield_init",
]

# Logging
LOG_LEVEL = os.getenv("SOUNDCLOUDFIELD_LOG_LEVEL", "INFO")
