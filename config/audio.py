"""Audio configuration for sample playback."""

# Preferred output device (None lets SDL choose)
PREFERRED_AUDIO_DEVICE_NAME = None

# Mixer initialisation parameters
SAMPLE_RATE = 48000
SAMPLE_SIZE = -16  # Signed 16-bit
CHANNELS = 2
BUFFER_SIZE = 2048
ALLOW_AUDIO_CHANGES = None  # None = SDL default, 0 = enforce exact settings, see pygame.mixer docs

# Channel pool: key code modulo this picks the channel. A new note on a busy
# channel cuts off whatever that channel was playing.
CHANNEL_POOL_SIZE = 8

# True = decode every sample during startup, False = decode on first press
PRELOAD_SAMPLES = True
