"""
Audio management.

``MixerAudioBackend`` owns pygame.mixer: it opens the mixer, decodes samples
and starts them on numbered channels. ``AudioDispatcher`` decides when to load
and which channel a note goes to.

Channel policy: channel = key code % CHANNEL_POOL_SIZE. Two notes that land on
the same channel cut each other off (the newest play wins). The pool stays
bounded and no voice-stealing bookkeeping is needed.
"""

import os
from typing import Any, Dict, Iterable, Optional

import pygame

import config as cfg
import showlog
from core.errors import BackendInitFailure, ResourceLoadFailure
from core.key_state import KeyState


def channel_pool_size() -> int:
    return int(getattr(cfg, "CHANNEL_POOL_SIZE", 8))


def sample_path(note_name: str) -> str:
    """Return ``<SAMPLE_DIR>/<note><SAMPLE_EXT>``."""
    sample_dir = getattr(cfg, "SAMPLE_DIR", "resources")
    ext = getattr(cfg, "SAMPLE_EXT", ".ogg")
    if ext and not ext.startswith("."):
        ext = f".{ext}"
    return os.path.join(sample_dir, f"{note_name}{ext}")


class MixerAudioBackend:
    """pygame.mixer wrapper: open the mixer, decode samples, play on a channel."""

    def __init__(self, pool_size: Optional[int] = None):
        self.pool_size = pool_size or channel_pool_size()
        self.ready = False
        self.device: Optional[str] = None

    def _init_kwargs(self) -> Dict[str, Any]:
        return {
            "frequency": int(getattr(cfg, "SAMPLE_RATE", 48000)),
            "size": int(getattr(cfg, "SAMPLE_SIZE", -16)),
            "channels": int(getattr(cfg, "CHANNELS", 2)),
            "buffer": int(getattr(cfg, "BUFFER_SIZE", 2048)),
        }

    def ensure_mixer(self) -> None:
        """
        Open the mixer with the configured settings and reserve the channel pool.

        Raises:
            BackendInitFailure: if no output device can be opened
        """
        if self.ready and pygame.mixer.get_init():
            return

        pre_kwargs = self._init_kwargs()
        try:
            pygame.mixer.pre_init(**pre_kwargs)
        except TypeError as exc:
            showlog.debug(f"[AUDIO] pygame.mixer.pre_init argument mismatch: {exc}")

        attempt_kwargs = dict(pre_kwargs)
        allow_changes = getattr(cfg, "ALLOW_AUDIO_CHANGES", None)
        if allow_changes is not None:
            attempt_kwargs["allowedchanges"] = int(allow_changes)
        preferred = getattr(cfg, "PREFERRED_AUDIO_DEVICE_NAME", None)
        if preferred:
            attempt_kwargs["devicename"] = preferred

        while True:
            try:
                pygame.mixer.init(**attempt_kwargs)
                break
            except TypeError as exc:
                if "allowedchanges" in attempt_kwargs:
                    showlog.debug(f"[AUDIO] Removing unsupported allowedchanges during init: {exc}")
                    attempt_kwargs.pop("allowedchanges", None)
                    continue
                raise
            except pygame.error as exc:
                failing_device = attempt_kwargs.get("devicename")
                if failing_device:
                    showlog.warn(f"[AUDIO] Mixer init failed on '{failing_device}', retrying with default device: {exc}")
                    attempt_kwargs.pop("devicename", None)
                    continue
                raise BackendInitFailure("mixer", str(exc)) from exc

        pygame.mixer.set_num_channels(self.pool_size)
        self.device = attempt_kwargs.get("devicename") or "default"
        self.ready = True

        actual = pygame.mixer.get_init()
        if actual:
            showlog.info(
                f"[AUDIO] Mixer ready → freq={actual[0]} format={actual[1]} channels={actual[2]} "
                f"num_channels={pygame.mixer.get_num_channels()} device={self.device}"
            )

    def load_sample(self, path: str) -> pygame.mixer.Sound:
        """
        Decode a sample file.

        Raises:
            ResourceLoadFailure: if the file is missing or cannot be decoded
        """
        if not os.path.isfile(path):
            raise ResourceLoadFailure(path, "file not found")
        try:
            return pygame.mixer.Sound(path)
        except pygame.error as exc:
            raise ResourceLoadFailure(path, str(exc)) from exc

    def play(self, channel: int, sample: pygame.mixer.Sound) -> None:
        """Start ``sample`` on ``channel``; whatever was playing there stops."""
        pygame.mixer.Channel(channel).play(sample)

    def shutdown(self) -> None:
        if pygame.mixer.get_init():
            pygame.mixer.stop()
            pygame.mixer.quit()
        self.ready = False


class AudioDispatcher:
    """Loads samples on demand and triggers them on the key's channel."""

    def __init__(self, backend, pool_size: Optional[int] = None):
        self.backend = backend
        self.pool_size = pool_size or channel_pool_size()

    def channel_for(self, code: int) -> int:
        return code % self.pool_size

    def ensure_sample(self, state: KeyState) -> bool:
        """
        Decode the key's sample if it is not loaded yet.

        Returns True when a sample is available. A failure is logged, recorded
        on the state and never retried.
        """
        if state.sample is not None:
            return True
        if state.load_failed:
            return False

        path = sample_path(state.note_name)
        try:
            state.sample = self.backend.load_sample(path)
        except ResourceLoadFailure as exc:
            state.load_failed = True
            showlog.warn(f"[AUDIO] {exc}; {state.note_name} stays silent")
            return False

        showlog.verbose(f"[AUDIO] Loaded {state.note_name} from {path}")
        return True

    def on_press(self, state: KeyState, code: int) -> None:
        """Mark the key pressed and play its note (again, on key repeat)."""
        state.pressed = True

        if not self.ensure_sample(state):
            return

        channel = self.channel_for(code)
        self.backend.play(channel, state.sample)
        state.play_count += 1
        showlog.verbose(f"[AUDIO] {state.note_name} → channel {channel}")

    def on_release(self, state: KeyState) -> None:
        """Mark the key released; the sample keeps decaying on its own."""
        state.pressed = False

    def preload(self, states: Iterable[KeyState]) -> int:
        """Decode every sample up front. Returns the number available."""
        loaded = 0
        for state in states:
            if self.ensure_sample(state):
                loaded += 1
        showlog.info(f"[AUDIO] Preloaded {loaded} samples")
        return loaded
