"""
Main application class.

Coordinates all subsystems and manages application lifecycle.
"""

from typing import Optional

import pygame

import config as cfg
import crashguard
import showlog
from managers.audio_manager import AudioDispatcher, MixerAudioBackend
from rendering import FrameController, KeyboardRenderer, LabelCache
from utils.font_helper import load_font

from .display import DisplayManager
from .input_source import PygameInputSource
from .keys import KeyRegistry
from .loop import FrameLoop
from .piano import Piano


class PianoApplication:
    """Main application coordinator."""

    def __init__(self):
        """Initialize the application."""
        print("[INIT] Starting piano")

        self.display_manager: Optional[DisplayManager] = None
        self.screen: Optional[pygame.Surface] = None
        self.audio_backend: Optional[MixerAudioBackend] = None
        self.piano: Optional[Piano] = None
        self.renderer: Optional[KeyboardRenderer] = None
        self.frame_controller: Optional[FrameController] = None
        self.frame_loop: Optional[FrameLoop] = None

    def initialize(self):
        """Initialize all subsystems."""
        print("[INIT] Initializing display...")
        self._init_display()

        print("[INIT] Initializing audio...")
        self._init_audio()

        print("[INIT] Building keyboard...")
        self._init_piano()

        print("[INIT] Initializing rendering...")
        self._init_rendering()

        print("[INIT] Application initialized successfully")
        showlog.info(f"[APP] Initialized (profile={getattr(cfg, 'ACTIVE_PROFILE', '?')})")

    def _init_display(self):
        """Open the window sized to the keyboard."""
        width = int(getattr(cfg, "WINDOW_WIDTH", 0)) or 56 * 21
        height = int(getattr(cfg, "WINDOW_HEIGHT", 0)) or 390
        crashguard.checkpoint(f"_init_display: Creating DisplayManager ({width}x{height})")
        self.display_manager = DisplayManager(
            width=width,
            height=height,
            title=getattr(cfg, "WINDOW_TITLE", "Piano"),
            fullscreen=bool(getattr(cfg, "FULLSCREEN", False)),
            show_cursor=bool(getattr(cfg, "SHOW_CURSOR", True)),
        )
        self.screen = self.display_manager.initialize()
        crashguard.checkpoint("_init_display: Complete")

    def _init_audio(self):
        """Open the mixer and reserve the channel pool."""
        crashguard.checkpoint("_init_audio: Opening mixer")
        self.audio_backend = MixerAudioBackend()
        self.audio_backend.ensure_mixer()
        crashguard.checkpoint("_init_audio: Complete")

    def _init_piano(self):
        """Build the key table, runtime state and dispatcher."""
        registry = KeyRegistry()
        dispatcher = AudioDispatcher(self.audio_backend)
        self.piano = Piano(dispatcher, registry)
        showlog.info(f"[APP] Keyboard ready: {len(registry.white_keys())} white, "
                     f"{len(registry.black_keys())} black keys")

        if getattr(cfg, "PRELOAD_SAMPLES", True):
            crashguard.checkpoint("_init_piano: Preloading samples")
            self.piano.preload()
        else:
            showlog.debug("[APP] Samples load on first press")

    def _init_rendering(self):
        """Fonts, label cache, renderer, pacing and the frame loop."""
        crashguard.checkpoint("_init_rendering: Loading font")
        labels = LabelCache(load_font())
        self.renderer = KeyboardRenderer(self.screen, labels)
        self.frame_controller = FrameController()
        self.frame_loop = FrameLoop(
            self.piano,
            PygameInputSource(),
            self.renderer,
            self.frame_controller,
        )
        crashguard.checkpoint("_init_rendering: Complete")

    def run(self):
        """Run the main application loop."""
        if not self.frame_loop:
            raise RuntimeError("Application not initialized. Call initialize() first.")

        ticks = self.frame_loop.run()
        showlog.info(f"[APP] Loop finished after {ticks} ticks "
                     f"({self.frame_controller.overruns} overruns)")

    def cleanup(self):
        """Release mixer, window and pygame, then flush the log."""
        showlog.info("[EXIT] Cleaning up...")

        if self.audio_backend:
            self.audio_backend.shutdown()

        if self.display_manager:
            self.display_manager.cleanup()

        pygame.quit()
        showlog.info("[EXIT] All subsystems stopped")
        showlog.flush()
