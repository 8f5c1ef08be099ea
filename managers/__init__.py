"""
Manager modules.

Contains the audio backend and the press/release dispatcher.
"""

from .audio_manager import AudioDispatcher, MixerAudioBackend, sample_path

__all__ = ["AudioDispatcher", "MixerAudioBackend", "sample_path"]
