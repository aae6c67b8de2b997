"""Spoken trail hints."""

import subprocess
import time
from typing import Optional, Callable

from .config import CONFIG


class Audio:
    """Speaks correction hints, at most one every repeat_interval seconds"""

    def __init__(self, enabled: bool = True, repeat_interval: Optional[float] = None,
                 callback: Optional[Callable[[str], None]] = None):
        self.enabled = enabled
        self.repeat_interval = (CONFIG["hint_speak_interval"]
                                if repeat_interval is None else repeat_interval)
        self.callback = callback
        self.last_text: Optional[str] = None
        self.last_time = 0.0

    def announce(self, text: str, now: Optional[float] = None) -> bool:
        """Speak text unless something was announced less than repeat_interval ago.

        Returns True if the text was spoken.
        """
        now = time.time() if now is None else now
        if self.last_text is not None and now - self.last_time < self.repeat_interval:
            return False
        self.last_text = text
        self.last_time = now
        self.speak(text)
        return True

    def reset(self):
        """Allow the next hint to be spoken immediately"""
        self.last_text = None
        self.last_time = 0.0

    def speak(self, text: str):
        """Speak text using espeak (available in Termux), else pyttsx3"""
        if self.callback:
            self.callback(text)
        if not self.enabled:
            return

        try:
            subprocess.run(
                ["espeak", "-s", "150", text],
                capture_output=True,
                timeout=10
            )
        except FileNotFoundError:
            self._speak_pyttsx3(text)
        except Exception as e:
            print(f"Audio error: {e}")
            print(f"[AUDIO] {text}")

    @staticmethod
    def _speak_pyttsx3(text: str):
        try:
            import pyttsx3
            engine = pyttsx3.init()
            engine.say(text)
            engine.runAndWait()
        except Exception:
            print(f"[AUDIO] {text}")
