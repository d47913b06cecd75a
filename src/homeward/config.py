from dataclasses import dataclass

@dataclass(frozen=True)
class MazeConfig:
    # Size curve: grows by size_step every levels_per_step levels, capped.
    base_size: int = 5
    max_size: int = 25
    size_step: int = 2
    levels_per_step: int = 3
    # Loop budget: base_loops + level // levels_per_loop, capped by interior size.
    base_loops: int = 5
    levels_per_loop: int = 2
    loop_attempt_factor: int = 10

@dataclass(frozen=True)
class AccessibilitySettings:
    high_contrast: bool = False
    audio_enabled: bool = True
    large_text: bool = False
    reduced_motion: bool = False
    screen_reader: bool = False
    subtitles: bool = False
    use_icons: bool = False
    color_blind_mode: str = "normal"   # normal | protanopia | deuteranopia | tritanopia

# Global defaults (can be swapped by launcher)
CONFIG = MazeConfig()
SETTINGS = AccessibilitySettings()
