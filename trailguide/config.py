"""Configuration settings for Trailguide."""

CONFIG = {
    "gps_poll_interval": 3,  # seconds
    "gps_timeout": 30,  # seconds to wait for a single fix
    "off_path_threshold": 30,  # meters - report a correction beyond this distance from the trail
    "proximity_threshold": 10.0,  # meters - minimum move before the anchor is replaced
    "log_interval": 10,  # seconds between log entries
    "hint_speak_interval": 30,  # minimum seconds between spoken off-trail hints
    # Trace playback pacing
    "playback_min_interval": 0.1,  # seconds
    "playback_max_interval": 5.0,  # seconds
}
