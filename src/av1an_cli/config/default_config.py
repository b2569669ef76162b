"""Default configuration values."""

import os


PROG_NAME = "av1an"

# Input / output
CONCAT = "ffmpeg"
CONCAT_METHODS = ("ffmpeg", "mkvmerge", "ivf")

# Scene splitting
SPLIT_METHOD = "pyscene"
SPLIT_METHODS = ("ffmpeg", "pyscene", "aom_keyframess")
EXTRA_SPLIT = 240  # Frames after which an extra split is made
THRESHOLD = 35.0  # PySceneDetect threshold
MIN_SCENE_LEN = 60  # Frames

# Encoding
ENCODER = "aom"
ENCODERS = ("aom", "rav1e", "libvpx", "svt-av1", "svt-vp9", "x264", "x265")
WORKERS = 0  # 0 = detect from available cores
FFMPEG = ""
AUDIO_PARAMS = "-c:a copy"
PIX_FORMAT = "yuv420p10le"

# VMAF settings
VMAF_RES = "1920x1080"
RESOLUTION_PATTERN = r"^\d+x\d+$"

# Target quality settings
TARGET_QUALITY_METHOD = "per_shot"
TARGET_QUALITY_METHODS = ("per_frame", "per_shot")
PROBES = 4
PROBING_RATE = 4  # 1 = original framerate

# Logging
LOG_LEVEL = os.getenv("AV1AN_CLI_LOG_LEVEL", "WARNING")
