"""Unit tests for resolver.py."""
import pytest
from loguru import logger

from av1an_cli.config.config import serialize
from av1an_cli.errors import (
    ConflictingValues,
    InvalidValue,
    MissingRequiredValue,
    UnknownOption,
)
from av1an_cli.resolver import resolve, resolve_defaults


DEFAULTS = {
    "input": None,
    "temp_dir": None,
    "output": None,
    "concat": "ffmpeg",
    "quiet": False,
    "log": None,
    "resume": False,
    "keep": False,
    "config": None,
    "webm": False,
    "chunk_method": "hybrid",
    "scenes": None,
    "split_method": "pyscene",
    "extra_split": 240,
    "threshold": 35.0,
    "min_scene_len": 60,
    "reuse_first_pass": False,
    "passes": None,
    "video_params": None,
    "encoder": "aom",
    "workers": 0,
    "no_check": False,
    "force": False,
    "ffmpeg": "",
    "audio_params": "-c:a copy",
    "pix_format": "yuv420p10le",
    "vmaf": False,
    "vmaf_path": None,
    "vmaf_res": "1920x1080",
    "vmaf_threads": None,
    "target_quality": None,
    "target_quality_method": "per_shot",
    "probes": 4,
    "min_q": None,
    "max_q": None,
    "vmaf_plots": False,
    "probing_rate": 4,
    "vmaf_filter": None,
}


def test_resolve_example_invocation():
    """Test the documented example resolves with every other field defaulted."""
    config = resolve(["-i", "in.mkv", "-m", "hybrid", "-o", "out.mkv"])

    expected = dict(DEFAULTS, input="in.mkv", output="out.mkv")
    assert serialize(config) == expected


def test_resolve_defaults_requires_chunk_method():
    """Test the defaults path fails while chunk_method has no default."""
    with pytest.raises(MissingRequiredValue) as exc_info:
        resolve_defaults()
    assert exc_info.value.option == "chunk_method"


def test_resolve_defaults_with_chunk_method():
    """Test the defaults path with only chunk_method supplied."""
    config = resolve_defaults(chunk_method="hybrid")
    assert serialize(config) == DEFAULTS


def test_resolve_defaults_unknown_name():
    """Test the defaults path rejects names outside the table."""
    with pytest.raises(UnknownOption):
        resolve_defaults(chunk_method="hybrid", bogus="1")


@pytest.mark.parametrize("encoder", ["aom", "rav1e", "libvpx", "svt-av1", "svt-vp9", "x264", "x265"])
@pytest.mark.parametrize("concat", ["ffmpeg", "mkvmerge", "ivf"])
def test_resolve_enum_values(encoder, concat):
    """Test every encoder and concat value is accepted verbatim."""
    config = resolve([
        "-m", "select",
        "--encoder", encoder,
        "--concat", concat,
        "--split-method", "aom_keyframess",
        "--target-quality-method", "per_frame",
    ])
    document = serialize(config)
    assert document["encoder"] == encoder
    assert document["concat"] == concat
    assert document["split_method"] == "aom_keyframess"
    assert document["target_quality_method"] == "per_frame"


def test_resolve_missing_chunk_method():
    """Test omitting chunk_method fails."""
    with pytest.raises(MissingRequiredValue) as exc_info:
        resolve(["-i", "in.mkv", "-e", "rav1e"])
    assert exc_info.value.option == "chunk_method"


@pytest.mark.parametrize("tokens, option", [
    (["--encoder", "copy"], "encoder"),
    (["--encoder", "AOM"], "encoder"),
    (["--concat", "cat"], "concat"),
    (["--split-method", "aom_keyframes"], "split_method"),
    (["--target-quality-method", "per_scene"], "target_quality_method"),
])
def test_resolve_enum_outside_set(base_tokens, tokens, option):
    """Test enum values must exactly match a declared member."""
    with pytest.raises(InvalidValue) as exc_info:
        resolve(base_tokens + tokens)
    assert exc_info.value.option == option


@pytest.mark.parametrize("tokens", [
    ["--workers=-1"],
    ["--probes", "1.5"],
    ["--extra-split", "many"],
    ["--threshold", "abc"],
    ["--threshold", "nan"],
    ["--passes", "256"],
    ["--min-q", "-3"],
    ["--vmaf-threads", "two"],
    ["--target-quality", "inf"],
    ["--vmaf-res", "1080p"],
    ["--workers", "1_000"],
    ["--passes", " 3"],
    ["--probes", "4 "],
    ["--threshold", "1_0.5"],
    ["--threshold", " 35.0"],
    ["--target-quality", "9_5"],
])
def test_resolve_bad_numeric_or_format(base_tokens, tokens):
    """Test values that do not parse as the declared kind are rejected."""
    with pytest.raises(InvalidValue):
        resolve(base_tokens + tokens)


def test_resolve_signed_float(base_tokens):
    """Test float options accept negative values."""
    config = resolve(base_tokens + ["--threshold=-5.5"])
    assert config.threshold == -5.5


def test_resolve_unknown_option(base_tokens):
    """Test unrecognized flags fail."""
    with pytest.raises(UnknownOption):
        resolve(base_tokens + ["--bogus"])


def test_resolve_unknown_short_option(base_tokens):
    """Test unrecognized short flags fail."""
    with pytest.raises(UnknownOption):
        resolve(base_tokens + ["-Z"])


def test_resolve_stray_positional(base_tokens):
    """Test positional tokens are not accepted."""
    with pytest.raises(UnknownOption):
        resolve(base_tokens + ["in.mkv"])


def test_resolve_option_missing_value(base_tokens):
    """Test a value option at the end of the tokens fails."""
    with pytest.raises(MissingRequiredValue) as exc_info:
        resolve(base_tokens + ["--encoder"])
    assert exc_info.value.option == "encoder"


def test_resolve_flag_with_value(base_tokens):
    """Test flags do not take a value."""
    with pytest.raises(InvalidValue) as exc_info:
        resolve(base_tokens + ["--quiet=yes"])
    assert exc_info.value.option == "quiet"


def test_resolve_value_forms():
    """Test separate, attached and =-joined values."""
    config = resolve(["--chunk-method=hybrid", "-ex265", "--workers", "8", "-p2"])
    assert config.chunk_method == "hybrid"
    assert config.encoder == "x265"
    assert config.workers == 8
    assert config.passes == 2


def test_resolve_bundled_flags(base_tokens):
    """Test short flags can be bundled."""
    config = resolve(base_tokens + ["-qr"])
    assert config.quiet is True
    assert config.resume is True
    assert config.keep is False


def test_resolve_last_occurrence_wins(base_tokens):
    """Test repeated options keep the last value."""
    config = resolve(base_tokens + ["-e", "rav1e", "-e", "svt-av1"])
    assert config.encoder == "svt-av1"


def test_resolve_workers_auto(base_tokens):
    """Test zero workers is accepted as the auto-detect sentinel."""
    assert resolve(base_tokens + ["-w", "0"]).workers == 0


def test_resolve_min_q_above_max_q(base_tokens):
    """Test contradicting quantizer bounds fail."""
    with pytest.raises(ConflictingValues) as exc_info:
        resolve(base_tokens + ["-t", "95", "--min-q", "40", "--max-q", "20"])
    assert isinstance(exc_info.value, InvalidValue)
    assert "min_q" in exc_info.value.message


def test_resolve_target_quality_without_probes(base_tokens):
    """Test target quality needs at least one probe."""
    with pytest.raises(ConflictingValues):
        resolve(base_tokens + ["--target-quality", "95", "--probes", "0"])


def test_resolve_target_quality(base_tokens):
    """Test a full target quality invocation."""
    config = resolve(base_tokens + [
        "-t", "94.5", "--min-q", "20", "--max-q", "40", "--probes", "6",
        "--probing-rate", "1", "--vmaf-plots",
    ])
    assert config.target_quality == 94.5
    assert (config.min_q, config.max_q) == (20, 40)
    assert config.probes == 6
    assert config.vmaf_plots is True


def test_resolve_tuning_without_target_quality_warns(base_tokens, log_messages):
    """Test quantizer bounds without target quality are kept but reported."""
    config = resolve(base_tokens + ["--min-q", "20"])
    assert config.min_q == 20
    assert any("min_q" in msg and "WARNING" in msg for msg in log_messages)


def test_resolve_does_not_keep_tokens(base_tokens):
    """Test tokens are only read."""
    tokens = tuple(base_tokens + ["-i", "in.mkv"])
    config = resolve(tokens)
    assert tokens == ("-m", "hybrid", "-i", "in.mkv")
    assert config.input == "in.mkv"


def test_resolve_logs_result(base_tokens, log_messages):
    """Test the resolved configuration is logged at debug level."""
    resolve(base_tokens)
    assert any(msg.startswith("DEBUG") and "hybrid" in msg for msg in log_messages)


def test_resolve_numeric_forms(base_tokens):
    """Test plain numeric spellings that must keep working."""
    config = resolve(base_tokens + [
        "--threshold", "+.5", "-t", "1e2", "--workers", "007", "--passes", "255",
    ])
    assert config.threshold == 0.5
    assert config.target_quality == 100.0
    assert config.workers == 7
    assert config.passes == 255


def test_resolve_defaults_flag_values():
    """Test boolean keyword values select or leave out flags."""
    config = resolve_defaults(chunk_method="hybrid", quiet=True, keep=False)
    assert config.quiet is True
    assert config.keep is False


def test_resolve_defaults_none_value():
    """Test None is not turned into the text "None"."""
    with pytest.raises(MissingRequiredValue) as exc_info:
        resolve_defaults(chunk_method=None)
    assert exc_info.value.option == "chunk_method"


def test_resolve_is_silent_by_default(base_tokens):
    """Test library use emits no log records until logging is enabled."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG")
    try:
        resolve(base_tokens + ["--min-q", "3"])
    finally:
        logger.remove(handler_id)
    assert messages == []
