"""Declarative option table for the av1an command line.

Every recognized option is one ``OptionSpec`` row. The click command used for
parsing and the pydantic model holding the resolved values are both generated
from this table, so adding an option means adding a row here and nothing else.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Callable, Dict, List, Literal, Optional, Tuple

import click
from pydantic import Field

from . import default_config as defaults


U8_MAX = 255

UNSIGNED_RE = re.compile(r"[0-9]+")
FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class UnsignedInt(click.ParamType):
    """Unsigned integer written as plain ASCII digits.

    Python's ``int()`` also takes digit group underscores and surrounding
    whitespace, which are not valid unsigned integers here.
    """

    name = "integer"

    def __init__(self, max: Optional[int] = None):
        self.max = max

    def convert(self, value: Any, param: Optional[click.Parameter],
                ctx: Optional[click.Context]) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            number = value
        elif isinstance(value, str) and UNSIGNED_RE.fullmatch(value):
            number = int(value)
        else:
            self.fail(f"{value!r} is not a valid unsigned integer.", param, ctx)

        if self.max is not None and number > self.max:
            self.fail(f"{number} is not in the range 0<=x<={self.max}.", param, ctx)
        return number


class FloatNumber(click.ParamType):
    """Finite floating point number without underscores or whitespace."""

    name = "float"

    def convert(self, value: Any, param: Optional[click.Parameter],
                ctx: Optional[click.Context]) -> float:
        if isinstance(value, float):
            return value
        if isinstance(value, str) and FLOAT_RE.fullmatch(value):
            return float(value)
        self.fail(f"{value!r} is not a valid float.", param, ctx)


class OptionKind(Enum):
    """Semantic value kind of an option."""

    FLAG = "flag"
    PATH = "path"
    TEXT = "text"
    UINT = "uint"
    U8 = "u8"
    FLOAT = "float"


@dataclass(frozen=True)
class OptionSpec:
    """A single command line option.

    Attributes:
        name: Field name, also the key in the serialized document
        kind: Semantic value kind
        help: Help text
        short: Single letter short flag, if any
        choices: Allowed literal values for enumerated options
        default: Value used when the option is not supplied
        required: Whether the option must be supplied
        optional: Whether the resolved value may be unset (None)
        pattern: Regular expression the value must match
    """
    name: str
    kind: OptionKind
    help: str
    short: Optional[str] = None
    choices: Optional[Tuple[str, ...]] = None
    default: Any = None
    required: bool = False
    optional: bool = False
    pattern: Optional[str] = None

    @property
    def long(self) -> str:
        return "--" + self.name.replace("_", "-")

    @property
    def param_decls(self) -> List[str]:
        if self.short:
            return [f"-{self.short}", self.long]
        return [self.long]

    @property
    def is_flag(self) -> bool:
        return self.kind is OptionKind.FLAG

    def click_type(self) -> click.ParamType:
        """Get the click parameter type that converts this option's value."""
        if self.choices:
            return click.Choice(self.choices, case_sensitive=True)
        if self.kind is OptionKind.UINT:
            return UnsignedInt()
        if self.kind is OptionKind.U8:
            return UnsignedInt(max=U8_MAX)
        if self.kind is OptionKind.FLOAT:
            return FloatNumber()
        # Paths are passed through verbatim
        return click.STRING

    def annotation(self) -> Any:
        """Get the type annotation of the matching model field."""
        if self.is_flag:
            base: Any = bool
        elif self.choices:
            base = Literal[self.choices]
        elif self.kind is OptionKind.UINT:
            base = Annotated[int, Field(ge=0)]
        elif self.kind is OptionKind.U8:
            base = Annotated[int, Field(ge=0, le=U8_MAX)]
        elif self.kind is OptionKind.FLOAT:
            base = Annotated[float, Field(allow_inf_nan=False)]
        elif self.pattern:
            base = Annotated[str, Field(pattern=self.pattern)]
        else:
            base = str

        if self.optional:
            return Optional[base]
        return base

    def to_click_option(self) -> click.Option:
        """Build the click option parsing this row."""
        if self.is_flag:
            return click.Option(
                self.param_decls,
                is_flag=True,
                default=False,
                help=self.help
            )
        kwargs: Dict[str, Any] = {}
        # click 8.3+ treats an explicit default=None as supplied
        if self.default is not None:
            kwargs["default"] = self.default
            kwargs["show_default"] = self.default != ""
        return click.Option(
            self.param_decls,
            type=self.click_type(),
            metavar="PATH" if self.kind is OptionKind.PATH else None,
            required=self.required,
            help=self.help,
            **kwargs
        )

    def to_field(self) -> Tuple[Any, Any]:
        """Build the (annotation, FieldInfo) pair of the model field."""
        if self.required:
            return self.annotation(), Field(..., description=self.help)
        default = False if self.is_flag else self.default
        return self.annotation(), Field(default, description=self.help)


OPTIONS: Tuple[OptionSpec, ...] = (
    # Input / output
    OptionSpec("input", OptionKind.PATH, "Input file or vapoursynth (.py, .vpy) script",
               short="i", optional=True),
    OptionSpec("temp_dir", OptionKind.PATH, "Temporary directory to use", optional=True),
    OptionSpec("output", OptionKind.PATH, "Specify output file", short="o", optional=True),
    # -c is declared explicitly for --config; concat would derive the same
    # letter from its name and so gets no short flag
    OptionSpec("concat", OptionKind.TEXT, "Concatenation method to use for splits",
               choices=defaults.CONCAT_METHODS, default=defaults.CONCAT),
    OptionSpec("quiet", OptionKind.FLAG, "Disable printing progress to terminal", short="q"),
    OptionSpec("log", OptionKind.TEXT, "Enable logging", short="l", optional=True),
    OptionSpec("resume", OptionKind.FLAG, "Resume previous session", short="r"),
    OptionSpec("keep", OptionKind.FLAG, "Keep temporary folder after encode"),
    OptionSpec("config", OptionKind.PATH,
               "Path to config file (creates if it does not exist)",
               short="c", optional=True),
    OptionSpec("webm", OptionKind.FLAG, "Output to webm"),

    # Chunking and splitting
    OptionSpec("chunk_method", OptionKind.TEXT, "Method for creating chunks",
               short="m", required=True),
    OptionSpec("scenes", OptionKind.PATH, "File location for scenes", short="s", optional=True),
    OptionSpec("split_method", OptionKind.TEXT, "Specify splitting method",
               choices=defaults.SPLIT_METHODS, default=defaults.SPLIT_METHOD, optional=True),
    OptionSpec("extra_split", OptionKind.UINT, "Number of frames after which make split",
               short="x", default=defaults.EXTRA_SPLIT),
    OptionSpec("threshold", OptionKind.FLOAT, "PySceneDetect Threshold",
               default=defaults.THRESHOLD),
    OptionSpec("min_scene_len", OptionKind.UINT, "Minimum number of frames in a split",
               default=defaults.MIN_SCENE_LEN),
    OptionSpec("reuse_first_pass", OptionKind.FLAG,
               "Reuse the first pass from aom_keyframes split on the chunks"),

    # Encoding
    OptionSpec("passes", OptionKind.U8, "Specify encoding passes", short="p", optional=True),
    OptionSpec("video_params", OptionKind.TEXT, "Parameters passed to the encoder",
               short="v", optional=True),
    OptionSpec("encoder", OptionKind.TEXT, "Encoder to use",
               short="e", choices=defaults.ENCODERS, default=defaults.ENCODER),
    OptionSpec("workers", OptionKind.UINT, "Number of workers (0 detects from CPU count)",
               short="w", default=defaults.WORKERS),
    OptionSpec("no_check", OptionKind.FLAG, "Do not check encodings"),
    OptionSpec("force", OptionKind.FLAG, "Force encoding if input args seen as invalid"),
    OptionSpec("ffmpeg", OptionKind.TEXT, "FFmpeg commands", short="f", default=defaults.FFMPEG),
    OptionSpec("audio_params", OptionKind.TEXT, "FFmpeg audio parameters",
               short="a", default=defaults.AUDIO_PARAMS),
    OptionSpec("pix_format", OptionKind.TEXT, "FFmpeg pixel format",
               default=defaults.PIX_FORMAT),

    # VMAF
    OptionSpec("vmaf", OptionKind.FLAG, "Calculate VMAF after encode"),
    OptionSpec("vmaf_path", OptionKind.PATH, "Path to VMAF models", optional=True),
    OptionSpec("vmaf_res", OptionKind.TEXT, "Resolution used in VMAF calculation",
               default=defaults.VMAF_RES, pattern=defaults.RESOLUTION_PATTERN),
    OptionSpec("vmaf_threads", OptionKind.UINT,
               "Number of threads to use for VMAF calculation", optional=True),

    # Target quality
    OptionSpec("target_quality", OptionKind.FLOAT, "Value to target",
               short="t", optional=True),
    OptionSpec("target_quality_method", OptionKind.TEXT, "Method selection for target quality",
               choices=defaults.TARGET_QUALITY_METHODS,
               default=defaults.TARGET_QUALITY_METHOD, optional=True),
    OptionSpec("probes", OptionKind.UINT, "Number of probes to make for target_quality",
               default=defaults.PROBES),
    OptionSpec("min_q", OptionKind.U8, "Min q for target_quality", optional=True),
    OptionSpec("max_q", OptionKind.U8, "Max q for target_quality", optional=True),
    OptionSpec("vmaf_plots", OptionKind.FLAG, "Make plots of probes in temp folder"),
    OptionSpec("probing_rate", OptionKind.UINT, "Framerate for probes, 1 - original",
               default=defaults.PROBING_RATE),
    OptionSpec("vmaf_filter", OptionKind.TEXT,
               "Filter applied to source at vmaf calculation, use if you crop source",
               optional=True),
)

OPTIONS_BY_NAME: Dict[str, OptionSpec] = {spec.name: spec for spec in OPTIONS}


def find_option(flag: str) -> Optional[OptionSpec]:
    """Look up an option by one of its flags.

    Args:
        flag: Short (``-e``) or long (``--encoder``) flag

    Returns:
        Matching option or None
    """
    for spec in OPTIONS:
        if flag in spec.param_decls:
            return spec
    return None


def build_command(
    callback: Optional[Callable[..., Any]] = None,
    add_help_option: bool = False,
    name: str = defaults.PROG_NAME
) -> click.Command:
    """Build a click command from the option table.

    Args:
        callback: Function invoked with the parsed values as keyword arguments
        add_help_option: Whether ``-h``/``--help`` is recognized
        name: Program name shown in usage messages

    Returns:
        Command with one parameter per table row
    """
    return click.Command(
        name,
        params=[spec.to_click_option() for spec in OPTIONS],
        callback=callback,
        add_help_option=add_help_option,
        context_settings={"help_option_names": ["-h", "--help"]},
        help="Cross-platform chunked AV1 / VP9 / HEVC / H264 encoding framework "
             "with per scene quality encoding."
    )
