"""Constants for the charset transcoder."""

from __future__ import annotations

from typing import Literal

VERSION = "0.1.0"

# Configuration keys
CONF_GB2312_POLICY = "gb2312_policy"
CONF_ASCII_FAST_PATH = "ascii_fast_path"
CONF_ALIASES = "aliases"

# GB2312 alias policies
GB2312_POLICY_STRICT = "strict"
GB2312_POLICY_GB18030 = "gb18030"
GB2312_POLICIES = [GB2312_POLICY_STRICT, GB2312_POLICY_GB18030]

# Default values
DEFAULT_GB2312_POLICY = GB2312_POLICY_STRICT
DEFAULT_ASCII_FAST_PATH = True

# Conversion directions and transcode sides carried by errors
DIRECTION_DECODE = "decode"
DIRECTION_ENCODE = "encode"
SIDE_SOURCE = "source"
SIDE_TARGET = "target"

Direction = Literal["decode", "encode"]
Side = Literal["source", "target"]
