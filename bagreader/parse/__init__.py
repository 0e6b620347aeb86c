"""
This subpackage provides the decoders for the individual files that make up
a bag:  tag files, manifests, and fetch.txt, along with the decoding and
checking of the file paths they list.
"""
from .tagfile import parse_tag_lines, read_tag_file
from .paths import PathCodec, default_codec, resolve_path, is_contained
from .manifest import (algorithm_token, parse_manifest_lines, read_manifest)
from .fetch import parse_fetch_lines, read_fetch
