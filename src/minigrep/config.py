"""Build a search configuration from process arguments and environment."""

import os
from collections.abc import Mapping, Sequence

from minigrep.exceptions import MissingArgumentError
from minigrep.models import Config

# Presence alone enables case-insensitive search; the value is ignored.
IGNORE_CASE_VAR = "IGNORE_CASE"


def build_config(args: Sequence[str], environ: Mapping[str, str] | None = None) -> Config:
    """Resolve a Config from argv-style arguments.

    The first element is the program name and is skipped. The next two are
    the query and the file path; anything after them is ignored.
    """
    if environ is None:
        environ = os.environ

    remaining = list(args)[1:]

    if not remaining:
        raise MissingArgumentError("query", "Didn't get a string to query")
    query = remaining[0]

    if len(remaining) < 2:
        raise MissingArgumentError("file_path", "Didn't get a file path")
    file_path = remaining[1]

    return Config(
        query=query,
        file_path=file_path,
        ignore_case=IGNORE_CASE_VAR in environ,
    )
