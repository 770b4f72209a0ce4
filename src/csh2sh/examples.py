"""
Example C shell script used by the demos and tests.

Covers every rule of the engine at least once: environment, control flow,
switch, aliases, labels with static and dynamic goto, and source.
"""

from pathlib import Path
from typing import Union


EXAMPLE_SCRIPT = """#!/bin/csh -f
# Nightly build wrapper

setenv BUILD_ROOT /opt/build
set mode = "release"
set today = `date +%Y%m%d`
cd $BUILD_ROOT/logs

alias ll ls -l
unalias ll

if !( -d $BUILD_ROOT/out ) then
    mkdir -p $BUILD_ROOT/out
endif

if ($mode == release) then
    set flags = "-O2"
else if ($mode != debug) then
    set flags = "-O1"
else
    set flags = "-g"
endif

foreach target (core ui docs)
    echo "building $target"
end

set i = 0
while ($i < 3)
    @ i++
end

switch ($mode)
    case release:
        echo "release build"
        breaksw
    case "debug":
        echo "debug build"
        breaksw
    default:
        echo "unknown mode"
        breaksw
endsw

source $BUILD_ROOT/env.csh
set next = cleanup
goto build

build:
    make $flags
    goto $next

cleanup:
    rm -rf $BUILD_ROOT/tmp
"""


def write_example_script(directory: Union[str, Path], name: str = "nightly.csh") -> Path:
    """
    Write EXAMPLE_SCRIPT into a directory.

    Args:
        directory: Target directory (must exist)
        name: File name of the script

    Returns:
        Path of the written script
    """
    path = Path(directory) / name
    path.write_text(EXAMPLE_SCRIPT, encoding="utf-8")
    return path
