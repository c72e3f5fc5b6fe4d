#!/usr/bin/env python3
"""
Pytest configuration for the rename tool tests.

- Keeps debug logging switched off unless SWEEP_DEBUG is set by the caller
- Runs Qt headless so the GUI worker tests work without a display
- Prints a short location summary for unexpected (non-assertion) exceptions
"""

import os
import sys
import traceback

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def _user_frame(exc_traceback):
    """Most recent frame that belongs to this project rather than a library"""
    frames = traceback.extract_tb(exc_traceback)
    for frame in reversed(frames):
        if '/site-packages/' not in frame.filename and '/usr/lib/' not in frame.filename:
            return frame
    return frames[-1] if frames else None


def pytest_exception_interact(node, call, report):
    """Print where an unexpected exception was raised, bypassing output capture"""
    if not call.excinfo or call.excinfo.type is AssertionError:
        return

    frame = _user_frame(call.excinfo.tb)
    location = f"{frame.filename}:{frame.lineno} (in {frame.name})" if frame else "unknown location"

    print("\n==== EXCEPTION DETAILS ====", file=sys.__stderr__)
    print(f"Test: {node.nodeid}", file=sys.__stderr__)
    print(f"Exception Type: {call.excinfo.type.__name__}", file=sys.__stderr__)
    print(f"Exception Message: {call.excinfo.value}", file=sys.__stderr__)
    print(f"Location: {location}", file=sys.__stderr__)
    if frame and frame.line:
        print(f"\n    {frame.line}", file=sys.__stderr__)
    print("==== END EXCEPTION DETAILS ====\n", file=sys.__stderr__)
