"""Parallel exhaustive solver for Letter Boxed puzzles."""
