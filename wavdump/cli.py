from __future__ import annotations

"""
wavdump command line: synthesize harmonics into a mono 16-bit 44.1 kHz WAV.

    wavdump <output> <duration-seconds> <freq1> [freq2 ...]

User-facing messages go to stdout. Every outcome, including failures,
exits with status 0 to match the reference tool; scripts should check the
output file rather than the exit code.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_FORMAT, MAX_FREQ, MIN_FREQ, SynthesisConfig
from .errors import ArgumentError, WavWriteError
from .riff import write_wav
from .synth import synthesize
from .validate import parse_duration, parse_frequencies

_log = logging.getLogger("wavdump.cli")

# the only tokens treated as options; anything else, even "-x", is a value
_FLAGS = ("-v", "--verbose", "-h", "--help")

USAGE = (
    "Incomplete arguments to wavdump!\n\n"
    "Synopsis : wavdump generates a windows .wav file by combining several harmonics into a complex signal.\n\n"
    "Syntax   : wavdump\n"
    "\t   [output file name]\n"
    "\t   [output file duration (greater than 0)]\n"
    f"\t   [list of frequencies (values in the range [{MIN_FREQ} - {MAX_FREQ}])]\n\n"
    "Usage    : wavdump test.wav 5 440 880\n"
    "Usage    : wavdump a.wav 10 1000 2000 3000\n"
)


def _configure_logging(verbose: bool) -> None:
    root = logging.getLogger("wavdump")
    if not root.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        root.addHandler(h)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="wavdump",
        description="Generate a PCM .wav file by combining several harmonics into a complex signal",
    )
    p.add_argument("output", nargs="?", help="Output .wav file path")
    p.add_argument("duration", nargs="?", help="Duration in whole seconds (greater than 0)")
    p.add_argument("frequencies", nargs="*", help=f"Harmonic frequencies in Hz, each in [{MIN_FREQ}, {MAX_FREQ}]")
    p.add_argument("-v", "--verbose", action="store_true", help="Log synthesis and write details to stderr")
    return p


def _report_invalid(err: ArgumentError) -> None:
    print("Invalid arguments to wavdump!\n")
    print(f"Argument '{err.argument}' {err.requirement}!")
    print(f"Its current value is '{err.literal}'!\n")


def run(cfg: SynthesisConfig) -> int:
    """Synthesize and write cfg.path; returns the file size in bytes."""
    samples = synthesize(cfg.frequencies, cfg.duration_s, cfg.fmt.sample_rate)
    return write_wav(cfg.path, samples, cfg.fmt)


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    flags = [a for a in argv if a in _FLAGS]
    values = [a for a in argv if a not in _FLAGS]
    args = make_parser().parse_args(flags + ["--"] + values)
    _configure_logging(args.verbose)

    if args.output is None or args.duration is None or not args.frequencies:
        print(USAGE)
        return 0

    try:
        cfg = SynthesisConfig(
            path=args.output,
            duration_s=parse_duration(args.duration),
            frequencies=parse_frequencies(args.frequencies),
            fmt=DEFAULT_FORMAT,
        )
    except ArgumentError as e:
        _report_invalid(e)
        return 0

    _log.info("generating %ds at %s Hz into %s", cfg.duration_s, ",".join(map(str, cfg.frequencies)), cfg.path)
    try:
        size = run(cfg)
    except WavWriteError as e:
        print(f"Could not open file '{e.path}'!")
        print(f"Reason : {e.reason}")
        print("Aborting program!")
        return 0
    _log.info("wrote %d bytes to %s", size, cfg.path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
