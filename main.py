#!/usr/bin/env python3
"""
Tiny launcher - a shortcut to the three entry points of the package.
Each stage is implemented in its own module, this just imports and calls them.

Usage:
  python main.py image -- photo.jpg --mode many --out out.jpg   # one image
  python main.py folder -- photos/ --out results/faces.csv      # every image in a folder -> CSV
  python main.py webcam                                         # live viewer with each script's defaults
"""

import os, sys, argparse
HERE = os.path.abspath(os.path.dirname(__file__))
if HERE not in sys.path:
    sys.path.insert(0, HERE)  # ensure project root is importable (so `detectobject` is a package)

def _run(stage: str, argv_tail):
    """Import the stage's module and run its main(), forwarding argv_tail."""
    saved = list(sys.argv)
    try:
        if stage == "image":
            from detectobject.realtime.detect_image import main as entry
        elif stage == "folder":
            from detectobject.data.batch_detect import main as entry
        elif stage == "webcam":
            from detectobject.realtime.run_webcam import main as entry
        else:
            raise ValueError(f"Unknown stage: {stage}")

        # Rebuild argv for the child script: scriptname + forwarded args
        sys.argv = [f"{stage}.py"] + list(argv_tail)
        entry()
    finally:
        sys.argv = saved

def main():
    ap = argparse.ArgumentParser(prog="main", description="Cascade object detection launcher.")
    ap.add_argument("stage", choices=["image", "folder", "webcam"], help="Which stage to run.")
    ap.add_argument("stage_args", nargs=argparse.REMAINDER,
                    help="Arguments forwarded to the chosen stage. Put them after `--`.")
    args = ap.parse_args()

    # Strip leading `--` if present (argparse.REMAINDER keeps it)
    tail = args.stage_args[1:] if args.stage_args[:1] == ["--"] else args.stage_args
    _run(args.stage, tail)

if __name__ == "__main__":
    main()
