"""
Generate the eight stretching-sheet profile figures.

For each study one parameter (We, beta, lambda, Omega_a or Hs) is
swept over its value table while the others stay at baseline; four
curves per figure are solved and plotted, then saved as PNG:

  Velocity_vs_Weissenberg_number.png
  Velocity_vs_Magnetic_Prandtl_number.png
  Velocity_vs_Magnetic_number.png
  Vertical_Velocity_vs_Magnetic_Prandtl_number.png
  Temperature_vs_Omega_a.png
  Temperature_vs_Hs.png
  Temperature_vs_beta.png
  Temperature_vs_lambda.png

Run from repo root: python scripts/run_sweep.py
No arguments are needed; all parameters are fixed in physics/constants.py.
Exit status is 1 if any figure failed to integrate.
"""

import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from physics.sweep import FIGURES, SweepConfig, get_figure, run_all  # noqa: E402


def main(argv=None):
    ap = argparse.ArgumentParser(description="Render the similarity profile figures.")
    ap.add_argument("--out-dir", default=".", help="Output directory (default: current directory)")
    ap.add_argument("--figure", action="append", default=None, metavar="KEY",
                    help="Render only this figure (repeatable). One of: "
                         + ", ".join(f.key for f in FIGURES))
    ap.add_argument("--verbose", action="store_true", help="Log every solver run")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    figures = None
    if args.figure:
        figures = []
        for key in args.figure:
            figure = get_figure(key)
            if figure is None:
                ap.error("unknown figure '{}'".format(key))
            figures.append(figure)

    report = run_all(SweepConfig(), out_dir=args.out_dir, figures=figures)
    print("Saved %d figure(s) to %s" % (len(report.written), os.path.abspath(args.out_dir)))
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
