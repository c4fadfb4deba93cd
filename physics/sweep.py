"""
Parameter sweeps over the similarity model and figure rendering.

Each figure studies one physical parameter: four curves are solved with
that parameter cycled through its value table (via pick()) while all
other parameters stay at their baseline, and each curve gets its own
perturbation factor, legend label and line style. One state component
is plotted against eta and the figure is written to a PNG file.

    SweepConfig  - Immutable tables, domain and solver settings
    FigureSpec   - One figure: swept parameter, plotted column, file name
    Curve        - One solved curve of a figure
    SweepReport  - Written files and failed figures of a batch run

The Omega_a and Hs studies sweep parameters that the ODE system does
not take as input, so all four curves of those figures are governed by
the baseline dynamics and differ only through their factor.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import logging
import os
from collections import namedtuple, OrderedDict

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from physics import constants
from physics.similarity import IntegrationError, pick, solve_profile

log = logging.getLogger(__name__)


_CONFIG_FIELDS = OrderedDict([
    ("we_values", constants.WE_VALUES),
    ("beta_values", constants.BETA_VALUES),
    ("lambda_values", constants.LAMBDA_VALUES),
    ("hs_values", constants.HS_VALUES),
    ("omega_a_values", constants.OMEGA_A_VALUES),
    ("factors", constants.FACTORS),
    ("labels", constants.LABELS),
    ("line_styles", constants.LINE_STYLES),
    ("eta_start", constants.ETA_START),
    ("eta_end", constants.ETA_END),
    ("num_points", constants.NUM_POINTS),
    ("y0", constants.Y0),
    ("rtol", constants.RTOL),
    ("atol", constants.ATOL),
    ("max_step", constants.MAX_STEP),
    ("method", constants.METHOD),
])

# Parameter name -> SweepConfig field holding its table
_TABLE_FIELDS = {
    "We": "we_values",
    "beta": "beta_values",
    "lambda": "lambda_values",
    "Hs": "hs_values",
    "Omega_a": "omega_a_values",
}


class SweepConfig(namedtuple("SweepConfig", list(_CONFIG_FIELDS),
                             defaults=list(_CONFIG_FIELDS.values()))):
    """
    Immutable configuration for a sweep run.

    Every field defaults to the value in physics.constants, so
    SweepConfig() reproduces the standard figures. Use
    with_overrides() to derive a modified copy.
    """

    __slots__ = ()

    def table(self, name):
        """Return the value table for parameter name."""
        try:
            return getattr(self, _TABLE_FIELDS[name])
        except KeyError:
            raise ValueError(
                "Unknown parameter '{}'; expected one of {}".format(
                    name, ", ".join(constants.PARAMETER_NAMES))) from None

    def baseline(self):
        """Parameter dict with every parameter at its first table entry."""
        return {name: self.table(name)[0]
                for name in constants.PARAMETER_NAMES}

    def with_overrides(self, **kwargs):
        """Return a copy with the given fields replaced."""
        return self._replace(**kwargs)

    def solver_options(self):
        """Keyword arguments for solve_profile()."""
        return {
            "eta_start": self.eta_start,
            "eta_end": self.eta_end,
            "num_points": self.num_points,
            "y0": self.y0,
            "rtol": self.rtol,
            "atol": self.atol,
            "max_step": self.max_step,
            "method": self.method,
        }


FigureSpec = namedtuple(
    "FigureSpec", ["key", "parameter", "column", "title", "ylabel", "filename"])

_VELOCITY = r"$F'(\eta)$"
_VERTICAL = r"$G(\eta)$"
_TEMPERATURE = r"$\theta(\eta)$"

FIGURES = (
    FigureSpec("velocity_we", "We", "Fp",
               "Velocity profile for varying Weissenberg number",
               _VELOCITY, "Velocity_vs_Weissenberg_number.png"),
    FigureSpec("velocity_beta", "beta", "Fp",
               "Velocity profile for varying magnetic Prandtl number",
               _VELOCITY, "Velocity_vs_Magnetic_Prandtl_number.png"),
    FigureSpec("velocity_lambda", "lambda", "Fp",
               "Velocity profile for varying magnetic number",
               _VELOCITY, "Velocity_vs_Magnetic_number.png"),
    FigureSpec("vertical_velocity_beta", "beta", "G",
               "Vertical velocity profile for varying magnetic Prandtl number",
               _VERTICAL, "Vertical_Velocity_vs_Magnetic_Prandtl_number.png"),
    FigureSpec("temperature_omega_a", "Omega_a", "theta",
               "Temperature profile for varying time-relaxation number",
               _TEMPERATURE, "Temperature_vs_Omega_a.png"),
    FigureSpec("temperature_hs", "Hs", "theta",
               "Temperature profile for varying heat source parameter",
               _TEMPERATURE, "Temperature_vs_Hs.png"),
    FigureSpec("temperature_beta", "beta", "theta",
               "Temperature profile for varying magnetic Prandtl number",
               _TEMPERATURE, "Temperature_vs_beta.png"),
    FigureSpec("temperature_lambda", "lambda", "theta",
               "Temperature profile for varying magnetic number",
               _TEMPERATURE, "Temperature_vs_lambda.png"),
)


def get_figure(key):
    """Look up a FigureSpec by key. Returns None if not found."""
    for figure in FIGURES:
        if figure.key == key:
            return figure
    return None


class Curve:
    """
    One solved curve of a figure.

    Parameters
    ----------
    index : int
        Curve number, 1..4.
    label : str
        Legend text.
    style : str
        Matplotlib line style.
    value : float
        Value of the swept parameter for this curve.
    factor : float
        Perturbation factor for this curve.
    profile : physics.similarity.Profile
        Full solution of the run.
    column : str
        State component plotted for this curve.
    """

    def __init__(self, index, label, style, value, factor, profile, column):
        self.index = index
        self.label = label
        self.style = style
        self.value = value
        self.factor = factor
        self.profile = profile
        self.column = column

    @property
    def eta(self):
        return self.profile.eta

    @property
    def values(self):
        return self.profile.column(self.column)


def run_study(config, figure):
    """
    Solve the four curves of one figure.

    Curve i (1-based) takes the swept parameter from pick(table, i),
    every other parameter at its baseline, and factor, label and line
    style from entry i of the per-curve tables.

    Returns
    -------
    list of Curve

    Raises
    ------
    IntegrationError
        If any curve fails to integrate. Remaining curves are not run.
    """
    table = config.table(figure.parameter)
    options = config.solver_options()
    n_curves = len(config.factors)
    curves = []
    for i in range(1, n_curves + 1):
        params = config.baseline()
        params[figure.parameter] = pick(table, i)
        factor = config.factors[i - 1]
        profile = solve_profile(params, factor, **options)
        curves.append(Curve(
            index=i,
            label=config.labels[i - 1],
            style=config.line_styles[i - 1],
            value=params[figure.parameter],
            factor=factor,
            profile=profile,
            column=figure.column,
        ))
    return curves


def plot_curves(figure, curves):
    """Draw the curves of one figure. Returns the matplotlib Figure."""
    fig, ax = plt.subplots(figsize=(8, 6))
    for curve in curves:
        ax.plot(curve.eta, curve.values, linestyle=curve.style,
                linewidth=2, label=curve.label)
    ax.set_title(figure.title)
    ax.set_xlabel(r"$\eta$")
    ax.set_ylabel(figure.ylabel)
    ax.legend(loc="best")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    return fig


def render_figure(figure, curves, out_dir="."):
    """
    Plot the curves and save the figure to out_dir/figure.filename.

    Returns
    -------
    str
        Path of the written PNG file.
    """
    os.makedirs(out_dir, exist_ok=True)
    out_path = os.path.join(out_dir, figure.filename)
    fig = plot_curves(figure, curves)
    try:
        fig.savefig(out_path, dpi=150, bbox_inches="tight")
    finally:
        plt.close(fig)
    return out_path


class SweepReport:
    """Outcome of run_all(): written file paths and failed figure keys."""

    def __init__(self):
        self.written = []
        self.failed = OrderedDict()

    @property
    def ok(self):
        return not self.failed


def run_all(config=None, out_dir=".", figures=None):
    """
    Solve and render every figure in sequence.

    A curve that fails to integrate aborts its figure: nothing is
    written for it, the failure is logged and recorded in the report,
    and the remaining figures still run.

    Parameters
    ----------
    config : SweepConfig, optional
        Defaults to SweepConfig().
    out_dir : str
        Output directory for the PNG files.
    figures : iterable of FigureSpec, optional
        Defaults to FIGURES.

    Returns
    -------
    SweepReport
    """
    config = config or SweepConfig()
    figures = FIGURES if figures is None else figures
    report = SweepReport()
    for figure in figures:
        try:
            curves = run_study(config, figure)
        except IntegrationError as e:
            log.error("Figure '%s' aborted: %s", figure.key, e)
            report.failed[figure.key] = str(e)
            continue
        path = render_figure(figure, curves, out_dir)
        log.info("Saved: %s", path)
        report.written.append(path)
    return report
