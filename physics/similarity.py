"""
Stretching-sheet similarity model -- ODE right-hand side and solver.

The boundary-layer equations reduce, under the similarity transform,
to five first-order ODEs in the coordinate eta for the state

    Y = [F, F', G, G', theta]

where F' is the stream-wise velocity, G the cross-flow (vertical)
velocity and theta the dimensionless temperature:

    dF/deta      = F'
    dF'/deta     = -(F')^2 + F' - beta * (G')^2 * factor
    dG/deta      = G'
    dG'/deta     = -(G')^2 + G' * factor
    dtheta/deta  = -theta * factor

The Weissenberg number We and the magnetic number lambda are part of
the model's parameter set but do not enter the equations above. They
are accepted by rhs() and passed through unchanged; the equations are
kept exactly as derived.

Since dtheta = -theta*factor with theta(0) = 1, the temperature has
the closed form theta(eta) = exp(-factor * eta), which is what the
test suite checks the solver against.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import logging

import numpy as np
from scipy.integrate import solve_ivp

from physics import constants

log = logging.getLogger(__name__)


class IntegrationError(RuntimeError):
    """
    The solver could not integrate the system over the eta domain.

    Attributes
    ----------
    params : dict
        Physical parameters of the failed run.
    factor : float
        Perturbation factor of the failed run.
    message : str
        Solver status message.
    """

    def __init__(self, message, params=None, factor=None):
        self.message = message
        self.params = dict(params or {})
        self.factor = factor
        super().__init__(
            "Integration failed ({}): factor={} params={}".format(
                message, factor, self.params))


def rhs(eta, y, we, beta, lam, factor):
    """
    Right-hand side dY/deta of the similarity system.

    Parameters
    ----------
    eta : float
        Similarity coordinate. Unused; present for the solver interface.
    y : sequence of float
        State [F, F', G, G', theta]. Must have exactly 5 components.
    we : float
        Weissenberg number (not used by the equations).
    beta : float
        Magnetic Prandtl number.
    lam : float
        Magnetic number (not used by the equations).
    factor : float
        Curve perturbation factor.

    Returns
    -------
    list of float
        [dF, dF', dG, dG', dtheta].

    Raises
    ------
    ValueError
        If y does not have exactly 5 components.
    """
    if len(y) != constants.STATE_SIZE:
        raise ValueError(
            "State vector must have {} components, got {}".format(
                constants.STATE_SIZE, len(y)))
    _f, fp, _g, gp, theta = y
    return [
        fp,
        -fp * fp + fp - beta * gp * gp * factor,
        gp,
        -gp * gp + gp * factor,
        -theta * factor,
    ]


def pick(table, i):
    """
    Select the entry of a value table for curve number i (1-based).

    The lookup wraps every len(table) entries, so with a 3-entry table
    curves 1, 2, 3 take entries 0, 1, 2 and curve 4 takes entry 0 again.

    Raises
    ------
    ValueError
        If the table is empty or i < 1.
    """
    if not table:
        raise ValueError("Cannot pick from an empty table")
    if i < 1:
        raise ValueError("Curve index is 1-based, got {}".format(i))
    return table[(i - 1) % len(table)]


def eta_grid(eta_start=constants.ETA_START, eta_end=constants.ETA_END,
             num_points=constants.NUM_POINTS):
    """Uniform sample grid over [eta_start, eta_end], endpoints included."""
    return np.linspace(eta_start, eta_end, int(num_points))


class Profile:
    """
    Solution of one integration run sampled on the eta grid.

    Parameters
    ----------
    eta : ndarray, shape (N,)
        Sample points.
    y : ndarray, shape (5, N)
        State at each sample, rows ordered as constants.STATE_NAMES.
    params : dict
        Physical parameters used for the run.
    factor : float
        Perturbation factor used for the run.
    nfev : int
        Number of right-hand side evaluations.
    """

    def __init__(self, eta, y, params, factor, nfev=0):
        self.eta = eta
        self.y = y
        self.params = params
        self.factor = factor
        self.nfev = nfev

    def column(self, name):
        """Return the state row for name ('F', 'Fp', 'G', 'Gp' or 'theta')."""
        try:
            idx = constants.STATE_NAMES.index(name)
        except ValueError:
            raise ValueError(
                "Unknown state component '{}'; expected one of {}".format(
                    name, ", ".join(constants.STATE_NAMES))) from None
        return self.y[idx]


def solve_profile(params, factor, eta_start=constants.ETA_START,
                  eta_end=constants.ETA_END, num_points=constants.NUM_POINTS,
                  y0=constants.Y0, rtol=constants.RTOL, atol=constants.ATOL,
                  max_step=constants.MAX_STEP, method=constants.METHOD):
    """
    Integrate the similarity system once.

    Parameters
    ----------
    params : dict
        Must contain 'We', 'beta' and 'lambda'. Any other keys
        (e.g. 'Hs', 'Omega_a') are recorded but do not reach the ODE.
    factor : float
        Curve perturbation factor.
    eta_start, eta_end : float
        Integration domain.
    num_points : int
        Number of output samples.
    y0 : sequence of float
        Initial state at eta_start.
    rtol, atol, max_step : float
        Solver tolerances.
    method : str
        scipy.integrate.solve_ivp method name.

    Returns
    -------
    Profile

    Raises
    ------
    IntegrationError
        If the solver reports failure or the solution is not finite.
    """
    if len(y0) != constants.STATE_SIZE:
        raise ValueError(
            "Initial condition must have {} components, got {}".format(
                constants.STATE_SIZE, len(y0)))

    eta = eta_grid(eta_start, eta_end, num_points)
    args = (params["We"], params["beta"], params["lambda"], factor)

    log.debug("Solving profile: params=%s factor=%s", params, factor)
    try:
        sol = solve_ivp(
            rhs,
            (eta_start, eta_end),
            list(y0),
            method=method,
            t_eval=eta,
            args=args,
            rtol=rtol,
            atol=atol,
            max_step=max_step,
        )
    except (ValueError, FloatingPointError, OverflowError) as e:
        # Overflow inside the implicit step (e.g. LU of a non-finite Jacobian)
        raise IntegrationError(str(e), params, factor) from e

    if not sol.success:
        raise IntegrationError(sol.message, params, factor)
    if not np.all(np.isfinite(sol.y)):
        raise IntegrationError("non-finite state", params, factor)

    log.debug("Solved profile: %d RHS evaluations", sol.nfev)
    return Profile(sol.t, sol.y, dict(params), factor, nfev=sol.nfev)
