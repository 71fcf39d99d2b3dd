"""Precession of the ecliptic and equator.

The ``_p03`` functions are the polynomial expressions of Capitaine et al.,
"Expressions for IAU 2000 precession quantities" (A&A 412, 2003). The
``_p03lp`` functions are Vondrak's long-period extension, which adds periodic
terms to low-order polynomials and stays sensible over +-500,000 years.

Every function takes T in Julian centuries since J2000 and returns
arcseconds.
"""

from __future__ import annotations

import math

import numpy as np

from orrery_ephemeris.constants import ARCSEC_PER_CIRCLE
from orrery_ephemeris.quaternion import Quaternion

# DE405 obliquity of the ecliptic at J2000 (arcsec)
EPS0_ARCSEC = 84381.40889

# (Pc, Qc, Ps, Qs, period in centuries)
ECLIPTIC_POLE_TERMS: tuple[tuple[float, float, float, float, float], ...] = (
    (486.230527, 2559.065245, -2578.462809, 485.116645, 2308.98),
    (-963.825784, 247.582718, -237.405076, -971.375498, 1831.25),
    (-1868.737098, -957.399054, 1007.593090, -1930.464338, 687.52),
    (-1589.172175, 493.021354, -423.035168, -1634.905683, 729.97),
    (429.442489, -328.301413, 337.266785, 429.594383, 492.21),
    (-2244.742029, -339.969833, 221.240093, -2131.745072, 708.13),
)

# (pc, epsc, ps, epss, period in centuries)
PRECESSION_TERMS: tuple[tuple[float, float, float, float, float], ...] = (
    (-6180.062400, 807.904635, -2434.845716, -2056.455197, 409.90),
    (-2721.869299, -177.959383, 538.034071, -912.727303, 396.15),
    (1460.746498, 371.942696, -1245.689351, 447.710000, 536.91),
    (-1838.488899, -176.029134, 529.220775, -611.297411, 402.90),
    (949.518077, -89.154030, 277.195375, 315.900626, 417.15),
    (32.701460, -336.048179, 945.979710, 12.390157, 288.92),
    (598.054819, -17.415730, -955.163661, -15.922155, 4042.97),
    (-293.145284, -28.084479, 93.894079, -102.870153, 304.90),
    (66.354942, 21.456146, 0.671968, 24.123484, 281.46),
    (18.894136, 30.917011, -184.663935, 2.512708, 204.38),
)


def _periodic(
    terms: tuple[tuple[float, float, float, float, float], ...], t: float
) -> tuple[float, float]:
    first = 0.0
    second = 0.0
    for c1, c2, s1, s2, period in terms:
        theta = 2.0 * math.pi * t / period
        s, c = math.sin(theta), math.cos(theta)
        first += c1 * c + s1 * s
        second += c2 * c + s2 * s
    return first, second


def ecliptic_pole_p03lp(t: float) -> tuple[float, float]:
    """Pole of the ecliptic of date on the J2000 ecliptic, long-period model.

    P_A = sin(pi_A) sin(Pi_A) and Q_A = sin(pi_A) cos(Pi_A), expressed in
    arcseconds (divide by 1296000 / 2pi for the dimensionless values).

    Returns:
        (P_A, Q_A) in arcseconds.
    """
    t2 = t * t
    t3 = t2 * t
    p_a = 5750.804069 + 0.1948311 * t - 0.00016739 * t2 - 4.8e-8 * t3
    q_a = -1673.999018 + 0.3474459 * t + 0.00011243 * t2 - 6.4e-8 * t3
    dp, dq = _periodic(ECLIPTIC_POLE_TERMS, t)
    return p_a + dp, q_a + dq


def obliquity_p03lp(t: float) -> tuple[float, float]:
    """General precession in longitude and mean obliquity, long-period model.

    Returns:
        (p_A, eps_A) in arcseconds.
    """
    t2 = t * t
    t3 = t2 * t
    p_a = 7907.295950 + 5044.374034 * t - 0.00713473 * t2 + 6e-9 * t3
    eps_a = 83973.876448 - 0.0425899 * t - 0.00000113 * t2
    dp, deps = _periodic(PRECESSION_TERMS, t)
    return p_a + dp, eps_a + deps


def equatorial_precession_p03(t: float) -> tuple[float, float, float]:
    """Equatorial precession angles (zeta_A, z_A, theta_A) in arcseconds."""
    t2 = t * t
    t3 = t2 * t
    t4 = t3 * t
    t5 = t4 * t
    zeta = (
        2.650545 + 2306.083227 * t + 0.2988499 * t2 + 0.01801828 * t3
        - 0.000005971 * t4 - 0.0000003173 * t5
    )
    z = (
        -2.650545 + 2306.077181 * t + 1.0927348 * t2 + 0.01826837 * t3
        - 0.000028596 * t4 - 0.0000002904 * t5
    )
    theta = (
        2004.191903 * t - 0.4294934 * t2 - 0.04182264 * t3
        - 0.000007089 * t4 - 0.0000001274 * t5
    )
    return zeta, z, theta


def ecliptic_pole_p03(t: float) -> tuple[float, float]:
    """(P_A, Q_A) in arcseconds from the P03 polynomials."""
    t2 = t * t
    t3 = t2 * t
    t4 = t3 * t
    t5 = t4 * t
    p_a = 4.199094 * t + 0.1939873 * t2 - 0.00022466 * t3 - 0.000000912 * t4 + 0.0000000120 * t5
    q_a = -46.811015 * t + 0.0510283 * t2 + 0.00052413 * t3 - 0.00000646 * t4 - 0.0000000172 * t5
    return p_a, q_a


def ecliptic_precession_angles_p03(t: float) -> tuple[float, float]:
    """Inclination pi_A and node Pi_A of the ecliptic of date on the J2000 ecliptic.

    Returns:
        (pi_A, Pi_A) in arcseconds.
    """
    t2 = t * t
    t3 = t2 * t
    t4 = t3 * t
    t5 = t4 * t
    pi_a = 46.998973 * t - 0.0334926 * t2 - 0.00012559 * t3 + 0.000000113 * t4 - 0.0000000022 * t5
    big_pi_a = (
        629546.7936 - 867.95758 * t + 0.157992 * t2 - 0.0005371 * t3
        - 0.00004797 * t4 + 0.000000072 * t5
    )
    return pi_a, big_pi_a


def obliquity_p03(t: float) -> tuple[float, float]:
    """General precession and mean obliquity from the P03 polynomials.

    Returns:
        (p_A, eps_A) in arcseconds.
    """
    t2 = t * t
    t3 = t2 * t
    t4 = t3 * t
    t5 = t4 * t
    eps_a = (
        EPS0_ARCSEC - 46.836769 * t - 0.0001831 * t2 + 0.00200340 * t3
        - 0.000000576 * t4 - 0.0000000434 * t5
    )
    p_a = 5028.796195 * t + 1.1054348 * t2 + 0.00007964 * t3 - 0.000023857 * t4 - 0.0000000383 * t5
    return p_a, eps_a


def _arcsec_to_radians(value: float) -> float:
    return value * 2.0 * math.pi / ARCSEC_PER_CIRCLE


def mean_equator_rotation_p03lp(t: float) -> Quaternion:
    """Rotation from the J2000 ecliptic frame to the mean equator and equinox of date.

    Built from the long-period ecliptic pole, general precession and
    obliquity; the frame is right-handed with +Z toward the pole.
    """
    p_a, eps_a = obliquity_p03lp(t)
    pole_p, pole_q = ecliptic_pole_p03lp(t)
    obliquity = _arcsec_to_radians(eps_a)
    precession = _arcsec_to_radians(p_a)

    p = _arcsec_to_radians(pole_p)
    q = _arcsec_to_radians(pole_q)
    pi_a = math.asin(math.sqrt(p * p + q * q))
    big_pi_a = math.atan2(p, q)

    node = Quaternion.rotate_z(big_pi_a)
    ecliptic_of_date = node.conjugate() * Quaternion.rotate_x(pi_a) * node
    return Quaternion.rotate_x(obliquity) * Quaternion.rotate_z(-precession) * ecliptic_of_date.conjugate()


def precession_matrix_p03lp(t: float) -> np.ndarray:
    """3x3 matrix form of :func:`mean_equator_rotation_p03lp`."""
    return mean_equator_rotation_p03lp(t).to_matrix()
