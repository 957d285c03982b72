from __future__ import annotations

# Periodic-term tables for the Sun/Moon engine.
#
# PerturbationTerm rows are (l', M, F, D, amplitude) where
#   l' = Moon's mean anomaly, M = Sun's mean anomaly,
#   F  = Moon's argument of latitude, D = mean elongation.

from .series import PerturbationTerm as P, SineTerm


# ------------------------------------------------------------
# Moon longitude, primary series (arc-seconds).
# Rows with M != 0 are scaled by (1 - 6.832e-8 * days), twice when |M| = 2;
# rows with F != 0 are scaled by the squared gravity factor.
# ------------------------------------------------------------

MOON_PRIMARY = (
    P(0, 0, 0, 4, 13.902),
    P(0, 0, 0, 2, 2369.912),
    P(1, 0, 0, 4, 1.979),
    P(1, 0, 0, 2, 191.953),
    P(1, 0, 0, 0, 22639.5),
    P(1, 0, 0, -2, -4586.465),
    P(1, 0, 0, -4, -38.428),
    P(1, 0, 0, -6, -0.393),
    P(0, 1, 0, 4, -0.289),
    P(0, 1, 0, 2, -24.42),
    P(0, 1, 0, 0, -668.146),
    P(0, 1, 0, -2, -165.145),
    P(0, 1, 0, -4, -1.877),
    P(0, 0, 0, 3, 0.403),
    P(0, 0, 0, 1, -125.154),
    P(2, 0, 0, 4, 0.213),
    P(2, 0, 0, 2, 14.387),
    P(2, 0, 0, 0, 769.016),
    P(2, 0, 0, -2, -211.656),
    P(2, 0, 0, -4, -30.773),
    P(2, 0, 0, -6, -0.57),
    P(1, 1, 0, 2, -2.921),
    P(1, 1, 0, 0, -109.673),
    P(1, 1, 0, -2, -205.962),
    P(1, 1, 0, -4, -4.391),
    P(1, -1, 0, 4, 0.283),
    P(1, -1, 0, 2, 14.577),
    P(1, -1, 0, 0, 147.687),
    P(1, -1, 0, -2, 28.475),
    P(1, -1, 0, -4, 0.636),
    P(0, 2, 0, 2, -0.189),
    P(0, 2, 0, 0, -7.486),
    P(0, 2, 0, -2, -8.096),
    P(0, 0, 2, 2, -5.741),
    P(0, 0, 2, 0, -411.608),
    P(0, 0, 2, -2, -55.173),
    P(0, 0, 2, -4, 0.025),
    P(1, 0, 0, 1, -8.466),
    P(1, 0, 0, -1, 18.609),
    P(1, 0, 0, -3, 3.215),
    P(0, 1, 0, 1, 18.023),
    P(0, 1, 0, -1, 0.56),
    P(3, 0, 0, 2, 1.06),
    P(3, 0, 0, 0, 36.124),
    P(3, 0, 0, -2, -13.193),
    P(3, 0, 0, -4, -1.187),
    P(3, 0, 0, -6, -0.293),
    P(2, 1, 0, 2, -0.29),
    P(2, 1, 0, 0, -7.649),
    P(2, 1, 0, -2, -8.627),
    P(2, 1, 0, -4, -2.74),
    P(2, -1, 0, 2, 1.181),
    P(2, -1, 0, 0, 9.703),
    P(2, -1, 0, -2, -2.494),
    P(2, -1, 0, -4, 0.36),
    P(1, 2, 0, 0, -1.167),
    P(1, 2, 0, -2, -7.412),
    P(1, 2, 0, -4, -0.311),
    P(1, -2, 0, 2, 0.757),
    P(1, -2, 0, 0, 2.58),
    P(1, -2, 0, -2, 2.533),
    P(0, 3, 0, -2, -0.344),
    P(1, 0, 2, 2, -0.992),
    P(1, 0, 2, 0, -45.099),
    P(1, 0, 2, -2, -0.179),
    P(1, 0, -2, 2, -6.382),
    P(1, 0, -2, 0, 39.528),
    P(1, 0, -2, -2, 9.366),
    P(0, 1, 2, 0, 0.415),
    P(0, 1, 2, -2, -2.152),
    P(0, 1, -2, 2, -1.44),
    P(0, 1, -2, -2, 0.384),
    P(2, 0, 0, 1, -0.586),
    P(2, 0, 0, -1, 1.75),
    P(2, 0, 0, -3, 1.225),
    P(1, 1, 0, 1, 1.267),
    P(1, -1, 0, -1, -1.089),
    P(0, 0, 2, -1, 0.584),
    P(4, 0, 0, 0, 1.938),
    P(4, 0, 0, -2, -0.952),
    P(3, 1, 0, 0, -0.551),
    P(3, 1, 0, -2, -0.482),
    P(3, -1, 0, 0, 0.681),
    P(2, 0, 2, 0, -3.996),
    P(2, 0, 2, -2, 0.557),
    P(2, 0, -2, 2, -0.459),
    P(2, 0, -2, 0, -1.298),
    P(2, 0, -2, -2, 0.538),
    P(1, 1, -2, -2, 0.426),
    P(1, -1, 2, 0, -0.304),
    P(1, -1, -2, 2, -0.372),
    P(0, 0, 4, 0, 0.418),
    P(2, -1, 0, -1, -0.352),
)

# ------------------------------------------------------------
# Moon longitude, secondary series (arc-seconds, unscaled).
# ------------------------------------------------------------

MOON_SECONDARY = (
    P(0, 0, 0, 6, 0.127),
    P(0, 2, 0, -4, -0.151),
    P(0, 0, 2, 4, -0.085),
    P(0, 1, 0, 3, 0.15),
    P(2, 1, 0, -6, -0.091),
    P(0, 3, 0, 0, -0.103),
    P(1, 0, 2, -4, -0.301),
    P(1, 0, -2, -4, 0.202),
    P(1, 1, 0, -1, 0.137),
    P(1, 1, 0, -3, 0.233),
    P(1, -1, 0, 1, -0.122),
    P(1, -1, 0, -3, -0.276),
    P(0, 0, 2, 1, 0.255),
    P(0, 0, 2, -3, 0.254),
    P(3, 1, 0, -4, -0.1),
    P(3, -1, 0, -2, -0.183),
    P(2, 2, 0, -2, -0.297),
    P(2, 2, 0, -4, -0.161),
    P(2, -2, 0, 0, 0.197),
    P(2, -2, 0, -2, 0.254),
    P(1, 3, 0, -2, -0.25),
    P(2, 0, 2, 2, -0.123),
    P(2, 0, -2, -4, 0.173),
    P(1, 1, 2, 0, 0.263),
    P(3, 0, 0, -1, 0.13),
    P(5, 0, 0, 0, 0.113),
    P(3, 0, 2, -2, 0.092),
)

# ------------------------------------------------------------
# Moon angular velocity: 13.176397 + Σ amp * cos(arg)  (degrees/day)
# ------------------------------------------------------------

MOON_MEAN_MOTION = 13.176397

MOON_VELOCITY = (
    P(1, 0, 0, 0, 1.434006),
    P(0, 0, 0, 2, 0.280135),
    P(-1, 0, 0, 2, 0.251632),
    P(2, 0, 0, 0, 0.09742),
    P(0, 0, 2, 0, -0.052799),
    P(1, 0, 0, 2, 0.034848),
    P(0, -1, 0, 2, 0.018732),
    P(-1, -1, 0, 2, 0.010316),
    P(-1, 1, 0, 0, 0.008649),
    P(1, 0, 2, 0, -0.008642),
    P(1, 1, 0, 0, -0.007471),
    P(0, 0, 0, 1, -0.007387),
    P(3, 0, 0, 0, 0.006864),
    P(-1, 0, 0, 4, 0.00665),
    P(2, 0, 0, 2, 0.003523),
    P(-2, 0, 0, 4, 0.003377),
    P(0, 0, 0, 4, 0.003287),
    P(0, 1, 0, 0, -0.003193),
    P(0, 1, 0, 2, -0.003003),
    P(1, -1, 0, 2, 0.002577),
    P(-1, 0, 2, 0, -0.002567),
    P(-2, 0, 0, 2, -0.001794),
    P(1, 0, -2, -2, -0.001716),
    P(-1, 1, 0, 2, -0.001698),
    P(0, 0, 2, 2, -0.001415),
    P(2, -1, 0, 0, 0.001183),
    P(0, 1, 0, 1, 0.00115),
    P(1, 0, 0, 1, -0.001035),
    P(2, 0, 2, 0, -0.001019),
    P(2, 1, 0, 0, -0.001006),
)

# ------------------------------------------------------------
# Planetary perturbations of the Moon: amp * sin(2pi (phase + rate * days))
# (amp in arc-seconds, phase in turns, rate in turns/day)
# ------------------------------------------------------------

MOON_PLANETARY = (
    (0.822, 0.3248, -0.0017125594),
    (0.307, 0.14905, -0.0034251187),
    (0.348, 0.68266, -0.0006873156),
    (0.662, 0.65162, 0.0365724168),
    (0.643, 0.88098, -0.0025069941),
    (1.137, 0.85823, 0.036448727),
    (0.436, 0.71892, 0.036217918),
    (0.327, 0.97639, 0.000173491),
)

# ------------------------------------------------------------
# New moon: periodic correction to the mean phase (days).
# Arguments are the Sun's and Moon's anomalies and F at the lunation;
# the elongation multiplier is always zero.
# ------------------------------------------------------------

NEW_MOON_TERMS = (
    P(0, 1, 0, 0, 0.1734),
    P(0, 2, 0, 0, 0.0021),
    P(1, 0, 0, 0, -0.4068),
    P(2, 0, 0, 0, 0.0161),
    P(3, 0, 0, 0, -0.0004),
    P(0, 0, 2, 0, 0.0104),
    P(1, 1, 0, 0, -0.0051),
    P(-1, 1, 0, 0, -0.0074),
    P(0, 1, 2, 0, 0.0004),
    P(0, -1, 2, 0, -0.0004),
    P(1, 0, 2, 0, -0.0006),
    P(-1, 0, 2, 0, 0.001),
    P(2, 1, 0, 0, 0.0005),
)

# ------------------------------------------------------------
# Nutation in longitude (arc-seconds).
# Multipliers over (Ls, L, M, M', D, Omega): solar and lunar mean
# longitudes, solar and lunar anomalies, elongation, ascending node.
# ------------------------------------------------------------

NUTATION_TERMS = (
    SineTerm((0, 0, 0, 0, 0, 1), -17.2327),
    SineTerm((0, 0, 0, 0, 0, 2), 0.2088),
    SineTerm((0, 0, 0, 1, 0, 0), 0.0675),
    SineTerm((0, 0, 0, 1, -2, 0), -0.0149),
    SineTerm((0, 2, 0, 0, 0, -1), -0.0342),
    SineTerm((0, 2, 0, -1, 0, 0), 0.0114),
    SineTerm((0, 2, 0, 0, 0, 0), -0.2037),
    SineTerm((0, 2, 0, 1, 0, 0), -0.0261),
    SineTerm((2, 0, 0, 0, 0, -1), 0.0124),
    SineTerm((2, 0, -1, 0, 0, 0), 0.0214),
    SineTerm((2, 0, 0, 0, 0, 0), -1.2729),
    SineTerm((2, 0, 1, 0, 0, 0), -0.0497),
    SineTerm((0, 0, 1, 0, 0, 0), 0.1261),
)
