"""Fixed constants: epochs, time-scale offsets, unit conversions, body radii."""

# Epochs (Julian Day)
J2000 = 2451545.0
J1900 = 2415020.0  # 1900 Jan 0.5, epoch of the lunar and nutation series
B1950 = 2433282.423  # epoch of the Galilean precession correction
GREGORIAN_START_JD = 2299161.0  # first Julian Day number of 1582 Oct 15
DATETIME_EPOCH_JD = 1721425.5  # 0001-01-01 00:00 proleptic Gregorian

# Time: seconds per unit
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
MINUTES_PER_DAY = 1440.0
DAYS_PER_WEEK = 7.0
DAYS_PER_JULIAN_YEAR = 365.25
DAYS_PER_JULIAN_CENTURY = 36525.0
DAYS_PER_JULIAN_MILLENNIUM = 365250.0
TICKS_PER_DAY = 864.0e9  # 100 ns ticks

# Time scales
TT_MINUS_TAI_SECONDS = 32.184

# Distance
AU_KM = 1.496e8
EARTH_EQUATORIAL_RADIUS_KM = 6378.14
JUPITER_RADIUS_KM = 71398.0
SATURN_RADIUS_KM = 60330.0
SUN_RADIUS_KM = 695500.0

# Angle
DEGREES_PER_CIRCLE = 360.0
ARCSEC_PER_DEGREE = 3600.0
ARCSEC_PER_CIRCLE = 1296000.0

# Finite-difference step for velocities (one minute, in days)
VELOCITY_DELTA_DAYS = 1.0 / 1440.0

# Secular terms of the rotation models are held at this bound (Julian centuries)
ROTATION_CLAMP_CENTURIES = 50.0
# Validity bound of the long-term precession model (Julian centuries)
P03LP_CLAMP_CENTURIES = 5000.0

# Earth sidereal rotation (hours) and prime meridian at J2000 (degrees)
EARTH_SIDEREAL_HOURS = 23.9344694
EARTH_MERIDIAN_AT_J2000_DEG = 259.853
