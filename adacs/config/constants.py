from math import pi

DAY_SECONDS = 86400.0
RPM_CONVERSION = 60.0 / (2.0 * pi)  # rad/s -> rev/min
EHO_PERIOD_S = 365.256363004 * DAY_SECONDS  # sidereal year
