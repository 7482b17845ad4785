# Nutation of the Earth's rotation axis: IAU 1980 and IAU 2000A theories
