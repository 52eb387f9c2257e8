import math

# GRS80 ellipsoid
SEMI_MAJOR_AXIS = 6378137.0
SEMI_MINOR_AXIS = 6356752.314140
ECCENTRICITY_SQUARED = (SEMI_MAJOR_AXIS ** 2 - SEMI_MINOR_AXIS ** 2) / SEMI_MAJOR_AXIS ** 2


def hubeny_distance(lat1, lon1, lat2, lon2):
    """
    Distance in meters between two points using Hubeny's formula.

    Meridional and prime-vertical radii of curvature are taken at the mean
    latitude of the two points, so the result is only accurate for short to
    medium distances. Antipodal points, very large latitude spans and pairs
    straddling the antimeridian are not handled; no fallback is attempted.

    :param lat1: Latitude of the first point in degrees.
    :param lon1: Longitude of the first point in degrees.
    :param lat2: Latitude of the second point in degrees.
    :param lon2: Longitude of the second point in degrees.
    :return: Distance in meters.
    """
    rad_lat1 = math.radians(lat1)
    rad_lon1 = math.radians(lon1)
    rad_lat2 = math.radians(lat2)
    rad_lon2 = math.radians(lon2)

    d_lat = rad_lat1 - rad_lat2
    d_lon = rad_lon1 - rad_lon2
    p = (rad_lat1 + rad_lat2) / 2

    w = math.sqrt(1 - ECCENTRICITY_SQUARED * math.sin(p) ** 2)
    m = SEMI_MAJOR_AXIS * (1 - ECCENTRICITY_SQUARED) / w ** 3  # meridional radius
    n = SEMI_MAJOR_AXIS / w  # prime vertical radius

    dx = d_lat * m
    dy = d_lon * n * math.cos(p)
    return math.sqrt(dx * dx + dy * dy)


def distance_to_reference(location, reference_point):
    """Distance in meters from a (latitude, longitude) tuple to a ReferencePoint."""
    return hubeny_distance(location[0], location[1], reference_point.latitude, reference_point.longitude)
