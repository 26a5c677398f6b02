"""Washington ZIP centroid reference table.

Maps 5-digit ZIP -> (latitude, longitude). Starter set; ZIPs that are not
listed fall back to the ZIP3 heuristic in ``movequote.distance``.
Public ZCTA centroid datasets are the natural source for additions.
"""

from __future__ import annotations

import re

from movequote.exceptions import ReferenceDataError

ZIP_CENTROIDS: dict[str, tuple[float, float]] = {
    # Seattle
    "98116": (47.5776, -122.3869),  # West Seattle
    "98103": (47.6727, -122.3418),
    "98110": (47.6474, -122.5340),  # Bainbridge Island
    "98101": (47.6105, -122.3343),
    # Eastside
    "98004": (47.6154, -122.2046),  # Bellevue
    # Snohomish / Whatcom
    "98201": (47.9887, -122.2006),  # Everett
    "98225": (48.7519, -122.4787),  # Bellingham
    # Tacoma / Olympia
    "98402": (47.2536, -122.4443),
    "98501": (47.0379, -122.9007),
    # Bremerton / Kitsap
    "98310": (47.5854, -122.6237),
    # Aberdeen / Grays Harbor
    "98520": (46.9754, -123.8157),
    # Spokane
    "99201": (47.6628, -117.4350),
}

_ZIP_RE = re.compile(r"[0-9]{5}")


def validate_centroids(centroids: dict[str, tuple[float, float]]) -> None:
    """Check that every key is a 5-digit ZIP and every point is a valid lat/lng.

    Raises:
        ReferenceDataError: On the first malformed entry.
    """
    for zip_code, (lat, lng) in centroids.items():
        if not _ZIP_RE.fullmatch(zip_code):
            msg = f"Centroid key {zip_code!r} is not a 5-digit ZIP"
            raise ReferenceDataError(msg)
        if not (-90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0):
            msg = f"Centroid for {zip_code} is out of range: ({lat}, {lng})"
            raise ReferenceDataError(msg)
