"""
Our data: named gradient keypoints as (hex color, position) pairs.
Sequential and diverging schemes after ColorBrewer. Positions are sorted ascending.
"""
DEFAULT_GRADIENT = "blackwhite"

GRADIENTS: dict[str, list[tuple[str, float]]] = {
    "fire": [
        ("#ffffcc", 0.0),
        ("#ffeda0", 0.111111),
        ("#fed976", 0.333333),
        ("#feb24c", 0.444444),
        ("#fd8d3c", 0.555556),
        ("#fc4e2a", 0.666667),
        ("#e31a1c", 0.777778),
        ("#bd0026", 0.888889),
        ("#800026", 1.0),
    ],
    "blackred": [
        ("#b2182b", 0.0),
        ("#d6604d", 0.111111),
        ("#f4a582", 0.333333),
        ("#fddbc7", 0.444444),
        ("#ffffff", 0.555556),
        ("#e0e0e0", 0.666667),
        ("#bababa", 0.777778),
        ("#878787", 0.888889),
        ("#4d4d4d", 1.0),
    ],
    "rainbow": [
        ("#9e0142", 0.0),
        ("#d53e4f", 0.1),
        ("#f46d43", 0.2),
        ("#fdae61", 0.3),
        ("#fee090", 0.4),
        ("#ffffbf", 0.5),
        ("#e6f598", 0.6),
        ("#abdda4", 0.7),
        ("#66c2a5", 0.8),
        ("#3288bd", 0.9),
        ("#5e4fa2", 1.0),
    ],
    "pink": [
        ("#f7f4f9", 0.0),
        ("#e7e1ef", 0.111111),
        ("#d4b9da", 0.333333),
        ("#c994c7", 0.444444),
        ("#df65b0", 0.555556),
        ("#e7298a", 0.666667),
        ("#ce1256", 0.777778),
        ("#980043", 0.888889),
        ("#67001f", 1.0),
    ],
    "rainbow2": [
        ("#5e4fa2", 0.0),
        ("#3288bd", 0.181818),
        ("#66c2a5", 0.272727),
        ("#abdda4", 0.363636),
        ("#e6f598", 0.454545),
        ("#ffffbf", 0.545455),
        ("#fee08b", 0.636364),
        ("#fdae61", 0.727273),
        ("#f46d43", 0.818182),
        ("#d53e4f", 0.909091),
        ("#9e0142", 1.0),
    ],
    "blackwhite": [
        ("#000000", 0.0),
        ("#ffffff", 1.0),
    ],
    "orangepurple": [
        ("#7f3b08", 0.0),
        ("#b35806", 0.181818),
        ("#e08214", 0.272727),
        ("#fdb863", 0.363636),
        ("#fee0b6", 0.454545),
        ("#f7f7f7", 0.545455),
        ("#d8daeb", 0.636364),
        ("#b2abd2", 0.727273),
        ("#8073ac", 0.818182),
        ("#542788", 0.909091),
        ("#2d004b", 1.0),
    ],
    "greenpink": [
        ("#276419", 0.0),
        ("#4d9221", 0.181818),
        ("#7fbc41", 0.272727),
        ("#b8e186", 0.363636),
        ("#e6f5d0", 0.454545),
        ("#f7f7f7", 0.545455),
        ("#fde0ef", 0.636364),
        ("#f1b6da", 0.727273),
        ("#de77ae", 0.818182),
        ("#c51b7d", 0.909091),
        ("#8e0152", 1.0),
    ],
}
