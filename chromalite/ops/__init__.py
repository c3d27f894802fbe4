"""
Operations derived from the color views: mixing, lightness adjustment and
perceptual distance. Every function accepts anything ``chromalite.color``
accepts (Color, notation string, 0xRRGGBB int, rgb(a) tuple).
"""
from .mix import mix, DEFAULT_MIX_SPACE, DEFAULT_MIX_RATIO
from .darken import darken, darker, brighten, brighter, KN
from .distance import distance, DEFAULT_DISTANCE_SPACE

__all__ = [
    'mix',
    'darken',
    'darker',
    'brighten',
    'brighter',
    'distance',
    'KN',
    'DEFAULT_MIX_SPACE',
    'DEFAULT_MIX_RATIO',
    'DEFAULT_DISTANCE_SPACE',
]
