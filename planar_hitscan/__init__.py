"""
2D world-simulation kernel: dense numeric matrices and segment hit-scans.

Public API
----------
NVector, NMatrix
    - float64 vector and matrix with ordered, reproducible arithmetic

StaticPoint, Point
    - read-only and mutable 2D coordinates

Hit, DistancedHit, MISS, nearest
    - hit records and nearest-hit reduction

AbstractEntity, scan_entities
    - base class for hit-scannable entities
"""
import logging

from .entity import AbstractEntity, scan_entities
from .errors import DimensionMismatch, OutOfRange, PlanarHitscanError, ShapeError
from .hit import MISS, DistancedHit, Hit, nearest
from .matrix import NMatrix
from .point import Point, StaticPoint
from .vector import NVector

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AbstractEntity",
    "DimensionMismatch",
    "DistancedHit",
    "Hit",
    "MISS",
    "NMatrix",
    "NVector",
    "OutOfRange",
    "PlanarHitscanError",
    "Point",
    "ShapeError",
    "StaticPoint",
    "nearest",
    "scan_entities",
]
