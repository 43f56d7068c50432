# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of fixedgrid."""

from .axis import Axis
from .shape import Shape, Coord
from .grid import Grid
from .nested import NestedLists
from .monoid import Monoid

from .options import Options, ConversionOptions, OptionType

from .errors import GridError, InvalidShape, InvalidLength, OutOfBounds, ShapeMismatch

from .fixedgrid import FixedGrid
