# SPDX-FileCopyrightText: Copyright DB InfraGO AG
# SPDX-License-Identifier: Apache-2.0
"""Various diagramming related tools.

This module is used to construct diagrams out of geometric shapes,
which can then be serialized with :mod:`svgdiagrams.svg`.
"""
# isort: off
from ._vector2d import *
from ._box import *

from .capstyle import *
from ._markers import *
from ._text import *
from ._diagram import *
from ._connectors import *

import typing as t

if not t.TYPE_CHECKING:
    from ._vector2d import __all__ as _all1
    from ._box import __all__ as _all2
    from .capstyle import __all__ as _all3
    from ._markers import __all__ as _all4
    from ._text import __all__ as _all5
    from ._diagram import __all__ as _all6
    from ._connectors import __all__ as _all7

    __all__ = [*_all1, *_all2, *_all3, *_all4, *_all5, *_all6, *_all7]

    del _all1, _all2, _all3, _all4, _all5, _all6, _all7
del t
